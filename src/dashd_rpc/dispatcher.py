"""Turn a named call and its positional arguments into an :class:`RpcRequest`."""

from __future__ import annotations

import random
from urllib.parse import quote
from collections.abc import Mapping, Sequence
from typing import Any

from .coercion import convert_args
from .constants import REQUEST_ID_LIMIT, ROOT_PATH, WALLET_PATH_PREFIX
from .signatures import MethodSignature
from .types import RpcRequest


def new_request_id() -> int:
    """Draw a random request id in ``[0, REQUEST_ID_LIMIT)``."""
    return random.randrange(REQUEST_ID_LIMIT)


def split_wallet_path(args: Sequence[Any]) -> tuple[str, list[Any]]:
    """Pop a trailing ``{"wallet": name}`` extras object off ``args``.

    The wallet name selects the ``/wallet/<name>`` endpoint and is never sent
    to the node as a parameter. The name is percent-encoded into the path.
    Returns the path and the remaining arguments.
    """
    remaining = list(args)
    if remaining:
        last = remaining[-1]
        if isinstance(last, Mapping) and last.get("wallet"):
            remaining.pop()
            return f"{WALLET_PATH_PREFIX}{quote(str(last['wallet']), safe='')}", remaining
    return ROOT_PATH, remaining


def build_request(
    signature: MethodSignature,
    args: Sequence[Any],
    *,
    jsonrpc: str | None = None,
) -> RpcRequest:
    path, remaining = split_wallet_path(args)
    params = convert_args(signature.arg_types, remaining)
    return RpcRequest(
        path=path,
        method=signature.wire_name,
        params=params,
        id=new_request_id(),
        jsonrpc=jsonrpc,
    )
