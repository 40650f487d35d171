"""JSON-RPC 2.0 batches: queue several calls and send them in one POST."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import replace
from types import TracebackType
from typing import Any

from .dispatcher import build_request, new_request_id
from .exceptions import RemoteError, TransportError, ValidationError
from .signatures import find_signature
from .transport import HttpTransport
from .types import RpcRequest, RpcResponse, TransportErrorKind

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"


class BatchRequest:
    """Collects calls for a single batched round-trip.

    Calls are queued with ``batch.add("getBlockHash", 1)`` or the attribute
    form ``batch.getBlockHash(1)``. Every queued call must target the same
    wallet path. Used as a context manager the batch is sent on a clean exit
    and the replies are available from :attr:`responses`.
    """

    def __init__(
        self,
        transport: HttpTransport,
        gate: AbstractContextManager[object],
    ) -> None:
        self._transport = transport
        self._gate = gate
        self._requests: list[RpcRequest] = []
        self.responses: list[RpcResponse] = []

    @property
    def requests(self) -> tuple[RpcRequest, ...]:
        return tuple(self._requests)

    def add(self, name: str, *args: Any) -> RpcRequest:
        signature = find_signature(name)
        if signature is None:
            raise ValidationError(f"Unknown RPC method '{name}'", field="method", value=name)

        request = build_request(signature, args, jsonrpc=JSONRPC_VERSION)
        if self._requests and request.path != self._requests[0].path:
            raise ValidationError(
                "All calls in a batch must target the same wallet path",
                field="path",
                value=request.path,
                details={"expected": self._requests[0].path},
            )

        taken = {queued.id for queued in self._requests}
        while request.id in taken:
            request = replace(request, id=new_request_id())
        self._requests.append(request)
        return request

    def __getattr__(self, name: str) -> Callable[..., RpcRequest]:
        if name.startswith("_") or find_signature(name) is None:
            raise AttributeError(name)

        def queue(*args: Any) -> RpcRequest:
            return self.add(name, *args)

        return queue

    def send(self) -> list[RpcResponse]:
        """POST the queued calls and return their replies in queue order."""
        if not self._requests:
            self.responses = []
            return self.responses

        path = self._requests[0].path
        with self._gate:
            reply = self._transport.post(path, [request.payload() for request in self._requests])

        if isinstance(reply, dict) and reply.get("error") is not None:
            raise RemoteError.from_envelope(reply["error"], request_id=reply.get("id"))
        if not isinstance(reply, list):
            raise TransportError(
                "Expected a JSON-RPC array in response to a batch",
                TransportErrorKind.PARSE_ERROR,
                details={"response": reply},
            )

        by_id = {entry.get("id"): entry for entry in reply if isinstance(entry, dict)}
        responses: list[RpcResponse] = []
        for request in self._requests:
            envelope = by_id.get(request.id)
            if envelope is None:
                raise TransportError(
                    f"Batch reply is missing the response to {request.method} (id={request.id})",
                    TransportErrorKind.PARSE_ERROR,
                    details={"response": reply},
                )
            responses.append(RpcResponse.from_envelope(envelope))

        logger.debug("Batch of %s calls completed", len(responses))
        self.responses = responses
        return responses

    def __enter__(self) -> BatchRequest:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.send()
