"""Dash Core JSON-RPC client exposing one method per node command."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from types import TracebackType
from typing import Any

import requests

from .batch import BatchRequest
from .config import ClientConfig
from .dispatcher import build_request, new_request_id
from .exceptions import RemoteError, ValidationError
from .gate import make_gate
from .readiness import ReadinessMonitor
from .signatures import METHOD_SIGNATURES, MethodSignature, find_signature
from .transport import HttpTransport
from .types import ConnectionState

logger = logging.getLogger(__name__)

RpcMethod = Callable[..., Any]


class DashRpcClient:
    """Call dashd RPC commands as Python methods.

    Every command in :data:`~dashd_rpc.signatures.METHOD_SIGNATURES` is
    available under its canonical name and an all-lowercase alias::

        client = DashRpcClient(host="127.0.0.1", port=19898, protocol="http")
        client.init()
        client.getBlockCount()
        client.getbalance("*", 6, {"wallet": "savings"})

    A trailing ``{"wallet": name}`` argument routes the call to
    ``/wallet/<name>``. Each method returns the ``result`` member of the
    reply; failures are raised as :class:`~dashd_rpc.exceptions.DashRpcError`
    subclasses.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] | None = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = ClientConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)

        self._config = config
        self._transport = HttpTransport(config, session)
        self._gate = make_gate(config.max_concurrent_calls)
        self._state = ConnectionState()

        monitor_options: dict[str, Any] = {"on_connected": config.on_connected}
        if sleep is not None:
            monitor_options["sleep"] = sleep
        self._readiness = ReadinessMonitor(
            self._fetch_chain_tips,
            self._state,
            endpoint=f"{config.host}:{config.port}",
            **monitor_options,
        )

        self._methods: dict[str, RpcMethod] = {}
        for signature in METHOD_SIGNATURES.values():
            method = self._bind(signature)
            self._methods[signature.name] = method
            self._methods[signature.wire_name] = method

    # ------------------------------------------------------------------
    # Method surface
    # ------------------------------------------------------------------
    def __getattr__(self, name: str) -> RpcMethod:
        methods = self.__dict__.get("_methods")
        if methods is not None and name in methods:
            return methods[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._methods))

    def call(self, name: str, *args: Any) -> Any:
        """Invoke a command by name; the lookup is case-insensitive."""
        signature = find_signature(name)
        if signature is None:
            raise ValidationError(f"Unknown RPC method '{name}'", field="method", value=name)
        return self._dispatch(signature, args)

    def request(self, path: str, body: Mapping[str, Any] | Sequence[Any]) -> Any:
        """Send a raw JSON-RPC body to ``path`` without argument coercion.

        A random ``id`` is added to object bodies that lack one. Returns the
        full decoded envelope.
        """
        if isinstance(body, Mapping):
            body = dict(body)
            if body.get("id") is None:
                body["id"] = new_request_id()
        else:
            body = list(body)

        with self._gate:
            envelope = self._transport.post(path, body)

        if isinstance(envelope, dict) and envelope.get("error") is not None:
            raise RemoteError.from_envelope(envelope["error"], request_id=envelope.get("id"))
        return envelope

    def batch(self) -> BatchRequest:
        """Start a JSON-RPC 2.0 batch bound to this client's transport."""
        return BatchRequest(self._transport, self._gate)

    # ------------------------------------------------------------------
    # Readiness
    # ------------------------------------------------------------------
    def init(self, retry_interval: float | None = None) -> int:
        """Block until the node reports a nonzero height and return it.

        Warmup replies (code -28) are retried every ``retry_interval`` seconds
        (default ``config.retry_interval``) with no upper bound. The
        ``on_connected`` callback fires once per call, on the first nonzero
        height, with the last warmup error or ``None``.
        """
        if retry_interval is None:
            retry_interval = self._config.retry_interval
        logger.debug("Waiting for dashd at %s to become ready", self._config.base_url)
        return self._readiness.wait_until_ready(retry_interval)

    @property
    def connected(self) -> bool:
        return self._state.connected

    @property
    def height(self) -> int:
        return self._state.height

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_calls(self) -> Mapping[str, MethodSignature]:
        return METHOD_SIGNATURES

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> DashRpcClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal wiring
    # ------------------------------------------------------------------
    def _bind(self, signature: MethodSignature) -> RpcMethod:
        def method(*args: Any) -> Any:
            return self._dispatch(signature, args)

        method.__name__ = signature.name
        method.__qualname__ = f"{type(self).__name__}.{signature.name}"
        method.__doc__ = f"{signature.name}({signature}) -> result"
        return method

    def _dispatch(self, signature: MethodSignature, args: Sequence[Any]) -> Any:
        request = build_request(signature, args)
        with self._gate:
            response = self._transport.send(request)
        return response.result

    def _fetch_chain_tips(self) -> Any:
        return self._dispatch(METHOD_SIGNATURES["getChainTips"], ())
