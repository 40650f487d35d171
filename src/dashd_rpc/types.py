"""Type definitions and data models for the dashd RPC client."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import RemoteError


class TypeTag(str, Enum):
    """Declared type of a positional RPC argument."""

    STR = "str"
    INT = "int"
    INT_STR = "int_str"
    FLOAT = "float"
    BOOL = "bool"
    OBJ = "obj"

    @classmethod
    def parse(cls, token: str) -> TypeTag:
        """Resolve a signature token, treating unknown tokens as ``str``."""
        try:
            return cls(token)
        except ValueError:
            return cls.STR


class TransportErrorKind(str, Enum):
    """Classification of failed HTTP round-trips."""

    REQUEST_ERROR = "request_error"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    OVERLOADED = "overloaded"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class RpcRequest:
    """A single JSON-RPC call ready for the wire."""

    path: str
    method: str
    params: list[Any]
    id: int
    jsonrpc: str | None = None

    def payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {"method": self.method, "params": list(self.params), "id": self.id}
        if self.jsonrpc:
            body["jsonrpc"] = self.jsonrpc
        return body


@dataclass
class RpcResponse:
    """Parsed JSON-RPC response envelope."""

    id: int | str | None
    result: Any = None
    error: Any = None
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_envelope(cls, envelope: dict[str, Any]) -> RpcResponse:
        return cls(
            id=envelope.get("id"),
            result=envelope.get("result"),
            error=envelope.get("error"),
            raw=dict(envelope),
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise :class:`RemoteError` if the node reported an error."""
        if self.error is not None:
            raise RemoteError.from_envelope(self.error, request_id=self.id)


@dataclass
class ConnectionState:
    """Readiness of the node as last observed by ``init``."""

    connected: bool = False
    height: int = 0
