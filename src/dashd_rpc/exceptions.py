"""Exception hierarchy for the Dash Core RPC client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time only
    from .types import TransportErrorKind


class DashRpcError(Exception):
    """Base exception for all dashd RPC client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(DashRpcError):
    """Raised when the HTTP round-trip fails or the reply is not a JSON-RPC envelope."""

    def __init__(
        self,
        message: str,
        kind: TransportErrorKind,
        *,
        endpoint: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
        code: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.kind = kind
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        self.code = code


class RemoteError(DashRpcError):
    """Raised when the node executed the call and reported an error."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        *,
        data: dict[str, Any] | None = None,
        request_id: int | str | None = None,
    ):
        super().__init__(message, details=data)
        self.code = code
        self.data = data or {}
        self.request_id = request_id

    @classmethod
    def from_envelope(cls, error: Any, request_id: int | str | None = None) -> RemoteError:
        """Build from the ``error`` member of a response envelope."""
        if isinstance(error, dict):
            extra = {k: v for k, v in error.items() if k not in ("code", "message")}
            code = error.get("code")
            return cls(
                str(error.get("message", "")),
                code if isinstance(code, int) else None,
                data=extra,
                request_id=request_id,
            )
        return cls(str(error), request_id=request_id)


class ParseError(DashRpcError):
    """Raised when an argument cannot be coerced to its declared type."""

    def __init__(self, message: str, tag: str | None = None, value: Any | None = None):
        super().__init__(message, {"tag": tag, "value": value})
        self.tag = tag
        self.value = value


class SanityError(DashRpcError):
    """Raised when the chain-tip reply does not have the expected shape."""

    pass


class ValidationError(DashRpcError):
    """Raised when the client is used with invalid input."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigError(DashRpcError):
    """Raised when configuration values cannot be loaded."""

    def __init__(self, message: str, variable: str | None = None):
        super().__init__(message, {"variable": variable} if variable else None)
        self.variable = variable
