"""HTTP transport: one JSON-RPC POST per call over a ``requests`` session."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .config import ClientConfig
from .constants import OVERLOADED_CODE, WORK_QUEUE_EXCEEDED
from .exceptions import RemoteError, TransportError, ValidationError
from .types import RpcRequest, RpcResponse, TransportErrorKind

logger = logging.getLogger(__name__)


class HttpTransport:
    """Send requests to dashd and classify what comes back."""

    def __init__(self, config: ClientConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # Round-trips
    # ------------------------------------------------------------------
    def send(self, request: RpcRequest) -> RpcResponse:
        """POST one request and return its envelope, raising on any failure."""
        envelope = self.post(request.path, request.payload())
        if not isinstance(envelope, dict):
            raise TransportError(
                "Expected a JSON-RPC object in response",
                TransportErrorKind.PARSE_ERROR,
                endpoint=self._config.url_for(request.path),
                details={"method": request.method, "response": envelope},
            )

        if envelope.get("error") is not None:
            error = RemoteError.from_envelope(envelope["error"], request_id=envelope.get("id"))
            logger.debug(
                "RPC %s failed with code=%s message=%s", request.method, error.code, error.message
            )
            raise error

        return RpcResponse.from_envelope(envelope)

    def post(self, path: str, body: Any) -> Any:
        """POST ``body`` as JSON to ``path`` and return the decoded reply."""
        url = self._config.url_for(path)
        try:
            data = json.dumps(body)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Request body is not JSON serializable: {exc}",
                field="params",
                details={"request": _describe(body)},
            ) from exc

        options: dict[str, Any] = {
            "data": data,
            "headers": {"Content-Type": "application/json"},
            "auth": (self._config.user, self._config.password),
            "timeout": self._config.timeout,
            "verify": self._config.verify,
        }
        options.update(self._config.transport_options)

        logger.debug("POST %s %s", url, _describe(body))
        try:
            response = self._session.post(url, **options)
        except requests.RequestException as exc:
            raise TransportError(
                f"Request Error: {exc}",
                TransportErrorKind.REQUEST_ERROR,
                endpoint=url,
                details={"error": str(exc)},
            ) from exc

        return self._decode(url, response)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _decode(self, url: str, response: requests.Response) -> Any:
        status = response.status_code
        if status == 401:
            raise TransportError(
                "Connection Rejected: 401 Unauthorized",
                TransportErrorKind.UNAUTHORIZED,
                endpoint=url,
                status_code=status,
            )
        if status == 403:
            raise TransportError(
                "Connection Rejected: 403 Forbidden",
                TransportErrorKind.FORBIDDEN,
                endpoint=url,
                status_code=status,
            )

        text = response.text
        if status == 500 and text == WORK_QUEUE_EXCEEDED:
            logger.warning("dashd at %s rejected the request: %s", url, text)
            raise TransportError(
                text,
                TransportErrorKind.OVERLOADED,
                endpoint=url,
                status_code=status,
                body=text,
                code=OVERLOADED_CODE,
            )

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug("Unparsable reply from %s (HTTP %s): %r", url, status, text)
            raise TransportError(
                f"HTTP {status}: Error Parsing JSON: {exc.msg}",
                TransportErrorKind.PARSE_ERROR,
                endpoint=url,
                status_code=status,
                body=text,
            ) from exc


def _describe(body: Any) -> str:
    if isinstance(body, dict):
        return f"method={body.get('method')} id={body.get('id')}"
    if isinstance(body, list):
        return f"batch of {len(body)}"
    return type(body).__name__
