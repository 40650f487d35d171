"""Configuration containers for the dashd RPC client."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dotenv import load_dotenv

from .exceptions import ConfigError, RemoteError, ValidationError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9998  # mainnet=9998, testnet=19998, regtest=19898
DEFAULT_USER = "user"
DEFAULT_PASSWORD = "pass"
DEFAULT_PROTOCOL = "https"
DEFAULT_RETRY_INTERVAL = 5.0
DEFAULT_ENV_PREFIX = "DASHD_RPC_"

SUPPORTED_PROTOCOLS = ("http", "https")

OnConnected = Callable[[RemoteError | None], Any]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one :class:`~dashd_rpc.client.DashRpcClient`."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user: str = DEFAULT_USER
    password: str = DEFAULT_PASSWORD
    protocol: str = DEFAULT_PROTOCOL
    timeout: float | None = None
    retry_interval: float = DEFAULT_RETRY_INTERVAL
    on_connected: OnConnected | None = None
    transport_options: Mapping[str, Any] = field(default_factory=dict)
    verify: bool = True
    max_concurrent_calls: int | None = None

    def __post_init__(self) -> None:
        if self.protocol not in SUPPORTED_PROTOCOLS:
            raise ValidationError(
                f"Unsupported protocol '{self.protocol}'; expected http or https",
                field="protocol",
                value=self.protocol,
            )
        if self.max_concurrent_calls is not None and self.max_concurrent_calls < 1:
            raise ValidationError(
                "max_concurrent_calls must be at least 1",
                field="max_concurrent_calls",
                value=self.max_concurrent_calls,
            )
        options = MappingProxyType(dict(self.transport_options))
        object.__setattr__(self, "transport_options", options)

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        *,
        dotenv_path: str | os.PathLike[str] | None = None,
        **overrides: Any,
    ) -> ClientConfig:
        """Build a config from ``<prefix>HOST``, ``<prefix>PORT`` and friends.

        A ``.env`` file is loaded first (without overriding variables that are
        already set). Keyword ``overrides`` win over the environment.
        """

        load_dotenv(dotenv_path)

        values: dict[str, Any] = {}
        for suffix, field_name, parser in _ENV_FIELDS:
            variable = f"{prefix}{suffix}"
            raw = os.getenv(variable)
            if not raw or field_name in values:
                continue
            values[field_name] = parser(raw, variable)

        values.update(overrides)
        return cls(**values)


def _parse_str(raw: str, variable: str) -> str:
    return raw


def _parse_int(raw: str, variable: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{variable} must be an integer, got {raw!r}", variable) from exc


def _parse_float(raw: str, variable: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{variable} must be a number, got {raw!r}", variable) from exc


def _parse_bool(raw: str, variable: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{variable} must be a boolean, got {raw!r}", variable)


def _parse_protocol(raw: str, variable: str) -> str:
    return raw.strip().lower()


# PASS takes precedence over PASSWORD
_ENV_FIELDS: tuple[tuple[str, str, Callable[[str, str], Any]], ...] = (
    ("HOST", "host", _parse_str),
    ("PORT", "port", _parse_int),
    ("USER", "user", _parse_str),
    ("PASS", "password", _parse_str),
    ("PASSWORD", "password", _parse_str),
    ("PROTOCOL", "protocol", _parse_protocol),
    ("TIMEOUT", "timeout", _parse_float),
    ("RETRY_INTERVAL", "retry_interval", _parse_float),
    ("VERIFY", "verify", _parse_bool),
)
