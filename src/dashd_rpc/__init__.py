"""Dash Core JSON-RPC client.

Exposes every dashd RPC command as a Python method with argument coercion
driven by a static signature table, wallet-scoped routing and a readiness
wait for freshly started nodes.
"""

from .batch import BatchRequest
from .client import DashRpcClient
from .coercion import coerce, convert_args
from .config import ClientConfig
from .constants import E_IN_WARMUP
from .dispatcher import build_request, split_wallet_path
from .exceptions import (
    ConfigError,
    DashRpcError,
    ParseError,
    RemoteError,
    SanityError,
    TransportError,
    ValidationError,
)
from .signatures import METHOD_SIGNATURES, MethodSignature
from .types import (
    ConnectionState,
    RpcRequest,
    RpcResponse,
    TransportErrorKind,
    TypeTag,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "DashRpcClient",
    "ClientConfig",
    "BatchRequest",
    # Signatures and coercion
    "METHOD_SIGNATURES",
    "MethodSignature",
    "TypeTag",
    "coerce",
    "convert_args",
    "build_request",
    "split_wallet_path",
    # Types
    "RpcRequest",
    "RpcResponse",
    "ConnectionState",
    "TransportErrorKind",
    "E_IN_WARMUP",
    # Exceptions
    "DashRpcError",
    "TransportError",
    "RemoteError",
    "ParseError",
    "SanityError",
    "ValidationError",
    "ConfigError",
]
