"""RPC package.

Provides a typed JSON-RPC 2.0 client over HTTP.
"""

from kamrpc.rpc.client import JSONRPCHttpClient
from kamrpc.rpc.errors import (
    ConstructionError,
    DecodeError,
    KamailioRPCError,
    ProtocolError,
    TransportError,
    UnexpectedStatusError,
    UnsynchronizedResponseError,
)
from kamrpc.rpc.types import ErrorData, JSONRPCRequest, JSONRPCResponse, RequestId, normalize_params

__all__ = [
    "ConstructionError",
    "DecodeError",
    "ErrorData",
    "JSONRPCHttpClient",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "KamailioRPCError",
    "ProtocolError",
    "RequestId",
    "TransportError",
    "UnexpectedStatusError",
    "UnsynchronizedResponseError",
    "normalize_params",
]
