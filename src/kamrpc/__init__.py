"""Kamailio JSON-RPC over HTTP client."""

from kamrpc.kamailio.api import OK, KamailioAPI
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

__all__ = [
    "OK",
    "ConstructionError",
    "DecodeError",
    "JSONRPCHttpClient",
    "KamailioAPI",
    "KamailioRPCError",
    "ProtocolError",
    "TransportError",
    "UnexpectedStatusError",
    "UnsynchronizedResponseError",
]
