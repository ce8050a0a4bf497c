"""JSON-RPC 2.0 type definitions.

Envelope types exchanged with the Kamailio ``jsonrpcs`` module over HTTP.
The response ``result`` is kept as the decoded JSON value and handed to a
second, type-specific validation step by the caller.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"

RequestId = int

# no coercion: "0", false or 0.0 must never match a sent id
StrictRequestId = Annotated[int, Field(strict=True, ge=0)]


class JSONRPCRequest(BaseModel):
    """A JSON-RPC request that expects a response."""

    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: list[Any]
    id: RequestId

    model_config = ConfigDict(extra="forbid")


class ErrorData(BaseModel):
    """Error information for JSON-RPC error responses."""

    code: int = 0
    message: str = ""
    data: Any = None


class JSONRPCResponse(BaseModel):
    """A response envelope as sent back by the server.

    Servers are not trusted to populate exactly one of ``result`` and
    ``error``, so both are optional here.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: StrictRequestId | None = None
    result: Any = None
    error: ErrorData | None = None

    model_config = ConfigDict(extra="ignore")


def normalize_params(args: Any) -> list[Any]:
    """Flatten call arguments into positional JSON-RPC params.

    A list or tuple of strings becomes one param per element; anything else
    is sent as the sole param.
    """
    if isinstance(args, (list, tuple)) and all(isinstance(item, str) for item in args):
        return list(args)
    return [args]


__all__ = [
    "JSONRPC_VERSION",
    "ErrorData",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "RequestId",
    "normalize_params",
]
