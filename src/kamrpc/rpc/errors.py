"""Errors raised by the JSON-RPC client."""

from __future__ import annotations


class KamailioRPCError(Exception):
    """Base class for every failure surfaced by the client."""


class ConstructionError(KamailioRPCError):
    """The client could not be configured (malformed endpoint)."""


class TransportError(KamailioRPCError):
    """Serialization or the HTTP exchange itself failed."""


class DecodeError(KamailioRPCError):
    """A response body or result payload did not have the expected shape."""


class ProtocolError(KamailioRPCError):
    """The server answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class UnexpectedStatusError(KamailioRPCError):
    """HTTP status outside 2xx without an explicit JSON-RPC error."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected status code received: {status_code}")
        self.status_code = status_code


class UnsynchronizedResponseError(KamailioRPCError):
    """The echoed request id does not match the one that was sent."""

    def __init__(self, sent: int, received: int | None) -> None:
        super().__init__(f"Unsynchronized request, had: {sent}, received: {received}")
        self.sent = sent
        self.received = received


__all__ = [
    "ConstructionError",
    "DecodeError",
    "KamailioRPCError",
    "ProtocolError",
    "TransportError",
    "UnexpectedStatusError",
    "UnsynchronizedResponseError",
]
