"""JSON-RPC 2.0 client over HTTP.

Requests are correlated by a per-client integer id. The id counter is the
only shared mutable state; it is guarded by a lock that is released before
the HTTP round trip, so calls from several threads run concurrently.
"""

from __future__ import annotations

import threading
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from kamrpc.rpc.errors import (
    ConstructionError,
    DecodeError,
    ProtocolError,
    TransportError,
    UnexpectedStatusError,
    UnsynchronizedResponseError,
)
from kamrpc.rpc.types import JSONRPC_VERSION, JSONRPCRequest, JSONRPCResponse, RequestId, normalize_params

DEFAULT_TIMEOUT_SECONDS = 10.0
_JSON_HEADERS = {"Content-Type": "application/json"}


class JSONRPCHttpClient:
    """Client for a JSON-RPC endpoint reachable over HTTP(S).

    Construction does no network I/O. ``skip_tls_verify`` disables
    certificate validation for every call made through this client.
    """

    def __init__(
        self,
        endpoint: str,
        skip_tls_verify: bool = False,
        *,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        try:
            url = httpx.URL(endpoint)
        except httpx.InvalidURL as exc:
            raise ConstructionError(f"invalid endpoint {endpoint!r}: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConstructionError(f"endpoint must be an http(s) URL, got {endpoint!r}")

        self._endpoint = endpoint
        self._client = httpx.Client(verify=not skip_tls_verify, timeout=timeout, transport=transport)
        self._next_id: RequestId = 0
        self._id_lock = threading.Lock()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> JSONRPCHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _take_id(self) -> RequestId:
        with self._id_lock:
            request_id = self._next_id
            self._next_id += 1
        return request_id

    def call(self, method: str, args: Any = ()) -> Any:
        """Call ``method`` and return its raw result.

        ``args`` may be a sequence of strings (one param each) or a single
        value sent as the only param. The result is returned exactly as
        decoded from the response envelope, possibly ``None``.
        """
        if self._client.is_closed:
            raise TransportError(f"{method}: client has been closed")

        request_id = self._take_id()
        request = JSONRPCRequest(
            jsonrpc=JSONRPC_VERSION,
            method=method,
            params=normalize_params(args),
            id=request_id,
        )
        logger.debug("rpc.call method={} id={}", method, request_id)

        try:
            body = request.model_dump_json()
        except PydanticSerializationError as exc:
            raise TransportError(f"cannot serialize request for {method}: {exc}") from exc

        try:
            response = self._client.post(self._endpoint, content=body, headers=_JSON_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("rpc.transport_error method={} id={} error={}", method, request_id, exc)
            raise TransportError(f"{method}: {exc}") from exc

        try:
            envelope = JSONRPCResponse.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning("rpc.decode_error method={} id={} status={}", method, request_id, response.status_code)
            raise DecodeError(f"malformed response for {method}: {exc}") from exc

        if envelope.error is not None:
            logger.warning(
                "rpc.error method={} id={} code={} message={}",
                method,
                request_id,
                envelope.error.code,
                envelope.error.message,
            )
            raise ProtocolError(envelope.error.code, envelope.error.message)
        if response.status_code > 299:
            logger.warning("rpc.unexpected_status method={} id={} status={}", method, request_id, response.status_code)
            raise UnexpectedStatusError(response.status_code)
        if envelope.id != request_id:
            logger.warning("rpc.unsynchronized method={} sent={} received={}", method, request_id, envelope.id)
            raise UnsynchronizedResponseError(request_id, envelope.id)

        return envelope.result


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "JSONRPCHttpClient"]
