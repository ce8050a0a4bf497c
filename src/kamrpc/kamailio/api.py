"""Kamailio RPC methods over the generic JSON-RPC client."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from kamrpc.config.settings import ClientSettings
from kamrpc.kamailio.types import RegistrationInfo, ULDump, ULSingle
from kamrpc.rpc.client import JSONRPCHttpClient
from kamrpc.rpc.errors import DecodeError

OK = "OK"

T = TypeVar("T")

_echo_adapter: TypeAdapter[list[str]] = TypeAdapter(list[str])
_reg_info_adapter = TypeAdapter(RegistrationInfo)
_ul_dump_adapter = TypeAdapter(ULDump)
_ul_single_adapter = TypeAdapter(ULSingle)


def _decode(adapter: TypeAdapter[T], raw: Any, method: str) -> T:
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        raise DecodeError(f"unexpected result for {method}: {exc}") from exc


class KamailioAPI:
    """Typed Kamailio RPC API.

    Every method fixes the remote method name, passes ``params`` through as
    positional string params and decodes the result.
    """

    def __init__(self, client: JSONRPCHttpClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> KamailioAPI:
        client = JSONRPCHttpClient(
            settings.endpoint,
            settings.skip_tls_verify,
            timeout=settings.timeout_seconds,
        )
        return cls(client)

    @property
    def client(self) -> JSONRPCHttpClient:
        return self._client

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> KamailioAPI:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _call(self, method: str, params: Sequence[str] | None) -> Any:
        return self._client.call(method, list(params or ()))

    def _command(self, method: str, params: Sequence[str] | None) -> str:
        self._call(method, params)
        return OK

    def core_echo(self, params: Sequence[str] | None = None) -> list[str]:
        """Echo ``params`` back from the server."""
        return _decode(_echo_adapter, self._call("core.echo", params), "core.echo")

    def uac_reg_enable(self, params: Sequence[str] | None = None) -> str:
        return self._command("uac.reg_enable", params)

    def uac_reg_disable(self, params: Sequence[str] | None = None) -> str:
        return self._command("uac.reg_disable", params)

    def uac_reg_reload(self, params: Sequence[str] | None = None) -> str:
        return self._command("uac.reg_reload", params)

    def uac_reg_refresh(self, params: Sequence[str] | None = None) -> str:
        return self._command("uac.reg_refresh", params)

    def uac_reg_info(self, params: Sequence[str] | None = None) -> RegistrationInfo:
        """Fetch one remote registration, e.g. ``["l_uuid", "<uuid>"]``."""
        raw = self._call("uac.reg_info", params)
        return _decode(_reg_info_adapter, raw, "uac.reg_info")

    def domain_reload(self, params: Sequence[str] | None = None) -> str:
        return self._command("domain.reload", params)

    def ul_dump(self, params: Sequence[str] | None = None) -> ULDump:
        """Dump the whole location table, e.g. ``["brief"]``."""
        return _decode(_ul_dump_adapter, self._call("ul.dump", params), "ul.dump")

    def ul_lookup(self, params: Sequence[str] | None = None) -> ULSingle:
        """Look up one address of record, e.g. ``["location", "alice@example.com"]``."""
        return _decode(_ul_single_adapter, self._call("ul.lookup", params), "ul.lookup")


__all__ = ["OK", "KamailioAPI"]
