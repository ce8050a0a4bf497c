"""Typer CLI entrypoints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

import typer
from loguru import logger
from pydantic import BaseModel
from rich.console import Console

from kamrpc.config.settings import ClientSettings, load_settings
from kamrpc.kamailio.api import KamailioAPI
from kamrpc.logging_utils import configure_logging
from kamrpc.rpc.errors import KamailioRPCError

app = typer.Typer(name="kamrpc", help="Kamailio JSON-RPC client", add_completion=False)
Params = Annotated[list[str] | None, typer.Argument(help="Positional string params.")]


def build_api(settings: ClientSettings) -> KamailioAPI:
    return KamailioAPI.from_settings(settings)


def _print_result(result: Any) -> None:
    console = Console()
    if isinstance(result, BaseModel):
        result = result.model_dump(mode="json", by_alias=True)
    if isinstance(result, str):
        console.print(result, markup=False, highlight=False)
        return
    console.print_json(data=result)


def _run(ctx: typer.Context, action: Callable[[KamailioAPI], Any]) -> None:
    settings: ClientSettings = ctx.obj
    try:
        with build_api(settings) as api:
            result = action(api)
    except KamailioRPCError as exc:
        logger.error("{}: {}", type(exc).__name__, exc)
        raise typer.Exit(code=1) from exc
    _print_result(result)


@app.callback()
def _main(
    ctx: typer.Context,
    endpoint: Annotated[str | None, typer.Option("--endpoint", "-e", help="JSON-RPC URL.")] = None,
    insecure: Annotated[bool, typer.Option("--insecure", "-k", help="Skip TLS certificate verification.")] = False,
) -> None:
    configure_logging(profile="cli")
    ctx.obj = load_settings(endpoint=endpoint, skip_tls_verify=True if insecure else None)
    logger.debug("cli.start endpoint={} skip_tls_verify={}", ctx.obj.endpoint, ctx.obj.skip_tls_verify)


@app.command()
def call(
    ctx: typer.Context,
    method: Annotated[str, typer.Argument(help="Remote method, e.g. core.version.")],
    params: Params = None,
) -> None:
    """Call any method and print the raw result."""
    _run(ctx, lambda api: api.client.call(method, params or []))


@app.command()
def echo(ctx: typer.Context, params: Params = None) -> None:
    """core.echo"""
    _run(ctx, lambda api: api.core_echo(params))


@app.command("reg-enable")
def reg_enable(ctx: typer.Context, params: Params = None) -> None:
    """uac.reg_enable"""
    _run(ctx, lambda api: api.uac_reg_enable(params))


@app.command("reg-disable")
def reg_disable(ctx: typer.Context, params: Params = None) -> None:
    """uac.reg_disable"""
    _run(ctx, lambda api: api.uac_reg_disable(params))


@app.command("reg-reload")
def reg_reload(ctx: typer.Context, params: Params = None) -> None:
    """uac.reg_reload"""
    _run(ctx, lambda api: api.uac_reg_reload(params))


@app.command("reg-refresh")
def reg_refresh(ctx: typer.Context, params: Params = None) -> None:
    """uac.reg_refresh"""
    _run(ctx, lambda api: api.uac_reg_refresh(params))


@app.command("reg-info")
def reg_info(ctx: typer.Context, params: Params = None) -> None:
    """uac.reg_info, e.g. `reg-info l_uuid <uuid>`."""
    _run(ctx, lambda api: api.uac_reg_info(params))


@app.command("domain-reload")
def domain_reload(ctx: typer.Context, params: Params = None) -> None:
    """domain.reload"""
    _run(ctx, lambda api: api.domain_reload(params))


@app.command("ul-dump")
def ul_dump(ctx: typer.Context, params: Params = None) -> None:
    """ul.dump"""
    _run(ctx, lambda api: api.ul_dump(params))


@app.command("ul-lookup")
def ul_lookup(
    ctx: typer.Context,
    table: Annotated[str, typer.Argument(help="usrloc table, usually 'location'.")],
    aor: Annotated[str, typer.Argument(help="Address of record.")],
) -> None:
    """ul.lookup"""
    _run(ctx, lambda api: api.ul_lookup([table, aor]))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
