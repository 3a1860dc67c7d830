"""eosintf CLI - decode EOS internal interface IDs."""

from __future__ import annotations

import json

import click

from eosintf.decode import describe
from eosintf.exceptions import InvalidIntfIdError
from eosintf.parse import parse_intf_id
from eosintf.types import iter_type_names
from eosintf.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.option("--debug", is_flag=True, envvar="EOSINTF_DEBUG", help="Enable debug logging")
@click.option(
    "--json-output", is_flag=True, envvar="EOSINTF_JSON_OUTPUT", help="Output in JSON format"
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, json_output: bool) -> None:
    """eosintf - Arista EOS internal interface ID decoder."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["json_output"] = json_output
    setup_logging(level="DEBUG" if debug else "INFO", json_output=json_output)


def _read_ids(ids: tuple[str, ...]) -> list[str]:
    """Return IDs from the command line, or one per line from stdin."""
    if ids:
        return list(ids)
    stdin = click.get_text_stream("stdin")
    return [line.strip() for line in stdin if line.strip()]


@cli.command()
@click.argument("ids", nargs=-1)
@click.option("--name-only", is_flag=True, help="Print only the interface name")
@click.option("--skip-invalid", is_flag=True, help="Skip IDs that cannot be parsed")
@click.pass_context
def decode(ctx: click.Context, ids: tuple[str, ...], name_only: bool, skip_invalid: bool) -> None:
    """Decode interface IDs (decimal or 0x hex) into interface names.

    With no IDS, reads one ID per line from stdin.
    """
    results = []
    errors = 0

    for text in _read_ids(ids):
        try:
            value = parse_intf_id(text)
        except InvalidIntfIdError as exc:
            if skip_invalid:
                logger.warning("invalid_intf_id_skipped", text=text)
                continue
            logger.warning("invalid_intf_id", text=text)
            click.echo(f"ERROR: {exc}", err=True)
            errors += 1
            continue

        decoded = describe(value)
        if not decoded.known_type:
            logger.debug("unknown_intf_type", intf_id=decoded.intf_id_hex, type_code=decoded.type_code)
        results.append(decoded)

    if ctx.obj.get("json_output"):
        click.echo(json.dumps([r.model_dump() for r in results], indent=2))
    else:
        for r in results:
            click.echo(r.name if name_only else f"{r.intf_id_hex} {r.name}")

    if errors:
        ctx.exit(2)


@cli.command("types")
@click.pass_context
def list_types(ctx: click.Context) -> None:
    """List known interface type codes and their names."""
    entries = list(iter_type_names())

    if ctx.obj.get("json_output"):
        click.echo(json.dumps([{"code": code, "name": name} for code, name in entries], indent=2))
    else:
        for code, name in entries:
            click.echo(f"  0x{code:02x}  {name}")


if __name__ == "__main__":
    cli()
