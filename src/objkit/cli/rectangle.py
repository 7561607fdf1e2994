"""CLI command: objkit rectangle -- build a rectangle and report its area."""

from __future__ import annotations

import dataclasses

import click

from objkit.config import ObjkitConfig
from objkit.errors import ObjkitError
from objkit.serialization import to_json
from objkit.shapes import Rectangle


def _format_number(value: float) -> str:
    """Render a number in full, dropping a trailing ``.0`` on whole values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option(
    "--json", "as_json", is_flag=True, help="Print width and height as JSON for from_json"
)
@click.option("--indent", type=int, default=None, help="JSON indent (default: compact)")
@click.pass_obj
def rectangle(
    config: ObjkitConfig, width: float, height: float, as_json: bool, indent: int | None
) -> None:
    """Build a WIDTH x HEIGHT rectangle and print its area."""
    rect = Rectangle(width=width, height=height)

    if not as_json:
        click.echo(f"Area: {_format_number(rect.area)}")
        return

    if indent is not None:
        config = dataclasses.replace(config, json_indent=indent)
    try:
        click.echo(to_json(rect, config))
    except ObjkitError as exc:
        raise click.ClickException(str(exc)) from exc
