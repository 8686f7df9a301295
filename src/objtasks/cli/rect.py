"""CLI commands: objtasks area / encode-rect / decode-rect."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any

import click

from objtasks.codec import decode_from_json, encode_to_json
from objtasks.config import ObjtasksConfig
from objtasks.errors import CodecError
from objtasks.shapes import Rectangle


class NumberType(click.ParamType):
    """An int when the text is integral, otherwise a float."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)):
            return value
        for parse in (int, float):
            try:
                return parse(value)
            except ValueError:
                continue
        self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberType()


@click.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
def area(width: int | float, height: int | float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(Rectangle(width, height).get_area())


@click.command("encode-rect")
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.option("--indent", type=int, default=None, help="Pretty-print with N spaces")
@click.option("--sort-keys", is_flag=True, default=False, help="Sort object keys")
@click.pass_obj
def encode_rect(
    config: ObjtasksConfig | None,
    width: int | float,
    height: int | float,
    indent: int | None,
    sort_keys: bool,
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    config = dataclasses.replace(
        config or ObjtasksConfig(), json_indent=indent, json_sort_keys=sort_keys
    )
    click.echo(encode_to_json(Rectangle(width, height), config=config))


@click.command("decode-rect")
@click.argument("json_text", metavar="JSON")
def decode_rect(json_text: str) -> None:
    """Rebuild a rectangle from JSON and print its fields and area.

    Keys are taken positionally: the first value is the width, the second
    the height.
    """
    try:
        rect = decode_from_json(Rectangle, json_text)
    except CodecError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"width={rect.width} height={rect.height} area={rect.get_area()}")
