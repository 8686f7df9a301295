"""CLI command: objtasks selector -- build a CSS selector from tokens."""

from __future__ import annotations

import sys

import click

from objtasks.errors import SelectorError
from objtasks.selector import (
    COMBINATORS,
    PartKind,
    SelectorBuilder,
    combine,
    css_selector_builder,
)

# CLI spelling -> part kind
_KIND_NAMES: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def _parse_part(token: str) -> tuple[PartKind, str]:
    name, sep, value = token.partition(":")
    if not sep or name not in _KIND_NAMES:
        raise click.BadParameter(
            f"{token!r}: expected KIND:VALUE with KIND one of "
            f"{', '.join(_KIND_NAMES)}, or a combinator",
            param_hint="TOKENS",
        )
    return _KIND_NAMES[name], value


def build_from_tokens(tokens: tuple[str, ...] | list[str]) -> SelectorBuilder:
    """Fold *tokens* into a single selector.

    ``KIND:VALUE`` tokens extend the current compound selector; a combinator
    token closes it and joins it with the next one.
    """
    result: SelectorBuilder | None = None
    pending = ""
    current: SelectorBuilder | None = None

    def flush() -> SelectorBuilder:
        if current is None:
            raise click.BadParameter("combinator without a selector", param_hint="TOKENS")
        return current if result is None else combine(result, pending, current)

    for token in tokens:
        if token in COMBINATORS:
            result = flush()
            current = None
            pending = token
            continue
        kind, value = _parse_part(token)
        if current is None:
            current = css_selector_builder.part(kind, value)
        else:
            current.add(kind, value)
    return flush()


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND:VALUE tokens and combinators.

    \b
    Example:
        objtasks selector element:a attr:'href$=".png"' pseudo-class:focus
        objtasks selector element:div + element:span
    """
    try:
        built = build_from_tokens(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(built.stringify())
