"""Selector part kinds with their rank, render template and occurrence limit."""

from __future__ import annotations

from enum import StrEnum


class PartKind(StrEnum):
    """A fragment category of a compound selector.

    Rank gives the canonical position (lower appears earlier):
        1 = element, 2 = id, 3 = class, 4 = attribute,
        5 = pseudo-class, 6 = pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        return self in _UNIQUE

    def render(self, value: str) -> str:
        return _TEMPLATES[self].format(value=value)


_RANKS = {
    PartKind.ELEMENT: 1,
    PartKind.ID: 2,
    PartKind.CLASS: 3,
    PartKind.ATTRIBUTE: 4,
    PartKind.PSEUDO_CLASS: 5,
    PartKind.PSEUDO_ELEMENT: 6,
}

_TEMPLATES = {
    PartKind.ELEMENT: "{value}",
    PartKind.ID: "#{value}",
    PartKind.CLASS: ".{value}",
    PartKind.ATTRIBUTE: "[{value}]",
    PartKind.PSEUDO_CLASS: ":{value}",
    PartKind.PSEUDO_ELEMENT: "::{value}",
}

_UNIQUE = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

# Tokens joining two selectors; " " is the descendant combinator.
COMBINATORS = frozenset({" ", "+", "~", ">"})
