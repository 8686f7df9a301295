"""Stateful CSS selector builder and the stateless factory that starts chains.

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may occur several times

Every factory method returns a fresh ``SelectorBuilder``; the builder then
enforces canonical order and single use of element, id and pseudo-element.
"""

from __future__ import annotations

import logging

from objtasks.errors import DuplicateUniquePartError, OutOfOrderError
from objtasks.selector.kinds import PartKind

__all__ = ["SelectorBuilder", "SelectorFactory", "combine", "css_selector_builder"]

log = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments and renders them with ``stringify``."""

    __slots__ = ("_fragments", "_parts", "_used_kinds", "_max_rank")

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._parts: list[tuple[PartKind, str]] = []
        self._used_kinds: set[PartKind] = set()
        self._max_rank = 0

    # --- state ----------------------------------------------------------------

    @property
    def rendered_text(self) -> str:
        return "".join(self._fragments)

    @property
    def used_kinds(self) -> frozenset[PartKind]:
        """Single-occurrence kinds already appended."""
        return frozenset(self._used_kinds)

    @property
    def max_rank(self) -> int:
        return self._max_rank

    @property
    def parts(self) -> tuple[tuple[PartKind, str], ...]:
        return tuple(self._parts)

    # --- chainable parts ------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return combine(left, combinator, right)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self.rendered_text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.rendered_text!r})"

    # --- generic --------------------------------------------------------------

    def add(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append *value* as a *kind* part, enforcing uniqueness then order."""
        if kind.unique and kind in self._used_kinds:
            raise DuplicateUniquePartError(kind=kind)
        if kind.rank < self._max_rank:
            raise OutOfOrderError(kind=kind, max_rank=self._max_rank)

        self._fragments.append(kind.render(value))
        self._parts.append((kind, value))
        if kind.unique:
            self._used_kinds.add(kind)
        self._max_rank = kind.rank
        log.debug("Appended %s part %r", kind.value, value)
        return self


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    """Join two selectors with *combinator* into a new builder.

    The joined text becomes a single opaque element fragment; it is not
    validated again.
    """
    text = f"{left.stringify()} {combinator} {right.stringify()}"
    return SelectorBuilder().add(PartKind.ELEMENT, text)


class SelectorFactory:
    """Stateless entry point: each call forks off a new builder."""

    __slots__ = ()

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return combine(left, combinator, right)

    def part(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Start a chain from a kind chosen at runtime."""
        return SelectorBuilder().add(kind, value)


css_selector_builder = SelectorFactory()
