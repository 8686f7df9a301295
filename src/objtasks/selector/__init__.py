from objtasks.selector.builder import (
    SelectorBuilder,
    SelectorFactory,
    combine,
    css_selector_builder,
)
from objtasks.selector.kinds import COMBINATORS, PartKind

__all__ = [
    "COMBINATORS",
    "PartKind",
    "SelectorBuilder",
    "SelectorFactory",
    "combine",
    "css_selector_builder",
]
