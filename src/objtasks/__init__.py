"""objtasks: rectangle value object, JSON helpers and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.codec import decode_from_json, encode_to_json
from objtasks.config import ObjtasksConfig
from objtasks.errors import (
    CodecError,
    ConstructionError,
    DuplicateUniquePartError,
    EncodeError,
    ObjtasksError,
    OutOfOrderError,
    ParseError,
    SelectorError,
)
from objtasks.selector import (
    PartKind,
    SelectorBuilder,
    SelectorFactory,
    css_selector_builder,
)
from objtasks.shapes import Rectangle

__all__ = [
    "__version__",
    # values
    "Rectangle",
    # codec
    "encode_to_json",
    "decode_from_json",
    # selector
    "PartKind",
    "SelectorBuilder",
    "SelectorFactory",
    "css_selector_builder",
    # config
    "ObjtasksConfig",
    # errors
    "ObjtasksError",
    "SelectorError",
    "DuplicateUniquePartError",
    "OutOfOrderError",
    "CodecError",
    "EncodeError",
    "ParseError",
    "ConstructionError",
]
