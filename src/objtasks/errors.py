"""Error hierarchy for objtasks."""
from __future__ import annotations

from typing import Any


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjtasksError):
    """A selector part was appended in violation of the builder rules."""

    def __init__(self, message: str, *, kind: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.kind = kind


class DuplicateUniquePartError(SelectorError):
    """Element, id or pseudo-element supplied more than once."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, message: str = MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class OutOfOrderError(SelectorError):
    """A part was supplied after a higher-ranked part."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(
        self, message: str = MESSAGE, *, max_rank: int = 0, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.max_rank = max_rank


# ---------------------------------------------------------------------------
# JSON codec errors
# ---------------------------------------------------------------------------


class CodecError(ObjtasksError):
    """Base error for JSON encoding and decoding."""


class EncodeError(CodecError):
    """The value cannot be represented as JSON text."""


class ParseError(CodecError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.line = line
        self.column = column


class ConstructionError(CodecError):
    """The target type rejected the positional arguments from the decoded JSON."""

    def __init__(self, message: str, *, target: type | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.target = target
