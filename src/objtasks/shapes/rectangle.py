"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair with a derived area.

    No validation is done: negative or non-numeric sizes are stored as given.
    Field order matches the constructor so the JSON codec can rebuild it
    positionally.
    """

    width: Any
    height: Any

    def get_area(self) -> Any:
        return self.width * self.height

    @property
    def area(self) -> Any:
        return self.get_area()
