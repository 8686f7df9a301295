from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjtasksConfig:
    json_indent: int | None = None  # None = compact separators
    json_sort_keys: bool = False
    json_ensure_ascii: bool = True
    log_level: str = "WARNING"
