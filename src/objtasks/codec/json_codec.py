"""Thin JSON helpers: encode any value, rebuild typed instances positionally.

``decode_from_json`` passes the decoded values to the target constructor in
the order the keys appear in the JSON text. It only works when that order
matches the constructor's parameter order::

    decode_from_json(Rectangle, '{"width": 10, "height": 20}')  # ok
    decode_from_json(Rectangle, '{"height": 20, "width": 10}')  # swapped
"""

from __future__ import annotations

import dataclasses
import json
import logging
from types import ModuleType
from typing import Any

from objtasks.config import ObjtasksConfig
from objtasks.errors import ConstructionError, EncodeError, ParseError

__all__ = ["encode_to_json", "decode_from_json"]

log = logging.getLogger(__name__)

_COMPACT = (",", ":")


def _default(obj: Any) -> Any:
    """Fallback for objects the json module does not know."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    # Plain instances only; functions, classes and modules also carry __dict__.
    if hasattr(obj, "__dict__") and not callable(obj) and not isinstance(obj, ModuleType):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _reject_constant(name: str) -> Any:
    """Refuse the NaN/Infinity literals json.loads accepts by default."""
    raise ParseError(f"Invalid JSON: non-standard constant {name}")


def encode_to_json(value: Any, *, config: ObjtasksConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    Output is compact (``[1,2,3]``) unless the config sets an indent.
    """
    cfg = config or ObjtasksConfig()
    try:
        text = json.dumps(
            value,
            default=_default,
            indent=cfg.json_indent,
            separators=_COMPACT if cfg.json_indent is None else None,
            sort_keys=cfg.json_sort_keys,
            ensure_ascii=cfg.json_ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot encode value: {exc}", cause=exc) from exc
    log.debug("Encoded %s to %d chars of JSON", type(value).__name__, len(text))
    return text


def _positional_values(data: Any, target: type) -> list[Any]:
    if isinstance(data, dict):
        return list(data.values())
    if isinstance(data, list):
        return data
    raise ConstructionError(
        f"Cannot build {target.__name__} from a JSON {type(data).__name__}; "
        "expected an object or array",
        target=target,
    )


def decode_from_json(prototype: Any, json_text: str) -> Any:
    """Build an instance of *prototype*'s type from *json_text*.

    *prototype* is either a class or an exemplar instance of it. The decoded
    object's values are passed to the constructor positionally, in key order.

    Raises:
        ParseError: *json_text* is not valid JSON.
        ConstructionError: the constructor rejected the arguments.
    """
    target = prototype if isinstance(prototype, type) else type(prototype)
    try:
        data = json.loads(json_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc

    args = _positional_values(data, target)
    try:
        instance = target(*args)
    except Exception as exc:
        raise ConstructionError(
            f"{target.__name__} rejected {len(args)} positional argument(s): {exc}",
            target=target,
            cause=exc,
        ) from exc
    log.debug("Decoded %s from %d positional value(s)", target.__name__, len(args))
    return instance
