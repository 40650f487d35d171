"""Argument coercion from declared type tags to JSON-RPC wire values."""

from __future__ import annotations

import json
import math
from collections.abc import Callable, Sequence
from typing import Any

from .exceptions import ParseError
from .types import TypeTag


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _to_float(value: Any, tag: TypeTag) -> float:
    try:
        parsed = float(str(value).strip())
    except ValueError as exc:
        raise ParseError(
            f"Cannot parse {value!r} as a number for '{tag.value}' argument",
            tag=tag.value,
            value=value,
        ) from exc
    if not math.isfinite(parsed):
        raise ParseError(
            f"Non-finite number {value!r} for '{tag.value}' argument", tag=tag.value, value=value
        )
    return parsed


def coerce_str(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict | list | tuple):
        return json.dumps(value, separators=(",", ":"))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def coerce_int(value: Any) -> Any:
    """Numbers pass through; anything else is parsed as a float.

    The parse result is kept even when fractional. Integral results are
    returned as ``int`` so ``"12"`` goes on the wire as ``12``.
    """
    if isinstance(value, bool):
        return int(value)
    if _is_number(value):
        return value
    parsed = _to_float(value, TypeTag.INT)
    return int(parsed) if parsed.is_integer() else parsed


def coerce_int_str(value: Any) -> Any:
    if _is_number(value) or isinstance(value, str):
        return value
    return coerce_str(value)


def coerce_float(value: Any) -> Any:
    if isinstance(value, bool):
        return float(value)
    if _is_number(value):
        return value
    return _to_float(value, TypeTag.FLOAT)


def coerce_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if _is_number(value):
        return value > 0
    return str(value).lower() == "true"


def coerce_obj(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Malformed JSON for 'obj' argument: {exc.msg}", tag=TypeTag.OBJ.value, value=value
        ) from exc


_CONVERTERS: dict[TypeTag, Callable[[Any], Any]] = {
    TypeTag.STR: coerce_str,
    TypeTag.INT: coerce_int,
    TypeTag.INT_STR: coerce_int_str,
    TypeTag.FLOAT: coerce_float,
    TypeTag.BOOL: coerce_bool,
    TypeTag.OBJ: coerce_obj,
}


def coerce(tag: TypeTag | str, value: Any) -> Any:
    """Return the canonical wire value of ``value`` for the declared ``tag``.

    ``None`` is passed through for every tag. Unknown tags coerce as ``str``.
    """
    if value is None:
        return None
    if not isinstance(tag, TypeTag):
        tag = TypeTag.parse(tag)
    return _CONVERTERS[tag](value)


def convert_args(tags: Sequence[TypeTag | str], args: Sequence[Any]) -> list[Any]:
    """Coerce the declared leading arguments; trailing extras pass through."""
    converted = list(args)
    for index in range(min(len(tags), len(converted))):
        converted[index] = coerce(tags[index], converted[index])
    return converted
