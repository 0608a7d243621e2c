"""Conversion between value trees and plain JSON values.

JSON values are the objects produced by ``json.loads``: None, bool, int,
float, str, list and dict.
"""
from __future__ import annotations

import re
from typing import Any

from zyaml.errors import ConversionError
from zyaml.value import MapEntry, Mapping, Scalar, Sequence, Value

NULL_WORDS = frozenset({"null", "~"})
TRUE_WORDS = frozenset({"true", "yes"})
FALSE_WORDS = frozenset({"false", "no"})
FLOAT_MARKERS = (".", "e", "E")

_INT_RE = re.compile(r"[-+]?[0-9]+\Z")


def infer_scalar(text: str) -> Any:
    """Infer the JSON value of scalar text (null, bool, int, float or str)."""
    if not text:
        return None
    lowered = text.lower()
    if lowered in NULL_WORDS:
        return None
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    if _INT_RE.match(text):
        return int(text)
    if any(marker in text for marker in FLOAT_MARKERS) and text.strip() == text and "_" not in text:
        try:
            return float(text)
        except ValueError:
            pass
    return text


def to_json_value(value: Value) -> Any:
    if isinstance(value, Scalar):
        return infer_scalar(value.text)
    if isinstance(value, Mapping):
        # Later duplicates overwrite earlier ones in the resulting dict.
        return {entry.key: to_json_value(entry.value) for entry in value.entries}
    if isinstance(value, Sequence):
        return [to_json_value(item) for item in value.items]
    raise ConversionError(f"not a value node: {type(value).__name__}")


def _number_text(number: int | float) -> str:
    if isinstance(number, float):
        # repr keeps a "." or an exponent, so the text infers back to a float.
        return repr(number)
    return str(number)


def from_json_value(obj: Any) -> Value:
    if obj is None:
        return Scalar("null")
    if isinstance(obj, bool):
        return Scalar("true" if obj else "false")
    if isinstance(obj, (int, float)):
        return Scalar(_number_text(obj))
    if isinstance(obj, str):
        return Scalar(obj)
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(from_json_value(item) for item in obj))
    if isinstance(obj, dict):
        entries = []
        for key, item in obj.items():
            if not isinstance(key, str):
                raise ConversionError(f"object keys must be strings, got {type(key).__name__}")
            entries.append(MapEntry(key, from_json_value(item)))
        return Mapping(tuple(entries))
    raise ConversionError(f"unsupported JSON type: {type(obj).__name__}")
