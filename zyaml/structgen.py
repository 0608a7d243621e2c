"""Go struct definitions inferred from a JSON value (the yamlstruct command)."""
from __future__ import annotations

from typing import Any

WORD_SEPARATORS = frozenset("_- ")


def to_pascal_case(name: str) -> str:
    chars: list[str] = []
    capitalize_next = True
    for c in name:
        if c in WORD_SEPARATORS:
            capitalize_next = True
            continue
        chars.append(c.upper() if capitalize_next else c)
        capitalize_next = False
    return "".join(chars) or "X"


def go_type_for_value(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int64"
    if isinstance(value, float):
        return "float64"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "map[string]interface{}"
    if isinstance(value, list):
        return "[]interface{}"
    return "interface{}"


def _field_type(key: str, value: Any, nested: list[tuple[str, Any]]) -> str:
    if isinstance(value, dict):
        name = to_pascal_case(key)
        nested.append((name, value))
        return name
    if isinstance(value, list):
        if not value:
            return "[]interface{}"
        first = value[0]
        if isinstance(first, dict):
            name = to_pascal_case(key)
            nested.append((name, first))
            return f"[]{name}"
        return f"[]{go_type_for_value(first)}"
    return go_type_for_value(value)


def _write_struct(out: list[str], name: str, value: Any, level: int) -> None:
    tabs = "\t" * level
    if isinstance(value, dict):
        nested: list[tuple[str, Any]] = []
        out.append(f"{tabs}type {name} struct {{\n")
        for key, item in value.items():
            field_type = _field_type(key, item, nested)
            out.append(f'{tabs}\t{to_pascal_case(key)} {field_type} `json:"{key}"`\n')
        out.append(f"{tabs}}}\n")
        for nested_name, nested_value in nested:
            out.append("\n")
            _write_struct(out, nested_name, nested_value, level)
    elif isinstance(value, list):
        if not value:
            return
        first = value[0]
        if isinstance(first, dict):
            _write_struct(out, name, first, level)
        else:
            out.append(f"{tabs}// {name} is an array of {go_type_for_value(first)}\n")
    else:
        out.append("// Cannot generate struct from scalar value\n")


def generate_go_struct(value: Any, name: str = "Root") -> str:
    out: list[str] = []
    _write_struct(out, name, value, 0)
    return "".join(out)
