from __future__ import annotations

from zyaml.scalars import quote_key, quote_value
from zyaml.value import Mapping, Scalar, Sequence, Value

INDENT_STEP = 2


def serialize(value: Value) -> str:
    """Render a value tree as YAML with two spaces per nesting level."""
    out: list[str] = []
    _write_value(out, value, 0, inline_first=False)
    return "".join(out)


def _write_value(out: list[str], value: Value, indent: int, inline_first: bool) -> None:
    pad = " " * indent
    if isinstance(value, Scalar):
        if not inline_first:
            out.append(pad)
        out.append(quote_value(value.text) + "\n")
    elif isinstance(value, Mapping):
        for idx, entry in enumerate(value.entries):
            # The first entry of a sequence item continues the "- " line.
            if idx > 0 or not inline_first:
                out.append(pad)
            out.append(quote_key(entry.key) + ":")
            _write_entry_value(out, entry.value, indent)
    elif isinstance(value, Sequence):
        for item in value.items:
            _write_item(out, item, indent)
    else:
        raise TypeError(f"cannot serialize {type(value).__name__}")


def _write_entry_value(out: list[str], value: Value, indent: int) -> None:
    if isinstance(value, Scalar):
        out.append(" " + quote_value(value.text) + "\n")
    elif not len(value):
        # Empty collections are written in flow style.
        out.append(" []\n" if isinstance(value, Sequence) else " {}\n")
    else:
        out.append("\n")
        _write_value(out, value, indent + INDENT_STEP, inline_first=False)


def _write_item(out: list[str], item: Value, indent: int) -> None:
    pad = " " * indent
    if isinstance(item, Scalar) or not len(item):
        text = item.text if isinstance(item, Scalar) else ""
        out.append(f"{pad}- {quote_value(text)}\n")
    elif isinstance(item, Mapping):
        out.append(f"{pad}- ")
        _write_value(out, item, indent + INDENT_STEP, inline_first=True)
    else:
        # Nested sequences open with a lone dash.
        out.append(f"{pad}-\n")
        _write_value(out, item, indent + INDENT_STEP, inline_first=False)
