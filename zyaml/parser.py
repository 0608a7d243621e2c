"""Recursive-descent parser for the indentation-based YAML subset.

The grammar is forgiving: a line that fits no recognized shape ends the
construct being parsed and the partial result is returned. Only the flow
collection parser raises (``FlowSyntaxError``).
"""
from __future__ import annotations

from pathlib import Path

from zyaml.flow import parse_flow_value
from zyaml.lines import LineCursor, indent_of
from zyaml.scalars import find_unquoted_colon, normalize_scalar, unquote_key
from zyaml.value import Document, MapEntry, Mapping, Scalar, Sequence, Value

BLOCK_INDICATORS = ("|", ">")
FLOW_OPENERS = ("[", "{")


def parse(text: str) -> Document:
    """Parse YAML text into a Document owning the resulting tree."""
    cursor = LineCursor.from_text(text)
    return Document(parse_value(cursor, 0))


def parse_file(path: Path) -> Document:
    return parse(path.read_text(encoding="utf-8"))


def _is_sequence_item(content: str) -> bool:
    return content == "-" or content.startswith("- ")


def parse_value(cursor: LineCursor, min_indent: int) -> Value:
    """Parse whatever starts at the next substantive line.

    Returns an empty scalar when input is exhausted or the line is indented
    less than ``min_indent``.
    """
    line = cursor.peek()
    if line is None:
        return Scalar("")
    indent = indent_of(line)
    if indent < min_indent:
        return Scalar("")
    content = line[indent:]
    if _is_sequence_item(content):
        return _parse_sequence(cursor, indent)
    if find_unquoted_colon(content) is not None:
        return _parse_mapping(cursor, indent)
    cursor.advance()
    return Scalar(normalize_scalar(content))


def parse_block_scalar(cursor: LineCursor, indicator: str, min_indent: int) -> Scalar:
    """Consume a literal (|) or folded (>) block starting at the cursor."""
    separator = "\n" if indicator == "|" else " "
    chunks: list[str] = []
    content_indent: int | None = None
    while not cursor.at_end():
        line = cursor.current()
        if not line.lstrip(" "):
            if content_indent is not None:
                chunks.append("\n")
            cursor.advance()
            continue
        indent = indent_of(line)
        if indent < min_indent:
            break
        if content_indent is None:
            content_indent = indent
        elif indent < content_indent:
            break
        if chunks:
            chunks.append(separator)
        chunks.append(line[content_indent:])
        cursor.advance()
    return Scalar("".join(chunks))


def _split_entry(content: str, colon: int) -> tuple[str, str]:
    key = unquote_key(content[:colon].rstrip(" "))
    rest = content[colon + 1:].lstrip(" ")
    return key, rest


def _parse_entry_value(cursor: LineCursor, rest: str, block_indent: int, nested_indent: int) -> Value:
    # The cursor already sits past the line holding the key.
    if not rest:
        return parse_value(cursor, nested_indent)
    if rest.startswith(BLOCK_INDICATORS):
        return parse_block_scalar(cursor, rest[0], block_indent)
    if rest.startswith(FLOW_OPENERS):
        return parse_flow_value(rest.rstrip(" \t"))
    return Scalar(normalize_scalar(rest))


def _parse_mapping(cursor: LineCursor, base: int) -> Mapping:
    entries: list[MapEntry] = []
    while True:
        line = cursor.peek()
        if line is None or indent_of(line) != base:
            break
        content = line[base:]
        colon = find_unquoted_colon(content)
        if colon is None:
            break
        cursor.advance()
        key, rest = _split_entry(content, colon)
        entries.append(MapEntry(key, _parse_entry_value(cursor, rest, base + 2, base + 1)))
    return Mapping(tuple(entries))


def _parse_item_mapping(cursor: LineCursor, base: int, first: str, colon: int) -> Mapping:
    """Mapping opened on a dash line ("- key: value") and continued below it."""
    entry_indent = base + 2
    key, rest = _split_entry(first, colon)
    entries = [MapEntry(key, _parse_entry_value(cursor, rest, entry_indent, entry_indent))]
    while True:
        line = cursor.peek()
        if line is None:
            break
        indent = indent_of(line)
        if indent < entry_indent:
            break
        content = line[indent:]
        colon = find_unquoted_colon(content)
        if colon is None:
            break
        cursor.advance()
        key, rest = _split_entry(content, colon)
        entries.append(MapEntry(key, _parse_entry_value(cursor, rest, indent + 2, indent + 2)))
    return Mapping(tuple(entries))


def _parse_sequence(cursor: LineCursor, base: int) -> Sequence:
    items: list[Value] = []
    while True:
        line = cursor.peek()
        if line is None or indent_of(line) != base:
            break
        content = line[base:]
        if content == "-":
            cursor.advance()
            items.append(parse_value(cursor, base + 2))
            continue
        if not content.startswith("- "):
            break
        rest = content[2:].lstrip(" ")
        cursor.advance()
        if rest.startswith(BLOCK_INDICATORS):
            items.append(parse_block_scalar(cursor, rest[0], base + 2))
            continue
        colon = find_unquoted_colon(rest)
        if colon is not None:
            items.append(_parse_item_mapping(cursor, base, rest, colon))
        else:
            items.append(Scalar(normalize_scalar(rest)))
    return Sequence(tuple(items))
