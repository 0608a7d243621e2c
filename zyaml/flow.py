"""Inline ``[...]`` and ``{...}`` collections on a single line."""
from __future__ import annotations

from zyaml.errors import FlowSyntaxError
from zyaml.scalars import normalize_scalar, unquote_key
from zyaml.value import MapEntry, Mapping, Scalar, Sequence, Value

OPENERS = "[{"
CLOSERS = "]}"


def find_matching_close(text: str) -> int | None:
    """Index of the bracket closing ``text[0]``, or None if unterminated."""
    depth = 0
    for i, c in enumerate(text):
        if c in OPENERS:
            depth += 1
        elif c in CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return None


def split_top_level(content: str) -> list[str]:
    """Split on commas that are not nested inside brackets or braces."""
    segments: list[str] = []
    depth = 0
    start = 0
    for i, c in enumerate(content):
        if c in OPENERS:
            depth += 1
        elif c in CLOSERS:
            if depth > 0:
                depth -= 1
        elif c == "," and depth == 0:
            segments.append(content[start:i].strip(" "))
            start = i + 1
    segments.append(content[start:].strip(" "))
    return [segment for segment in segments if segment]


def _inner(text: str, opener: str, what: str) -> str:
    if len(text) < 2 or text[0] != opener:
        raise FlowSyntaxError(f"expected {what}", text)
    close = find_matching_close(text)
    if close is None:
        raise FlowSyntaxError(f"unterminated {what}", text)
    return text[1:close].strip(" ")


def parse_flow_value(segment: str) -> Value:
    if segment.startswith("["):
        return parse_flow_sequence(segment)
    if segment.startswith("{"):
        return parse_flow_mapping(segment)
    return Scalar(normalize_scalar(segment))


def parse_flow_sequence(text: str) -> Sequence:
    content = _inner(text, "[", "flow sequence")
    return Sequence(tuple(parse_flow_value(segment) for segment in split_top_level(content)))


def _parse_flow_entry(segment: str) -> MapEntry:
    sep = ": "
    colon = segment.find(sep)
    if colon < 0:
        sep = ":"
        colon = segment.find(sep)
    if colon < 0:
        raise FlowSyntaxError("flow mapping entry without ':'", segment)
    key = unquote_key(segment[:colon].strip(" "))
    # Values stay scalar: nested flow collections are not parsed here.
    raw = segment[colon + len(sep):].strip(" ")
    return MapEntry(key, Scalar(normalize_scalar(raw)))


def parse_flow_mapping(text: str) -> Mapping:
    content = _inner(text, "{", "flow mapping")
    return Mapping(tuple(_parse_flow_entry(segment) for segment in split_top_level(content)))
