"""Scalar normalization on input and the quoting policy on output."""
from __future__ import annotations

from collections.abc import Callable

QUOTES = frozenset("\"'")
VALUE_INDICATORS = frozenset("{[&*!|>'\"%@`")
KEY_SPECIAL_CHARS = frozenset(": #[]{},\"'\n")
KEY_RESERVED_WORDS = frozenset({"true", "false", "null", "yes", "no"})


def _skip_quoted(content: str, start: int) -> int:
    """Return the index just past the quoted span opened at ``start``.

    Double-quoted spans honor backslash escapes; single-quoted spans only
    know the doubled '' escape. An unclosed span runs to the end.
    """
    quote = content[start]
    i = start + 1
    n = len(content)
    while i < n:
        c = content[i]
        if quote == '"' and c == "\\" and i + 1 < n:
            i += 2
            continue
        if quote == "'" and c == "'" and i + 1 < n and content[i + 1] == "'":
            i += 2
            continue
        if c == quote:
            return i + 1
        i += 1
    return n


def _find_unquoted(content: str, match: Callable[[str, int], bool]) -> int | None:
    """Return the first index outside any quoted span where ``match`` holds."""
    i = 0
    n = len(content)
    while i < n:
        if content[i] in QUOTES:
            i = _skip_quoted(content, i)
            continue
        if match(content, i):
            return i
        i += 1
    return None


def _is_mapping_colon(content: str, i: int) -> bool:
    return content[i] == ":" and (i + 1 >= len(content) or content[i + 1] == " ")


def _is_colon_space(content: str, i: int) -> bool:
    return content[i] == ":" and i + 1 < len(content) and content[i + 1] == " "


def find_unquoted_colon(content: str) -> int | None:
    """Index of the mapping colon (followed by a space or ending the line)."""
    return _find_unquoted(content, _is_mapping_colon)


def find_inline_comment(content: str) -> int | None:
    """Index of the "#" of the first " #" sequence.

    Only a quote at the very start opens a span; apostrophes inside plain
    text ("don't") do not hide a following comment.
    """
    start = _skip_quoted(content, 0) if content[:1] in QUOTES else 0
    pos = content.find(" #", start)
    if pos < 0:
        return None
    return pos + 1


def _is_wrapped_in_quotes(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in {'"', "'"}


def unquote_key(key: str) -> str:
    if _is_wrapped_in_quotes(key):
        return key[1:-1]
    return key


def normalize_scalar(raw: str) -> str:
    """Dequote or strip the inline comment of a raw scalar.

    Quoted text is returned without its quotes and no further unescaping.
    """
    trimmed = raw.rstrip(" \t")
    if not trimmed:
        return trimmed
    if _is_wrapped_in_quotes(trimmed):
        return trimmed[1:-1]
    hash_pos = find_inline_comment(trimmed)
    if hash_pos is not None:
        return trimmed[: hash_pos - 1].rstrip(" \t")
    return trimmed


def needs_quoting(text: str) -> bool:
    # true/false/null and numbers stay bare so their JSON kind survives.
    if not text:
        return True
    if text[0] in VALUE_INDICATORS:
        return True
    if "\n" in text or "\r" in text:
        return True
    if _find_unquoted(text, _is_colon_space) is not None:
        return True
    # A trailing colon would read back as a mapping key.
    if text.endswith(":"):
        return True
    return find_inline_comment(text) is not None


def key_needs_quoting(key: str) -> bool:
    if not key:
        return True
    if any(c in KEY_SPECIAL_CHARS for c in key):
        return True
    return key in KEY_RESERVED_WORDS


def quote_value(text: str) -> str:
    if not text:
        return '""'
    if not needs_quoting(text):
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def quote_key(key: str) -> str:
    if not key:
        return '""'
    if not key_needs_quoting(key):
        return key
    escaped = key.replace('"', '\\"')
    return f'"{escaped}"'
