from __future__ import annotations

from dataclasses import dataclass


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only; carriage returns stay part of the line."""
    return text.split("\n")


def indent_of(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def is_blank_or_comment(line: str) -> bool:
    stripped = line.lstrip(" ")
    return not stripped or stripped.startswith("#")


@dataclass
class LineCursor:
    lines: list[str]
    index: int = 0

    @classmethod
    def from_text(cls, text: str) -> LineCursor:
        return cls(split_lines(text))

    def at_end(self) -> bool:
        return self.index >= len(self.lines)

    def current(self) -> str | None:
        if self.at_end():
            return None
        return self.lines[self.index]

    def advance(self) -> None:
        self.index += 1

    def skip_blanks_and_comments(self) -> None:
        while self.index < len(self.lines) and is_blank_or_comment(self.lines[self.index]):
            self.index += 1

    def peek(self) -> str | None:
        """Return the next substantive line without consuming it."""
        self.skip_blanks_and_comments()
        return self.current()
