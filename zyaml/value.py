"""Value tree produced by the parser and consumed by the serializer and JSON bridge."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from zyaml.errors import DocumentReleasedError


@dataclass(frozen=True)
class Scalar:
    text: str = ""


@dataclass(frozen=True)
class MapEntry:
    key: str
    value: Value


@dataclass(frozen=True)
class Mapping:
    entries: tuple[MapEntry, ...] = ()

    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Return the value of the last entry named ``key``.

        Duplicate keys stay in ``entries``; lookup simply prefers the later one.
        """
        found = default
        for entry in self.entries:
            if entry.key == key:
                found = entry.value
        return found

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Sequence:
    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


Value = Union[Scalar, Mapping, Sequence]


@dataclass
class Document:
    """Owns one parsed tree; ``release`` drops the whole tree at once."""

    _value: Value | None = field(default=None, repr=False)

    @property
    def value(self) -> Value:
        if self._value is None:
            raise DocumentReleasedError("document has been released")
        return self._value

    @property
    def released(self) -> bool:
        return self._value is None

    def release(self) -> None:
        self._value = None

    def __enter__(self) -> Document:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
