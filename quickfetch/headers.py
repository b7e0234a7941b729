"""Ordered HTTP header collection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .text import matches_sanitized_key


@dataclass
class Header:
    """One header name and its value."""

    key: str
    value: str


class Headers:
    """Headers kept in insertion order; duplicate names are allowed by ``append``."""

    def __init__(self) -> None:
        self._items: list[Header] = []

    def append(self, key: str, value: str) -> None:
        """Add a header at the end, even if the name is already present."""
        self._items.append(Header(key, value))

    def set(self, key: str, value: str) -> None:
        """Replace the value of the first header with exactly this name, or append one."""
        for header in self._items:
            if header.key == key:
                header.value = value
                return
        self.append(key, value)

    def _at(self, index: int) -> Header | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def key_at(self, index: int) -> str | None:
        """Return the name at ``index``, or None when out of range."""
        header = self._at(index)
        return header.key if header else None

    def value_at(self, index: int) -> str | None:
        """Return the value at ``index``, or None when out of range."""
        header = self._at(index)
        return header.value if header else None

    def get(self, key: str) -> str | None:
        """Return the value of the first header whose name equals ``key`` exactly."""
        return next((h.value for h in self._items if h.key == key), None)

    def get_sanitized(self, key: str) -> str | None:
        """Return the value of the first header whose sanitized name equals ``key``."""
        return next(
            (h.value for h in self._items if matches_sanitized_key(h.key, key)), None
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Header]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Headers({[(h.key, h.value) for h in self._items]!r})"