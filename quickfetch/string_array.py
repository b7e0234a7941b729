"""A small ordered list of strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class StringArray:
    """An ordered, growable collection of strings."""

    def __init__(self, strings: Iterable[str] | None = None) -> None:
        self._strings: list[str] = list(strings) if strings is not None else []

    def find_position(self, string: str) -> int | None:
        """Return the index of the first equal string, or None when absent."""
        try:
            return self._strings.index(string)
        except ValueError:
            return None

    def set_value(self, index: int, value: str) -> None:
        """Replace the string at ``index``; indices outside the array are ignored."""
        if 0 <= index < len(self._strings):
            self._strings[index] = value

    def append(self, string: str) -> None:
        self._strings.append(string)

    def pop(self, position: int) -> str:
        """Remove and return the string at ``position``."""
        if not 0 <= position < len(self._strings):
            raise IndexError(f"position {position} out of range")
        return self._strings.pop(position)

    def merge(self, other: Iterable[str]) -> None:
        """Append every string of ``other`` in order."""
        self._strings.extend(list(other))

    def represent(self) -> None:
        """Print each string on its own line."""
        for string in self._strings:
            print(string)

    def clone(self) -> StringArray:
        return StringArray(self._strings)

    def append_if_not_included(self, value: str) -> str:
        """Append ``value`` unless present; return the stored string either way."""
        position = self.find_position(value)
        if position is not None:
            return self._strings[position]
        self._strings.append(value)
        return value

    def __len__(self) -> int:
        return len(self._strings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)

    def __getitem__(self, index: int) -> str:
        return self._strings[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringArray):
            return self._strings == other._strings
        return NotImplemented

    def __repr__(self) -> str:
        return f"StringArray({self._strings!r})"