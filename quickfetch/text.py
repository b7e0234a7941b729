"""Text helpers for comparing header names loosely."""

from __future__ import annotations

_IGNORED = frozenset(" \t\n\r-_")


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def sanitize_key(key: str) -> str:
    """Drop whitespace, dashes and underscores from a key and lower its ASCII letters."""
    return _ascii_lower("".join(c for c in key if c not in _IGNORED))


def matches_sanitized_key(key: str, sanitized: str) -> bool:
    """Tell whether ``key``, once sanitized, equals ``sanitized`` ignoring ASCII case."""
    return sanitize_key(key) == _ascii_lower(sanitized)