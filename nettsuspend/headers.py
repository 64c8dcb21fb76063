"""An ordered collection of HTTP request headers."""

from __future__ import annotations

from typing import Iterable, Iterator

MAX_HEADER_LINE = 1023
"""Longest ``key: value`` line sent; longer lines are cut to this length."""


class Headers:
    """Ordered header pairs; a key may appear more than once."""

    def __init__(self, items: Iterable[tuple[str, str]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        for key, value in items or ():
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Append a header pair."""
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("header keys and values must be strings")
        self._pairs.append((key, value))

    def remove(self, key: str) -> None:
        """Remove every pair whose key equals ``key`` exactly."""
        if not isinstance(key, str):
            raise TypeError("header key must be a string")
        self._pairs = [pair for pair in self._pairs if pair[0] != key]

    def items(self) -> list[tuple[str, str]]:
        """Return the header pairs in insertion order."""
        return list(self._pairs)

    def lines(self) -> list[str]:
        """Return the headers formatted as ``key: value`` lines."""
        return [f"{key}: {value}"[:MAX_HEADER_LINE] for key, value in self._pairs]

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._pairs))

    def __repr__(self) -> str:
        return f"Headers({self._pairs!r})"