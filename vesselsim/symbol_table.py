"""A keyed table of named quantities."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any


class SymbolTable:
    """Maps names to values. Each name may be inserted only once."""

    def __init__(self) -> None:
        self._table: dict[Hashable, Any] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def insert(self, key: Hashable, value: Any) -> None:
        """Add a new entry; raise KeyError if the key already exists."""
        if key in self._table:
            raise KeyError(f"Key {key!r} already exists in the symbol table.")
        self._table[key] = value

    def lookup(self, key: Hashable) -> Any | None:
        """Return the value for ``key``, or None if it is absent."""
        return self._table.get(key)

    def increment(self, key: Hashable) -> None:
        """Raise the value for ``key`` by one."""
        self._require(key)
        self._table[key] += 1

    def decrement(self, key: Hashable) -> None:
        """Lower the value for ``key`` by one."""
        self._require(key)
        self._table[key] -= 1

    def to_dict(self) -> dict[Hashable, Any]:
        """Return a copy of the table ordered by key."""
        return {key: self._table[key] for key in sorted(self._table)}

    def format_lines(self) -> Iterator[str]:
        """Yield one human-readable line per entry."""
        for key, value in self._table.items():
            yield f"Key: {key}, Value: {value}"

    def _require(self, key: Hashable) -> None:
        if key not in self._table:
            raise KeyError(f"Key {key!r} not found in the symbol table.")