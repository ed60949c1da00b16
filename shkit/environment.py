"""Ordered collection of KEY=VALUE environment entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class EnvVar:
    """One environment entry: its full text, key, and value if it has one."""

    content: str
    key: str
    value: str | None = None


def parse_entry(content: str) -> EnvVar:
    """Split an entry at its first '='; without one the value is None."""
    if not isinstance(content, str):
        raise TypeError(f"environment entry must be a string, got {type(content).__name__}")
    key, sep, value = content.partition("=")
    return EnvVar(content=content, key=key, value=value if sep else None)


class Environment:
    """An ordered list of environment entries, kept in insertion order."""

    def __init__(self, entries: Iterable[str] | None = None) -> None:
        self._vars: list[EnvVar] = []
        for entry in entries or ():
            self.add(entry)

    def add(self, content: str) -> EnvVar:
        """Parse an entry and append it at the end."""
        var = parse_entry(content)
        self._vars.append(var)
        return var

    def get(self, key: str) -> EnvVar | None:
        """Return the first entry with this key, or None."""
        return next((var for var in self._vars if var.key == key), None)

    def remove(self, key: str) -> EnvVar | None:
        """Remove and return the first entry with this key; None if absent."""
        for position, var in enumerate(self._vars):
            if var.key == key:
                del self._vars[position]
                return var
        return None

    def sort(self) -> None:
        """Order entries by key, keeping equal keys in their current order."""
        self._vars.sort(key=lambda var: var.key)

    def envp(self) -> list[str]:
        """Return the entries' full texts, in order."""
        return [var.content for var in self._vars]

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)