"""Shell environment: an ordered collection of ``NAME=value`` strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class EnvVar:
    """One environment entry with the index it was registered under."""

    index: int
    value: str

    @property
    def name(self) -> str:
        return self.value.partition("=")[0]

    @property
    def content(self) -> str:
        return self.value.partition("=")[2]


def key_matches(assignment: str, value: str) -> bool:
    """Tell whether two ``NAME=...`` strings share the same name.

    Both strings are walked together; they match only when an ``=``
    is reached in both at the same position with nothing differing before it.
    """
    for left, right in zip(assignment, value):
        if left == "=" and right == "=":
            return True
        if left != right:
            return False
    return False


def unset_matches(name: str, value: str) -> bool:
    """Tell whether the bare ``name`` is the name of the entry ``value``."""
    if not name or "=" in name:
        return False
    return value.startswith(name + "=")


class Environment:
    """Entries kept newest first, each carrying a numeric index."""

    def __init__(self, entries: Iterable[EnvVar] = ()) -> None:
        self._entries: list[EnvVar] = list(entries)

    @classmethod
    def from_strings(cls, env: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=value`` strings in process order."""
        environment = cls()
        for index, value in enumerate(env):
            environment._entries.insert(0, EnvVar(index, value))
        return environment

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, value: str) -> EnvVar:
        """Put a new entry in front, indexed one past the current front entry."""
        index = self._entries[0].index + 1 if self._entries else 0
        entry = EnvVar(index, value)
        self._entries.insert(0, entry)
        return entry

    def replace(self, index: int, value: str) -> bool:
        """Set the value of the first entry with ``index``; report whether one was found."""
        for entry in self._entries:
            if entry.index == index:
                entry.value = value
                return True
        return False

    def remove(self, index: int) -> bool:
        """Drop the first entry with ``index``; report whether one was found."""
        for position, entry in enumerate(self._entries):
            if entry.index == index:
                del self._entries[position]
                return True
        return False

    def lookup(self, name: str) -> str:
        """Return the contents of every entry called ``name``, joined; empty if none."""
        key = name + "="
        return "".join(
            entry.content for entry in self._entries if key_matches(key, entry.value)
        )

    def ordered(self) -> list[str]:
        """Return the entry strings oldest first."""
        return [entry.value for entry in reversed(self._entries)]