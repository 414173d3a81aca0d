"""Small string helpers used across the shell."""

from __future__ import annotations


def split_path(path: str) -> list[str]:
    """Split a ``PATH=dir:dir`` entry into directories, each ending in ``/``."""
    _, sep, rest = path.partition("=")
    if not sep or not rest:
        return []
    parts = rest.split(":")
    if rest.endswith(":"):
        parts.pop()
    return [part + "/" for part in parts]


def remove_end_char(text: str) -> str:
    """Return ``text`` without its last character."""
    return text[:-1]


def join_space(first: str, second: str) -> str:
    """Join two strings with a single space between them."""
    return f"{first} {second}"


def toupper_str(text: str) -> str:
    """Upper-case the ASCII letters of ``text``, leaving everything else alone."""
    return "".join(
        chr(ord(char) - 32) if "a" <= char <= "z" else char for char in text
    )