"""The ``echo`` builtin: word splitting, quote handling and ``$NAME`` expansion."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from minishell.environment import Environment

_NAME_STOP = frozenset(" \"'$")
_WORD_STOP = frozenset(" \"'")


def split_echo(text: str) -> list[str]:
    """Split the joined echo arguments into words.

    An unquoted word keeps the single space that ended it.  A quoted word
    keeps its quotes and any characters glued to the closing quote.
    """
    words: list[str] = []
    length = len(text)
    pos = 0
    while pos < length and text[pos] == " ":
        pos += 1
    while pos < length:
        word: list[str] = []
        char = text[pos]
        if char in "\"'":
            delimiter = char
            word.append(char)
            pos += 1
        else:
            delimiter = " "
        while pos < length and text[pos] != delimiter:
            word.append(text[pos])
            pos += 1
        if pos + 1 < length and text[pos] != " " and text[pos + 1] != delimiter:
            while pos + 1 < length and text[pos + 1] not in (" ", delimiter):
                word.append(text[pos])
                pos += 1
        if pos < length:
            word.append(text[pos])
        words.append("".join(word))
        pos += 1
        while pos < length and text[pos] == " ":
            pos += 1
    return words


def expand_variable(name: str, environment: Environment) -> str:
    """Return what ``$name`` expands to: the contents of every matching entry."""
    return environment.lookup(name)


def _variable_name(text: str, start: int) -> str:
    end = start
    while end < len(text) and text[end] not in _NAME_STOP:
        end += 1
    return text[start:end]


def _render_double_quoted(
    word: str, pos: int, environment: Environment, parts: list[str]
) -> int:
    """Render from an opening double quote; return the position of its close."""
    length = len(word)
    pos += 1
    while pos < length and word[pos] != '"':
        if word[pos] == "$":
            parts.append(expand_variable(_variable_name(word, pos + 1), environment))
            while pos < length and word[pos] not in _WORD_STOP:
                pos += 1
                if pos < length and word[pos] == "$":
                    parts.append(
                        expand_variable(_variable_name(word, pos + 1), environment)
                    )
            pos -= 1
        else:
            parts.append(word[pos])
        pos += 1
    return pos


def _render_word(word: str, environment: Environment) -> str:
    parts: list[str] = []
    length = len(word)
    pos = 0
    while pos < length:
        char = word[pos]
        if char == '"':
            pos = _render_double_quoted(word, pos, environment, parts)
        elif char == "'":
            pos += 1
            while pos < length and word[pos] != "'":
                parts.append(word[pos])
                pos += 1
        elif char == "$":
            parts.append(expand_variable(_variable_name(word, pos + 1), environment))
            pos += 1
            while (
                pos < length
                and word[pos] not in _WORD_STOP
                and (pos + 1 >= length or word[pos + 1] != "$")
            ):
                pos += 1
        else:
            parts.append(char)
        pos += 1
    return "".join(parts)


def render_echo(args: Sequence[str], environment: Environment) -> str:
    """Return what ``echo`` prints for the command words ``args``."""
    if len(args) < 2:
        return "\n"
    words = split_echo(" ".join(args[1:]))
    if words and words[0] == "-n ":
        return " ".join(_render_word(word, environment) for word in words[1:])
    return " ".join(_render_word(word, environment) for word in words) + "\n"


def echo(
    args: Sequence[str], environment: Environment, out: TextIO | None = None
) -> None:
    """Write the output of ``echo`` to ``out`` (standard output by default)."""
    stream = out if out is not None else sys.stdout
    stream.write(render_echo(args, environment))