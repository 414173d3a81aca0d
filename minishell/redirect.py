"""Input redirection with ``<`` and continuation of unbalanced double quotes."""

from __future__ import annotations

import sys
from typing import Callable

CONTINUATION_PROMPT = "\n >_ "


def stdin_redirect_target(command: str) -> str | None:
    """Return the file named after the first ``<`` in ``command``, if any."""
    if "<" not in command:
        return None
    parts = [part for part in command.split("<") if part]
    if len(parts) < 2:
        return None
    return parts[1].strip(" ")


def redirect_stdin(command: str) -> str | None:
    """Return the contents of the redirected file, or ``None`` if there is none."""
    target = stdin_redirect_target(command)
    if target is None:
        return None
    try:
        with open(target, "rb") as handle:
            return handle.read().decode(errors="replace")
    except OSError:
        return None


def count_double_quotes(command: str) -> int:
    """Count the double-quote characters in ``command``."""
    return command.count('"')


def read_quoted(command: str, read_line: Callable[[str], str | None]) -> str:
    """Read more input until a lone opening double quote is closed.

    ``read_line`` is called with the continuation prompt and its text is
    appended directly.  End of input raises ``EOFError``.
    """

    def more(text: str) -> str:
        line = read_line(CONTINUATION_PROMPT)
        if line is None:
            raise EOFError("end of input inside a quoted string")
        return text + line

    if count_double_quotes(command) != 1:
        return command
    text = more(command)
    while count_double_quotes(text) < 2:
        sys.stdout.write(text)
        text = more(text)
    return text