"""Running command lines: builtins first, then programs found on ``PATH``."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Sequence, TextIO

from minishell.builtins import run_builtin
from minishell.environment import Environment

GREEN_TEXT = "\033[1;32m"
RED_TEXT = "\033[1;31m"
ORANGE_TEXT = "\033[1;33m"
BLUE_TEXT = "\033[1;34m"
GREEN_BG = "\033[42m"
RED_BG = "\033[41m"
ORANGE_BG = "\033[43m"
BLUE_BG = "\033[44m"
RESET = "\033[0m"

# Only this many characters of PATH are searched.
_PATH_LIMIT = 1023


def search_dirs(path: str | None = None) -> list[str]:
    """Return the non-empty directories of ``path`` (``$PATH`` when omitted)."""
    if path is None:
        path = os.environ.get("PATH")
        if path is None:
            return []
    return [directory for directory in path[:_PATH_LIMIT].split(":") if directory]


def find_command(name: str, path: str | None = None) -> str | None:
    """Locate an executable for ``name``; ``None`` when there is none.

    Names starting with ``/`` or ``.`` are taken as paths and only checked;
    other names are looked up in each directory of the search path in turn.
    """
    if name.startswith(("/", ".")):
        return name if os.access(name, os.X_OK) else None
    for directory in search_dirs(path):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def _env_mapping(env: Sequence[str] | None) -> Mapping[str, str] | None:
    if env is None:
        return None
    mapping: dict[str, str] = {}
    for item in env:
        name, _, value = item.partition("=")
        mapping[name] = value
    return mapping


def _resolve(
    line: str, environment: Environment, stream: TextIO
) -> tuple[list[str], str] | None:
    args = [word for word in line.split(" ") if word]
    if not args:
        return None
    if run_builtin(args, environment, stream):
        return None
    path = find_command(args[0])
    if path is None:
        stream.write(f"{RED_TEXT}{line} is not recognized on this shell\n")
        return None
    return args, path


def _report_exec_error(error: OSError) -> None:
    sys.stderr.write(f"\nexecve: : {error.strerror or error}\n")


def run_command(
    line: str,
    environment: Environment,
    env: Sequence[str] | None = None,
    out: TextIO | None = None,
) -> int | None:
    """Run ``line``; return the program's exit status, or ``None`` if none ran."""
    stream = out if out is not None else sys.stdout
    resolved = _resolve(line, environment, stream)
    if resolved is None:
        return None
    args, path = resolved
    stream.flush()
    sys.stdout.flush()
    try:
        completed = subprocess.run(args, executable=path, env=_env_mapping(env))
    except OSError as error:
        _report_exec_error(error)
        return 0
    return completed.returncode


def run_command_capture(
    line: str,
    environment: Environment,
    env: Sequence[str] | None = None,
    out: TextIO | None = None,
) -> str | None:
    """Run ``line`` and return what the program wrote to standard output.

    Returns ``None`` when the line was a builtin or no program was found.
    """
    stream = out if out is not None else sys.stdout
    resolved = _resolve(line, environment, stream)
    if resolved is None:
        return None
    args, path = resolved
    try:
        completed = subprocess.run(
            args,
            executable=path,
            env=_env_mapping(env),
            stdout=subprocess.PIPE,
        )
    except OSError as error:
        _report_exec_error(error)
        return ""
    return completed.stdout.decode(errors="replace")