"""The coloured two-line prompt showing user, host and current directory."""

from __future__ import annotations

import os
from typing import Sequence

from minishell.environment import Environment
from minishell.executor import run_command_capture
from minishell.textutils import remove_end_char

SHELL_1 = "\033[1;36m\033[1;33m┌───⸨"
SHELL_2 = "\033[1;35m᯽ \033[1;32m"
SHELL_3 = "\033[1;34m⸩⸺  [\033[1;34m\033[1;37m~/"
SHELL_4 = "\033[1;34m]\033[0m\n\033[1;32m\033[1;36m\033[1;33m└──$ \033[0m"


def count_slashes(path: str) -> int:
    """Count the ``/`` characters in ``path``."""
    return path.count("/")


def _directory_label(cwd: str) -> str:
    parts = [part for part in cwd.split("/") if part]
    position = count_slashes(cwd) - 1
    if 0 <= position < len(parts):
        return parts[position]
    return ""


def build_prompt(user: str, host: str, cwd: str) -> str:
    """Compose the prompt from a user name, host name and working directory."""
    host_parts = [part for part in host.split(".") if part]
    short_host = host_parts[0] if host_parts else ""
    return (
        SHELL_1
        + user
        + SHELL_2
        + short_host
        + SHELL_3
        + _directory_label(cwd)
        + SHELL_4
    )


def display_shell(
    environment: Environment, env: Sequence[str] | None = None
) -> str:
    """Build the prompt from ``whoami``, ``hostname`` and the working directory."""
    user = run_command_capture("whoami", environment, env) or ""
    host = run_command_capture("hostname", environment, env) or ""
    return build_prompt(remove_end_char(user), host, os.getcwd())