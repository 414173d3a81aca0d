"""The interactive read-evaluate loop and the command entry point."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Sequence, TextIO

from minishell.environment import Environment
from minishell.executor import run_command
from minishell.prompt import display_shell
from minishell.redirect import redirect_stdin


def _on_interrupt(signum, frame) -> None:
    sys.stdout.write("\n")
    sys.stdout.flush()


def install_signals() -> None:
    """Print a newline on Ctrl-C instead of stopping; ignore Ctrl-\\."""
    signal.signal(signal.SIGINT, _on_interrupt)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def handle_line(
    line: str,
    environment: Environment,
    env: Sequence[str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Show a redirected file's contents, or else run the line as a command."""
    if not line:
        return
    stream = out if out is not None else sys.stdout
    content = redirect_stdin(line)
    if content is not None:
        stream.write(content)
    else:
        run_command(line, environment, env, stream)


def _remember(line: str) -> None:
    try:
        import readline
    except ImportError:
        return
    readline.add_history(line)


def repl(
    environment: Environment,
    env: Sequence[str] | None = None,
    read_line: Callable[[str], str | None] = input,
    out: TextIO | None = None,
) -> int:
    """Prompt, read and run lines until end of input; return the exit status."""
    while True:
        prompt = display_shell(environment, env)
        try:
            line = read_line(prompt)
        except EOFError:
            return 0
        if line is None:
            return 0
        if line:
            handle_line(line, environment, env, out)
            _remember(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell with the process environment."""
    env = [f"{name}={value}" for name, value in os.environ.items()]
    environment = Environment.from_strings(env)
    install_signals()
    return repl(environment, env, input, sys.stdout)