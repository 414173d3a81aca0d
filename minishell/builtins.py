"""Builtin commands: pwd, env, cd, exit, export, unset and echo dispatch."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

from minishell.echo import echo
from minishell.environment import Environment, key_matches, unset_matches


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def pwd(args: Sequence[str], out: TextIO | None = None) -> None:
    """Print the working directory; refuse extra arguments."""
    stream = _stream(out)
    if len(args) != 1:
        stream.write("pwd: too many arguments\n")
        return
    try:
        stream.write(os.getcwd() + "\n")
    except OSError:
        return


def env_command(
    args: Sequence[str], environment: Environment, out: TextIO | None = None
) -> None:
    """Print every environment entry, oldest first."""
    stream = _stream(out)
    if len(args) > 1:
        stream.write(f"env: \u2018{args[1]}\u2019: No such file or directory\n")
        return
    for value in environment.ordered():
        stream.write(value + "\n")


def export_listing(
    args: Sequence[str], environment: Environment, out: TextIO | None = None
) -> None:
    """Print every entry in ``declare -x`` form, oldest first."""
    stream = _stream(out)
    if len(args) > 1:
        stream.write(f"env: \u2018{args[1]}\u2019: No such file or directory\n")
        return
    for value in environment.ordered():
        stream.write(f"declare -x {value}\n")


def cd(args: Sequence[str], out: TextIO | None = None) -> None:
    """Change directory to the argument, or to ``$HOME`` without one."""
    stream = _stream(out)
    if len(args) == 1:
        home = os.environ.get("HOME")
        if not home:
            return
        try:
            os.chdir(home)
        except OSError:
            stream.write("cd: string not in pwd\n")
    elif len(args) == 2:
        try:
            os.chdir(args[1])
        except OSError:
            stream.write(f"cd: string not in {args[1]}\n")


def exit_shell(args: Sequence[str], out: TextIO | None = None) -> None:
    """Leave the shell with status 1."""
    if len(args) > 1:
        stream = _stream(out)
        stream.write("there is 2 or more arg")
        stream.flush()
    raise SystemExit(1)


def _replace_existing(assignment: str, environment: Environment, out: TextIO) -> bool:
    found = False
    for entry in list(environment):
        if key_matches(assignment, entry.value):
            found = True
            out.write("existe\n")
            environment.replace(entry.index, assignment)
    return found


def _export_one(assignment: str, environment: Environment, out: TextIO) -> None:
    if assignment.startswith("="):
        out.write("zsh: 43 not found\n")
    if "=" not in assignment[1:]:
        out.write("No\n")
        return
    if _replace_existing(assignment, environment, out):
        # The existing entry is checked and updated a second time.
        _replace_existing(assignment, environment, out)
    else:
        environment.add(assignment)


def export(
    args: Sequence[str], environment: Environment, out: TextIO | None = None
) -> None:
    """Set or add ``NAME=value`` entries; list the environment without arguments."""
    stream = _stream(out)
    if len(args) == 1:
        export_listing(args, environment, stream)
        return
    for assignment in args[1:]:
        _export_one(assignment, environment, stream)


def unset(
    args: Sequence[str], environment: Environment, out: TextIO | None = None
) -> None:
    """Remove every entry named by the arguments."""
    stream = _stream(out)
    for name in args[1:]:
        for entry in list(environment):
            if unset_matches(name, entry.value):
                stream.write(f"existe indice: {entry.index}\n")
                environment.remove(entry.index)


def run_builtin(
    args: Sequence[str], environment: Environment, out: TextIO | None = None
) -> bool:
    """Run ``args`` if it names a builtin; report whether it did."""
    if not args:
        return False
    stream = _stream(out)
    command = args[0]
    if command == "pwd":
        pwd(args, stream)
    elif command == "env":
        env_command(args, environment, stream)
    elif command == "exit":
        exit_shell(args, stream)
    elif command == "echo":
        if len(args) == 2 and args[1] == "-n":
            return True
        echo(args, environment, stream)
    elif command == "cd":
        cd(args, stream)
    elif command == "export":
        export(args, environment, stream)
    elif command == "unset":
        unset(args, environment, stream)
    else:
        return False
    return True