# minishell

A small interactive shell. It shows a coloured two-line prompt with the
current user, host and directory. It runs programs found on `PATH`, or given
by a path that starts with `/` or `.`. It handles a handful of commands itself.

## Installing

```
pip install .
```

## Running

```
minishell
```

Type a command at the prompt and press Enter. The prompt is rebuilt before
every line. It runs `whoami` and `hostname` to get the user and host names.

- End of input (Ctrl-D) leaves the shell with status 0.
- Ctrl-C prints a newline and does not stop the shell.
- Ctrl-\ is ignored.

A command line is split into words at spaces. Programs that are not builtins
are started with the environment the shell was started with. Changes made
with `export` or `unset` are not passed on to them.

## Builtins

| Command           | What it does                                                            |
|-------------------|-------------------------------------------------------------------------|
| `echo [-n] ...`   | Prints its arguments and expands `$NAME`. Text in single quotes stays literal. `-n` drops the newline. |
| `cd [dir]`        | Changes directory, or changes to `$HOME` when no directory is given.    |
| `pwd`             | Prints the working directory.                                           |
| `env`             | Lists the shell's variables, oldest first.                              |
| `export NAME=val` | Adds a variable or replaces it. Without arguments, lists the variables as `declare -x NAME=val`. |
| `unset NAME ...`  | Removes the named variables.                                            |
| `exit`            | Leaves the shell with status 1.                                         |

Some builtins print messages of their own while they work:

- `export` prints `existe` when it replaces a variable.
- `unset` prints `existe indice: N` for each variable it removes.

A line with `<` in it, such as `cat < notes.txt`, is a special case. The shell
prints the contents of the file named after the `<` and runs nothing. If that
file cannot be read, the line is run as an ordinary command.

## What it does not do

The shell does not have:

- pipes
- output redirection
- `&&`, `||` or `;`
- background jobs
- globbing
- `$?`

Quotes are understood by `echo` only. Other commands get their words split at
spaces, quotes and all.

## Using it as a library

You can use the parts of the shell directly:

```python
import io
from minishell.environment import Environment
from minishell.echo import render_echo
from minishell.builtins import run_builtin

environment = Environment.from_strings(["HOME=/home/demo", "USER=demo"])
print(render_echo(["echo", "$USER"], environment), end="")  # demo

out = io.StringIO()
run_builtin(["export", "GREETING=hi"], environment, out)
print(environment.lookup("GREETING"))  # hi
```

Other entry points:

- `minishell.executor.find_command(name, path=None)` locates an executable.
  It returns `None` when there is none.
- `minishell.executor.run_command` runs a line and returns the program's exit
  status.
- `minishell.executor.run_command_capture` runs a line and returns the
  program's standard output as a string.
- `minishell.prompt.build_prompt(user, host, cwd)` composes the prompt text.
- `minishell.shell.handle_line` runs a single line the way the prompt would.
- `minishell.shell.repl` runs the read–evaluate loop with any line reader and
  output stream you pass in.

## Tests

```
pip install ".[test]"
pytest
```