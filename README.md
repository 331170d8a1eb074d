# hsh

`hsh` is a minimal command interpreter. It reads one command per line and
splits each line into words on spaces, tabs and newlines. It then runs the
named program and waits for it to finish.

## Installing

```
pip install .
```

## Using the shell

Start it from a terminal:

```
hsh
```

When standard input is a terminal, `hsh` shows the prompt `($) ` before it
reads each line. You can also pipe commands in. In that case it shows no
prompt:

```
echo "ls -l /tmp" | hsh
```

When input ends, the shell exits with status 0.

### How commands are found

- If the command name contains a `/`, `hsh` uses it as given.
- Otherwise it looks through each directory in `PATH`, in order. It runs the
  first entry that exists and has the owner's execute bit set.
- If `PATH` is unset or empty, or nothing matches, `hsh` prints
  `./hsh: 1: <name>: not found` to standard error and sets the status to 127.
  When input is not a terminal, the shell then exits with that status.
- If the program cannot be started, `hsh` prints `<name>: <reason>` to standard
  error and sets the status to 1.

A program that exits normally leaves its exit code as the status. A program
that is killed by a signal leaves 128 plus the signal number.

### Built-in commands

- `exit [status]`: leave the shell. With no argument, the shell exits with
  the status of the last command. If the argument is not made only of digits,
  `hsh` prints `./hsh: 1: exit: Illegal number: <arg>` and keeps running.
- `env`: print the environment, one `NAME=value` per line, and set the status
  to 0.

### What it does not do

`hsh` only splits words on whitespace. It has no quoting, escapes, variable
expansion, pipes, redirection, command separators or globbing. The only
built-in commands are `exit` and `env`. There is no `cd`.

## Using it as a library

`Shell` takes its environment and streams as arguments. `run()` returns the
status the session ends with:

```python
import io
from hsh.shell import Shell

out = io.StringIO()
shell = Shell(
    environ={"PATH": "/bin:/usr/bin", "HOME": "/tmp"},
    stdin=io.StringIO("env\nexit 3\n"),
    stdout=out,
    stderr=io.StringIO(),
    interactive=False,
)
status = shell.run()
print("exited with", status)   # exited with 3
print(out.getvalue())          # PATH=/bin:/usr/bin\nHOME=/tmp\n
```

If a stream has no file descriptor, such as an `io.StringIO`, the output of
the programs that run is captured. It is then written to that stream.

`Shell` has these other members:

- `execute(args)` runs one command given as a list of words. It raises
  `ShellExit` (with a `status` attribute) when the session is to end.
- `handle_exit(args)` and `handle_env(args)` run the built-ins. Each returns
  `True` if `args` named it.
- `run_program(path, args)` runs a program and returns its status.
- `last_exit_status` holds the status of the last command.

`hsh.shell.parse_exit_status(text)` turns a string of digits into a status. It
raises `ValueError` for anything else.

The building blocks can also be used on their own:

- `hsh.lexer.split_line(line)` splits a line into a list of words.
- `hsh.paths.get_path_env(environ)` returns `PATH` from a mapping, or `None`.
- `hsh.paths.get_command_path(args, environ)` resolves the program for
  `args[0]` as the shell does.
- `hsh.paths.find_path_custom(command, path_env)` returns the first
  `dir/command` with the owner's execute bit set. `hsh.paths.find_path`
  returns the first one that merely exists.
- `hsh.paths.search_in_path(command, environ)` does the lookup with
  `os.access` execute checks.
- `hsh.files.copy_file(src, dest)` copies one file to another. It creates
  `dest` with mode 0755 if it is missing and truncates it if it exists. On
  failure it raises `OSError`.

## Running the tests

```
pip install ".[test]"
pytest
```