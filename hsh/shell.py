"""A small command interpreter: read lines, run builtins or programs."""

import os
import subprocess
import sys

from hsh.lexer import split_line
from hsh.paths import get_command_path

PROMPT = "($) "
ERROR_PREFIX = "./hsh: 1: "
_DIGITS = frozenset("0123456789")


class ShellExit(Exception):
    """Raised when the shell is to terminate with ``status``."""

    def __init__(self, status):
        super().__init__(status)
        self.status = status


def parse_exit_status(text):
    """Parse a non-negative decimal exit status.

    Raises ``ValueError`` if ``text`` is None or holds a non-digit.
    """
    if text is None or not set(text) <= _DIGITS:
        raise ValueError(f"Illegal number: {text}")
    return int(text) if text else 0


def _fd_or_pipe(stream):
    try:
        stream.fileno()
    except (AttributeError, OSError):
        return subprocess.PIPE
    return stream


class Shell:
    """State of one shell session."""

    def __init__(self, environ=None, stdin=None, stdout=None, stderr=None,
                 interactive=None):
        self.environ = dict(os.environ) if environ is None else environ
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        if interactive is None:
            isatty = getattr(self.stdin, "isatty", None)
            interactive = bool(isatty and isatty())
        self.interactive = interactive
        self.last_exit_status = 0

    def _write(self, stream, text):
        stream.write(text)
        stream.flush()

    def _error(self, text):
        self._write(self.stderr, text)

    def handle_exit(self, args):
        """Handle the ``exit`` builtin; return True if ``args`` named it.

        Raises ``ShellExit`` with the given status, or the last command's
        status when none is given. An invalid status is reported and the
        shell carries on.
        """
        if args[0] != "exit":
            return False
        if len(args) > 1:
            try:
                status = parse_exit_status(args[1])
            except ValueError:
                self._error(f"{ERROR_PREFIX}exit: Illegal number: {args[1]}\n")
                return True
        else:
            status = self.last_exit_status
        raise ShellExit(status)

    def handle_env(self, args):
        """Handle the ``env`` builtin; return True if ``args`` named it."""
        if args[0] != "env":
            return False
        self._write(
            self.stdout,
            "".join(f"{key}={value}\n" for key, value in self.environ.items()),
        )
        self.last_exit_status = 0
        return True

    def run_program(self, path, args):
        """Run the program at ``path`` with ``args`` and record its status."""
        self.stdout.flush()
        self.stderr.flush()
        out = _fd_or_pipe(self.stdout)
        err = _fd_or_pipe(self.stderr)
        try:
            completed = subprocess.run(
                list(args), executable=path, env=dict(self.environ),
                stdout=out, stderr=err, check=False,
            )
        except OSError as exc:
            self._error(f"{args[0]}: {exc.strerror}\n")
            self.last_exit_status = 1
            return self.last_exit_status
        if out is subprocess.PIPE:
            self._write(self.stdout, completed.stdout.decode(errors="replace"))
        if err is subprocess.PIPE:
            self._write(self.stderr, completed.stderr.decode(errors="replace"))
        code = completed.returncode
        self.last_exit_status = 128 - code if code < 0 else code
        return self.last_exit_status

    def execute(self, args):
        """Execute one command given as a list of words."""
        if not args:
            return
        if self.handle_exit(args) or self.handle_env(args):
            return
        path = get_command_path(args, self.environ)
        if path is None:
            self._error(f"{ERROR_PREFIX}{args[0]}: not found\n")
            self.last_exit_status = 127
            if not self.interactive:
                raise ShellExit(self.last_exit_status)
            return
        self.run_program(path, args)

    def run(self):
        """Read and execute lines until end of input; return the exit status."""
        try:
            while True:
                if self.interactive:
                    self._write(self.stdout, PROMPT)
                line = self.stdin.readline()
                if not line:
                    return 0
                self.execute(split_line(line))
        except ShellExit as exc:
            return exc.status


def main(argv=None):
    """Run an interactive or scripted session on the standard streams."""
    return Shell().run()


if __name__ == "__main__":
    raise SystemExit(main())