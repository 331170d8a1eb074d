"""Lookup of commands in the directories named by PATH."""

import os
import stat


def get_path_env(environ):
    """Return the value of PATH in ``environ``, or None if it is not set."""
    return environ.get("PATH")


def _candidates(command, path_env):
    """Yield ``dir/command`` for each non-empty directory in ``path_env``."""
    for directory in path_env.split(":"):
        if directory:
            yield f"{directory}/{command}"


def find_path(command, path_env):
    """Return the first ``dir/command`` in ``path_env`` that exists."""
    if command is None or path_env is None:
        return None
    for candidate in _candidates(command, path_env):
        try:
            os.stat(candidate)
        except OSError:
            continue
        return candidate
    return None


def find_path_custom(command, path_env):
    """Return the first ``dir/command`` in ``path_env`` with the owner execute bit set."""
    if command is None or path_env is None:
        return None
    for candidate in _candidates(command, path_env):
        try:
            mode = os.stat(candidate).st_mode
        except OSError:
            continue
        if mode & stat.S_IXUSR:
            return candidate
    return None


def get_command_path(args, environ):
    """Resolve the program to run for the command word ``args[0]``.

    A word holding a slash is used as given. Otherwise it is looked up in
    PATH; None is returned when PATH is unset or empty, or nothing matches.
    """
    command = args[0]
    if "/" in command:
        return command
    path_env = get_path_env(environ)
    if not path_env:
        return None
    return find_path_custom(command, path_env)


def search_in_path(command, environ):
    """Return an executable path for ``command`` using access checks, or None."""
    if command is None:
        return None
    if "/" in command:
        return command if os.access(command, os.X_OK) else None
    path_env = get_path_env(environ)
    if path_env is None:
        return None
    for candidate in _candidates(command, path_env):
        if os.access(candidate, os.X_OK):
            return candidate
    return None