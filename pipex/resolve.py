"""Turn a command string into an executable path and its argument list."""

from __future__ import annotations

import errno
import os
from collections.abc import Mapping

from pipex.textops import split


class CommandError(Exception):
    """A command could not be resolved to something that can be run.

    ``status`` is the exit status the failing stage reports. When
    ``positional`` is true the failure only counts for the last command of a
    pipeline; earlier commands then report success, as the shell stage did.
    """

    def __init__(self, message: str, status: int = 127, *, positional: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.positional = positional


def _permission_denied(path: str) -> CommandError:
    return CommandError(f"{path}: {os.strerror(errno.EACCES)}", 126)


def _checked_existing(path: str) -> str | None:
    """Return ``path`` if it exists and is executable, ``None`` if absent."""
    if not os.access(path, os.F_OK):
        return None
    if not os.access(path, os.X_OK):
        raise _permission_denied(path)
    return path


def get_path_env(environ: Mapping[str, str]) -> str | None:
    """Return the value of ``PATH`` in ``environ``, or ``None`` if unset."""
    return environ.get("PATH")


def find_executable(name: str, path_env: str) -> str | None:
    """Search the directories of ``path_env`` for ``name``.

    The first existing candidate wins; if it is not executable a
    ``CommandError`` with status 126 is raised. Returns ``None`` when no
    directory holds the name.
    """
    for directory in split(path_env, ":"):
        found = _checked_existing(f"{directory}/{name}")
        if found is not None:
            return found
    return None


def resolve_command(cmd: str, environ: Mapping[str, str]) -> tuple[str, list[str]]:
    """Resolve ``cmd`` into the path to execute and its argument vector.

    Words are separated by spaces. A command starting with ``.`` or ``/`` is
    used as given; one holding a ``/`` elsewhere is taken relative to the
    current directory; anything else is looked up in ``PATH``.
    """
    stripped = cmd.lstrip(" ")
    if not stripped:
        raise CommandError(": Command not found", 127, positional=True)
    args = split(stripped, " ")
    name = args[0]

    if stripped[0] in "./":
        found = _checked_existing(name)
        if found is None:
            raise CommandError(
                f"{name}: {os.strerror(errno.ENOENT)}", 127, positional=True
            )
        return found, args

    if "/" in name:
        found = _checked_existing(name)
        if found is None:
            raise CommandError(f"{name}: {os.strerror(errno.ENOENT)}", 127)
        return found, args

    path_env = get_path_env(environ)
    if path_env is None:
        raise CommandError(f"{name}: {os.strerror(errno.ENOENT)}", 127)
    found = find_executable(name, path_env)
    if found is None:
        raise CommandError(f"{name}: Command not found", 127, positional=True)
    return found, args