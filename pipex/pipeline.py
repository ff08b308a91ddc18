"""Run ``< infile cmd1 | cmd2 > outfile`` and report the pipeline's status."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Union

from pipex.resolve import CommandError, resolve_command

_Outcome = Union[subprocess.Popen, int]

USAGE_STATUS = 1


class _StageFailed(Exception):
    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _report(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def _exit_status(error: CommandError, is_last: bool) -> int:
    if error.positional and not is_last:
        return 0
    return error.status


def _open_infile(path: str) -> int:
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        if exc.errno in (errno.EACCES, errno.ENOENT, errno.EISDIR):
            _report(f"{path}: {exc.strerror}")
            raise _StageFailed(0) from None
        _report("Failed to duplicate infile to stdin")
        raise _StageFailed(1) from None


def _open_outfile(path: str) -> int:
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        _report(f"{path}: {exc.strerror}")
        raise _StageFailed(1 if exc.errno == errno.EACCES else 0) from None


def _launch(
    cmd: str, stdin_fd: int, stdout_fd: int, environ: Mapping[str, str], is_last: bool
) -> _Outcome:
    try:
        path, args = resolve_command(cmd, environ)
    except CommandError as exc:
        _report(exc.message)
        return _exit_status(exc, is_last)
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin_fd, stdout=stdout_fd, env=dict(environ)
        )
    except OSError as exc:
        _report(f"execve: {exc.strerror}")
        return 127 if is_last else 0


def _first_stage(infile: str, cmd: str, write_fd: int, environ: Mapping[str, str]) -> _Outcome:
    try:
        in_fd = _open_infile(infile)
    except _StageFailed as failed:
        return failed.status
    try:
        return _launch(cmd, in_fd, write_fd, environ, is_last=False)
    finally:
        os.close(in_fd)


def _second_stage(outfile: str, cmd: str, read_fd: int, environ: Mapping[str, str]) -> _Outcome:
    try:
        out_fd = _open_outfile(outfile)
    except _StageFailed as failed:
        return failed.status
    try:
        return _launch(cmd, read_fd, out_fd, environ, is_last=True)
    finally:
        os.close(out_fd)


def _collect(outcomes: Sequence[_Outcome]) -> int:
    status = 0
    for outcome in outcomes:
        code = outcome.wait() if isinstance(outcome, subprocess.Popen) else outcome
        # Stages killed by a signal leave the status untouched.
        if code >= 0:
            status = code
    return status


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` into ``cmd2`` and write ``outfile``.

    Both commands run concurrently. Returns the exit status of the last
    stage, in the manner of a shell pipeline.
    """
    env = os.environ if environ is None else environ
    try:
        read_fd, write_fd = os.pipe()
    except OSError:
        _report("pipe failed")
        return 1
    try:
        first = _first_stage(infile, cmd1, write_fd, env)
        second = _second_stage(outfile, cmd2, read_fd, env)
    finally:
        os.close(read_fd)
        os.close(write_fd)
    return _collect([first, second])


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        _report("argc should be 5")
        return USAGE_STATUS
    infile, cmd1, cmd2, outfile = args
    return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)


if __name__ == "__main__":
    sys.exit(main())