"""Running a chain of commands connected by pipes."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import IO, TextIO, Union

from .command import resolve_command
from .errors import CommandNotFoundError, FileAccessError
from .files import open_input, open_output
from .heredoc import read_heredoc

_Stage = Union["subprocess.Popen[bytes]", int]


@dataclass
class Pipeline:
    """Commands whose input comes from a file or a here-document.

    The output of each command feeds the next; the last one writes to
    ``outfile``, which is truncated, or appended to for a here-document.
    """

    commands: Sequence[str]
    outfile: str | os.PathLike[str]
    infile: str | os.PathLike[str] | None = None
    limiter: str | None = None
    env: Mapping[str, str] | None = None
    stdin: TextIO | None = None
    stderr: TextIO | None = None

    def __post_init__(self) -> None:
        self.commands = list(self.commands)
        if not self.commands:
            raise ValueError("a pipeline needs at least one command")
        if (self.infile is None) == (self.limiter is None):
            raise ValueError("exactly one of infile and limiter must be given")

    @property
    def heredoc(self) -> bool:
        """True when the input is a here-document."""
        return self.limiter is not None

    def run(self) -> int:
        """Run every command and return the exit status of the last one."""
        err = self.stderr if self.stderr is not None else sys.stderr
        env = dict(os.environ if self.env is None else self.env)
        stages: list[_Stage] = []

        source = self._open_source(err)
        *middle, last = self.commands
        for raw_command in middle:
            stage = self._spawn(raw_command, source, subprocess.PIPE, env, err)
            _close(source)
            source = stage.stdout if isinstance(stage, subprocess.Popen) else None
            stages.append(stage)

        stages.append(self._run_last(last, source, env, err))
        _close(source)

        statuses = [_wait(stage) for stage in stages]
        return statuses[-1]

    def _open_source(self, err: TextIO) -> IO[bytes] | None:
        if self.limiter is not None:
            stream = self.stdin if self.stdin is not None else sys.stdin
            text = read_heredoc(stream, self.limiter)
            buffer = tempfile.TemporaryFile()
            buffer.write(text.encode("utf-8", "surrogateescape"))
            buffer.seek(0)
            return buffer
        try:
            return open_input(self.infile)
        except FileAccessError as exc:
            _report(err, str(exc))
        except OSError as exc:
            _report(err, f"open(): {exc.strerror}")
        return None

    def _run_last(
        self,
        raw_command: str,
        source: IO[bytes] | None,
        env: dict[str, str],
        err: TextIO,
    ) -> _Stage:
        try:
            output = open_output(self.outfile, append=self.heredoc)
        except FileAccessError as exc:
            _report(err, str(exc))
            return exc.exit_status
        except OSError as exc:
            _report(err, f"open_or_create_file(): {exc.strerror}")
            return 1
        with output:
            return self._spawn(raw_command, source, output, env, err)

    @staticmethod
    def _spawn(
        raw_command: str,
        source: IO[bytes] | None,
        stdout: IO[bytes] | int,
        env: dict[str, str],
        err: TextIO,
    ) -> _Stage:
        try:
            program, argv = resolve_command(raw_command, env)
        except CommandNotFoundError as exc:
            _report(err, str(exc))
            return exc.exit_status
        if not os.path.dirname(program):
            program = os.path.join(os.curdir, program)
        try:
            return subprocess.Popen(
                argv,
                executable=program,
                stdin=source if source is not None else subprocess.DEVNULL,
                stdout=stdout,
                env=env,
            )
        except OSError as exc:
            _report(err, f"execve(): {exc.strerror}")
            return 1


def _report(err: TextIO, message: str) -> None:
    err.write(f"{message}\n")
    err.flush()


def _close(stream: IO[bytes] | None) -> None:
    if stream is not None:
        stream.close()


def _wait(stage: _Stage) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A command killed by a signal reports 128 plus the signal number.
    return code if code >= 0 else 128 - code