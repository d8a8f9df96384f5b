"""Exceptions raised while setting up and running a pipeline."""

from __future__ import annotations

from collections.abc import Sequence

HEREDOC_KEYWORD = "here_doc"
USAGE_MESSAGE = "Number of argument is incorrect."


class PipexError(Exception):
    """Base error: a message, an optional subject and the exit status to use."""

    exit_status = 1

    def __init__(self, message: str, subject: str | None = None) -> None:
        super().__init__(message, subject)
        self.message = message
        self.subject = subject

    def __str__(self) -> str:
        if self.subject is None:
            return self.message
        return f"{self.message}: {self.subject}"


class UsageError(PipexError):
    """The command line has the wrong number of arguments."""

    def __init__(self, message: str = USAGE_MESSAGE, subject: str | None = None) -> None:
        super().__init__(message, subject)


class FileAccessError(PipexError):
    """An input or output file is missing or lacks the needed permission."""


class CommandNotFoundError(PipexError):
    """A command could not be found on the search path."""

    exit_status = 127

    def __init__(self, message: str = "command not found", subject: str | None = None) -> None:
        super().__init__(message, subject)


def check_argument_count(args: Sequence[str]) -> bool:
    """Validate the arguments after the program name.

    Returns True when the arguments describe a here-document invocation.
    Raises UsageError when there are too few arguments, or when a
    here-document invocation does not have exactly five.
    """
    if len(args) < 4:
        raise UsageError()
    heredoc = args[0] == HEREDOC_KEYWORD
    if heredoc and len(args) != 5:
        raise UsageError()
    return heredoc