"""Checks and opening of the pipeline's input and output files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from .errors import FileAccessError

OUTPUT_MODE = 0o644


def check_readable(path: str | os.PathLike[str]) -> Path:
    """Ensure the file exists and can be read; return it as a Path."""
    target = Path(path)
    if not os.access(target, os.F_OK):
        raise FileAccessError("no such file or directory", os.fspath(path))
    if not os.access(target, os.R_OK):
        raise FileAccessError("permission denied", os.fspath(path))
    return target


def check_writable(path: str | os.PathLike[str]) -> Path:
    """Ensure an existing file can be written; a missing one is allowed."""
    target = Path(path)
    if os.access(target, os.F_OK) and not os.access(target, os.W_OK):
        raise FileAccessError("permission denied", os.fspath(path))
    return target


def open_input(path: str | os.PathLike[str]) -> BinaryIO:
    """Open a readable input file in binary mode."""
    return check_readable(path).open("rb")


def open_output(path: str | os.PathLike[str], append: bool = False) -> BinaryIO:
    """Open the output file for writing, creating it if needed.

    The file is appended to when ``append`` is true and truncated otherwise.
    """
    target = check_writable(path)
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    fd = os.open(target, flags, OUTPUT_MODE)
    return os.fdopen(fd, "ab" if append else "wb")