"""Splitting command strings and locating executables on the search path."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .errors import CommandNotFoundError


def is_executable(path: str | os.PathLike[str]) -> bool:
    """Return True if the path may be executed by the current user."""
    return os.access(path, os.X_OK)


def split_fields(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def get_env_value(key: str, env: Mapping[str, str]) -> str | None:
    """Return the value of the first variable whose ``NAME=value`` entry starts with ``key``.

    The value is the first non-empty ``=``-separated field after the name,
    or an empty string if there is none. Returns None if nothing matches.
    """
    for name, value in env.items():
        entry = f"{name}={value}"
        if entry.startswith(key):
            fields = split_fields(entry, "=")
            return fields[1] if len(fields) > 1 else ""
    return None


def split_command(raw_command: str) -> list[str]:
    """Split a command string on spaces into an argument list."""
    return split_fields(raw_command, " ")


def resolve_path(command: str, path_env: str) -> str | None:
    """Search the colon-separated directories for an executable ``command``."""
    for directory in split_fields(path_env, ":"):
        candidate = f"{directory}/{command}"
        if is_executable(candidate):
            return candidate
    return None


def resolve_command(
    raw_command: str, env: Mapping[str, str] | None = None
) -> tuple[str, list[str]]:
    """Turn a command string into the program to run and its argument list.

    A first word that is itself executable is used as is; otherwise it is
    looked up on PATH. Raises CommandNotFoundError when nothing is found.
    """
    if env is None:
        env = os.environ
    argv = split_command(raw_command)
    if not argv:
        raise CommandNotFoundError(subject=raw_command)
    program = argv[0]
    if is_executable(program):
        return program, argv
    path_env = get_env_value("PATH", env)
    full_path = resolve_path(program, path_env) if path_env is not None else None
    if full_path is None:
        raise CommandNotFoundError(subject=program)
    return full_path, argv