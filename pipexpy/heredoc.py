"""Reading here-document input up to a limiter line."""

from __future__ import annotations

from collections.abc import Iterable


def read_heredoc(stream: Iterable[str], limiter: str) -> str:
    """Collect lines from ``stream`` until one equals ``limiter``.

    Each collected line is returned with a single trailing newline. The
    limiter line itself is not included. Reading also stops at the end of
    the stream, and a last line without a newline is kept and given one.
    """
    parts: list[str] = []
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line == limiter:
            break
        parts.append(f"{line}\n")
    return "".join(parts)