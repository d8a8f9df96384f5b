"""Command-line entry point: ``infile cmd... outfile`` or ``here_doc LIMITER cmd cmd outfile``."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import UsageError, check_argument_count
from .pipeline import Pipeline


@dataclass(frozen=True)
class Invocation:
    """What the command line asks for."""

    commands: list[str]
    outfile: str
    infile: str | None = None
    limiter: str | None = None

    @property
    def heredoc(self) -> bool:
        return self.limiter is not None


def parse_args(args: Sequence[str]) -> Invocation:
    """Interpret the arguments that follow the program name."""
    args = list(args)
    if check_argument_count(args):
        return Invocation(commands=args[2:4], outfile=args[4], limiter=args[1])
    return Invocation(commands=args[1:-1], outfile=args[-1], infile=args[0])


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        invocation = parse_args(args)
    except UsageError as exc:
        sys.stderr.write(exc.message)
        sys.stderr.flush()
        return exc.exit_status
    pipeline = Pipeline(
        commands=invocation.commands,
        outfile=invocation.outfile,
        infile=invocation.infile,
        limiter=invocation.limiter,
    )
    return pipeline.run()


if __name__ == "__main__":
    sys.exit(main())