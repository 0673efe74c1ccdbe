"""Interactive command loop of the CAD shell."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .commands import CommandError, ExitRequested, Session

MAX_ARGS = 10
PROMPT = "cad> "


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def tokenize(line: str) -> list[str]:
    """Split ``line`` on spaces, keep at most MAX_ARGS tokens, lower-case the first."""
    tokens = [token for token in line.split(" ") if token][:MAX_ARGS]
    if tokens:
        tokens[0] = _ascii_lower(tokens[0])
    return tokens


def run_cli(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read commands from ``stdin`` until end of input or exit; return the exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    session = Session(stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\nEOF detected, exiting.\n")
            return 0
        args = tokenize(line.removesuffix("\n"))
        if not args:
            continue
        try:
            session.execute(args)
        except CommandError as exc:
            print(exc, file=stdout)
        except ExitRequested:
            return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print the banner and run the interactive loop on standard input."""
    print("Welcome to CAD CLI v0.0 (BETA)")
    return run_cli()


if __name__ == "__main__":
    sys.exit(main())