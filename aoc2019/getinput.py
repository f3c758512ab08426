"""Command that downloads the input for the day in the working directory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .support import SupportError, download_input


def _report_failures(
    action: Callable[[], object],
    errors: tuple[type[Exception], ...] = (SupportError,),
) -> int:
    """Run action, print any of the given errors to stderr and give an exit status."""
    try:
        action()
    except errors as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="aocinput",
        description="Download the puzzle input for the current aocYYYY/dayNN directory.",
    ).parse_args(argv)
    return _report_failures(download_input)


if __name__ == "__main__":
    raise SystemExit(main())