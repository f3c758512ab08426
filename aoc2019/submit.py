"""Command that submits an answer read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .getinput import _report_failures
from .seqs import parse_int
from .support import SupportError, submit_solution


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aocsubmit",
        description="Submit the answer on standard input for the current day.",
    )
    parser.add_argument("-p", dest="part", type=int, default=0, help="Part 1 or 2")
    part = parser.parse_args(argv).part
    if part not in (1, 2):
        print(part)
        print("Must provide a part of either 1 or 2", file=sys.stderr)
        return 1

    line = sys.stdin.readline().rstrip("\n").rstrip("\r")
    return _report_failures(
        lambda: submit_solution(part, parse_int(line)),
        (ValueError, SupportError),
    )


if __name__ == "__main__":
    raise SystemExit(main())