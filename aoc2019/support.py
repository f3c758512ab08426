"""Fetch puzzle inputs and submit answers for the day in the working directory."""

from __future__ import annotations

import os
import re
import time
from pathlib import Path
from urllib import error, parse, request

from .seqs import parse_int

NOT_READY = (
    "Please don't repeatedly request this endpoint before it unlocks! The calendar "
    "countdown is synchronized with the server time; the link will be enabled on the "
    "calendar the instant this puzzle becomes available.\n"
)
RIGHT_ANSWER = "That's the right answer!"
USER_AGENT = "aoc2019"
BASE_URL = "https://adventofcode.com"
INPUT_NAME = "input.in"
ATTEMPTS = 2

_ERROR_PATTERNS = (
    re.compile(r"That's not the right answer.*?\."),
    re.compile(r"You gave an answer too recently.*to wait."),
    re.compile(r"You don't seem to be solving.*\?"),
)

_RED = "\033[41m"
_GREEN = "\033[42m"
_RESET = "\033[m"


class SupportError(Exception):
    """Raised when an input cannot be fetched or an answer cannot be submitted."""


def _locate(cwd: str | os.PathLike[str]) -> tuple[int, int, Path]:
    path = Path(cwd).absolute()
    day_dir = path.parent if path.name.startswith("part") else path
    year_name = day_dir.parent.name
    day_name = day_dir.name
    if not (day_name.startswith("day") and year_name.startswith("aoc")):
        raise SupportError(f"unexpected working dir {day_dir}")
    try:
        year = parse_int(year_name[len("aoc"):])
        day = parse_int(day_name[len("day"):])
    except ValueError as exc:
        raise SupportError(str(exc)) from exc
    return year, day, day_dir


def get_year_day(cwd: str | os.PathLike[str]) -> tuple[int, int]:
    """Work out the puzzle year and day from an aocYYYY/dayNN[/partN] directory."""
    year, day, _ = _locate(cwd)
    return year, day


def read_cookie(path: str | os.PathLike[str]) -> str:
    """Read the session cookie stored in path."""
    try:
        return Path(path).read_text().strip()
    except OSError as exc:
        raise SupportError(str(exc)) from exc


def _send(req: request.Request) -> bytes:
    try:
        with request.urlopen(req) as rsp:
            return rsp.read()
    except error.HTTPError as exc:
        return exc.read()
    except (error.URLError, OSError) as exc:
        raise SupportError(str(exc)) from exc


def _headers(cookie: str) -> dict[str, str]:
    return {"User-Agent": USER_AGENT, "Cookie": cookie}


def fetch_input(year: int, day: int, cookie: str) -> bytes:
    """Download the puzzle input for a year and day."""
    url = f"{BASE_URL}/{year}/day/{day}/input"
    body = _send(request.Request(url, headers=_headers(cookie), method="GET"))
    if body.decode("utf-8", errors="replace") == NOT_READY:
        raise SupportError(NOT_READY)
    return body


def post_answer(year: int, day: int, part: int, answer: int, cookie: str) -> str:
    """Submit an answer and return the page the server sends back."""
    form = parse.urlencode({"answer": str(answer), "level": str(part)}).encode()
    url = f"{BASE_URL}/{year}/day/{day}/answer"
    headers = _headers(cookie)
    headers["Content-Type"] = "application/x-www-form-urlencoded"
    body = _send(request.Request(url, data=form, headers=headers, method="POST"))
    return body.decode("utf-8", errors="replace")


def preview(text: str) -> str:
    """A short glimpse of a downloaded input."""
    lines = text.split("\n")
    if len(lines) > 10:
        return "\n".join(lines[:10] + ["..."])
    if len(lines[0]) > 80:
        return f"{lines[0][:80]}..."
    return lines[0]


def classify_response(contents: str) -> tuple[bool | None, str]:
    """Judge a submission page: (False, error), (True, success) or (None, page)."""
    for pattern in _ERROR_PATTERNS:
        match = pattern.search(contents)
        if match:
            return False, match.group(0)
    if RIGHT_ANSWER in contents:
        return True, RIGHT_ANSWER
    return None, contents


def download_input(
    cwd: str | os.PathLike[str] | None = None,
    cookie_path: str | os.PathLike[str] | None = None,
) -> Path:
    """Fetch the input for the current day, save it as input.in and return its path."""
    year, day, day_dir = _locate(Path.cwd() if cwd is None else cwd)
    cookie = read_cookie(day_dir.parent / ".env" if cookie_path is None else cookie_path)

    data: bytes | None = None
    for _ in range(ATTEMPTS):
        try:
            data = fetch_input(year, day, cookie)
            break
        except SupportError as exc:
            print(exc)
            time.sleep(1)
    if data is None:
        raise SupportError("Timed out after attempting many times")

    target = day_dir / INPUT_NAME
    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o400)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise SupportError(str(exc)) from exc

    print(preview(data.decode("utf-8", errors="replace")))
    return target


def submit_solution(
    part: int,
    answer: int,
    cwd: str | os.PathLike[str] | None = None,
    cookie_path: str | os.PathLike[str] | None = None,
) -> tuple[bool | None, str]:
    """Submit an answer for the current day, print the verdict and return it."""
    year, day, day_dir = _locate(Path.cwd() if cwd is None else cwd)
    cookie = read_cookie(day_dir.parent / ".env" if cookie_path is None else cookie_path)
    verdict, message = classify_response(post_answer(year, day, part, answer, cookie))
    if verdict is False:
        print(f"{_RED}{message}{_RESET}")
    elif verdict is True:
        print(f"{_GREEN}{message}{_RESET}")
    else:
        print(message)
    return verdict, message