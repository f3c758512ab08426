from unittest.mock import patch
from urllib import error

import pytest

from aoc2019 import support
from aoc2019.support import (
    NOT_READY,
    RIGHT_ANSWER,
    SupportError,
    classify_response,
    download_input,
    fetch_input,
    get_year_day,
    post_answer,
    preview,
    read_cookie,
    submit_solution,
)


class _FakeResponse:
    def __init__(self, body):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _responder(body, seen):
    def fake_urlopen(req):
        seen.append(req)
        return _FakeResponse(body)

    return fake_urlopen


@pytest.fixture
def day_dir(tmp_path):
    root = tmp_path / "aoc2019"
    directory = root / "day03"
    (directory / "part1").mkdir(parents=True)
    (root / ".env").write_text("  token\n")
    return directory


def test_get_year_day_from_day_dir(day_dir):
    assert get_year_day(day_dir) == (2019, 3)


def test_get_year_day_from_part_dir(day_dir):
    assert get_year_day(day_dir / "part1") == (2019, 3)


def test_get_year_day_rejects_other_dirs(tmp_path):
    with pytest.raises(SupportError):
        get_year_day(tmp_path)


def test_get_year_day_rejects_non_numeric(tmp_path):
    bad = tmp_path / "aocX" / "day01"
    bad.mkdir(parents=True)
    with pytest.raises(SupportError):
        get_year_day(bad)


def test_read_cookie_strips(day_dir):
    assert read_cookie(day_dir.parent / ".env") == "token"


def test_read_cookie_missing(tmp_path):
    with pytest.raises(SupportError):
        read_cookie(tmp_path / "absent")


def test_preview_many_lines():
    text = "\n".join(str(n) for n in range(20))
    assert preview(text).split("\n") == [str(n) for n in range(10)] + ["..."]


def test_preview_long_line():
    text = "x" * 100
    assert preview(text) == "x" * 80 + "..."


def test_preview_short():
    assert preview("abc\ndef") == "abc"


def test_classify_wrong():
    page = "<p>That's not the right answer; your answer is too low.  More text.</p>"
    verdict, message = classify_response(page)
    assert verdict is False
    assert message.startswith("That's not the right answer")
    assert message.endswith(".")


def test_classify_right():
    assert classify_response(f"<p>{RIGHT_ANSWER} Good job.</p>") == (True, RIGHT_ANSWER)


def test_classify_unknown():
    page = "<html>something else</html>"
    assert classify_response(page) == (None, page)


def test_fetch_input_request():
    seen = []
    with patch("urllib.request.urlopen", _responder(b"1\n2\n", seen)):
        assert fetch_input(2019, 1, "token") == b"1\n2\n"
    req = seen[0]
    assert req.full_url == "https://adventofcode.com/2019/day/1/input"
    assert req.get_method() == "GET"
    assert req.get_header("Cookie") == "token"


def test_fetch_input_not_ready():
    with patch("urllib.request.urlopen", _responder(NOT_READY.encode(), [])):
        with pytest.raises(SupportError):
            fetch_input(2019, 1, "token")


def test_post_answer_request():
    seen = []
    with patch("urllib.request.urlopen", _responder(b"page", seen)):
        assert post_answer(2019, 4, 2, 42, "token") == "page"
    req = seen[0]
    assert req.get_method() == "POST"
    assert req.data == b"answer=42&level=2"
    assert req.full_url.endswith("/2019/day/4/answer")


def test_download_input_writes_to_day_dir(day_dir, capsys):
    seen = []
    with patch("urllib.request.urlopen", _responder(b"hello\n", seen)):
        path = download_input(day_dir / "part1")
    assert path == day_dir / "input.in"
    assert path.read_bytes() == b"hello\n"
    assert seen[0].get_header("Cookie") == "token"
    assert capsys.readouterr().out == "hello\n"


def test_download_input_gives_up(day_dir):
    def failing(req):
        raise error.URLError("down")

    with patch("urllib.request.urlopen", failing), patch("time.sleep") as sleep:
        with pytest.raises(SupportError):
            download_input(day_dir)
    assert sleep.call_count == support.ATTEMPTS
    assert not (day_dir / "input.in").exists()


def test_submit_solution_reports(day_dir, capsys):
    body = f"<p>{RIGHT_ANSWER}</p>".encode()
    with patch("urllib.request.urlopen", _responder(body, [])):
        result = submit_solution(1, 7, day_dir)
    assert result == (True, RIGHT_ANSWER)
    assert RIGHT_ANSWER in capsys.readouterr().out