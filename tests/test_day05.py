import pytest

from aoc2019.days import day05
from aoc2019.intcode import IntcodeError

LARGER_EXAMPLE = (
    "3,21,1008,21,8,20,1005,20,22,107,8,21,20,1006,20,31,1106,0,36,98,0,0,"
    "1002,21,125,20,4,20,1105,1,46,104,999,1105,1,46,1101,1000,1,20,4,20,"
    "1105,1,46,98,99\n"
)


@pytest.mark.parametrize("solve", [day05.part1, day05.part2])
def test_larger_example_below_eight(solve):
    assert solve(LARGER_EXAMPLE) == 999


def test_echo_program_returns_system_id():
    assert day05.part1("3,0,4,0,99") == 1
    assert day05.part2("3,0,4,0,99") == 5


def test_last_output_is_returned():
    assert day05.part1("104,0,104,0,4,0,99") == 104


def test_no_output_raises():
    with pytest.raises(IntcodeError):
        day05.part1("99")


def test_main_echoes_system_ids(tmp_path, capsys):
    echo = tmp_path / "echo.intcode"
    echo.write_text("3,0,4,0,99\n")
    assert day05.main([str(echo)]) == 0
    assert capsys.readouterr().out == "1\n5\n"