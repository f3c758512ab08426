import pytest

from aoc2019.days import day09
from aoc2019.intcode import IntcodeError

QUINE = "109,1,204,-1,1001,100,1,100,1008,100,16,101,1006,101,0,99"


def test_large_immediate_output():
    assert day09.part1("104,1125899906842624,99") == 1125899906842624


def test_large_product():
    assert day09.part1("1102,34915192,34915192,7,4,7,99,0") == 34915192 * 34915192


def test_quine_first_output_is_first_instruction():
    assert day09.part1(QUINE) == 109


def test_relative_mode_input_echo():
    program = "109,10,203,0,204,0,99"
    assert day09.part1(program) == 1
    assert day09.part2(program) == 2


def test_halt_without_output_raises():
    with pytest.raises(IntcodeError):
        day09.part2("99")


def test_main_runs_both_modes(tmp_path, capsys):
    boost = tmp_path / "boost.intcode"
    boost.write_text("109,10,203,0,204,0,99\n")
    assert day09.main([str(boost)]) == 0
    assert capsys.readouterr().out == "1\n2\n"