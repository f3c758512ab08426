import pytest

from aoc2019.intcode import IntcodeComputer, IntcodeError, parse_program


COMPARE_TO_EIGHT = (
    "3,21,1008,21,8,20,1005,20,22,107,8,21,20,1006,20,31,1106,0,36,98,0,0,"
    "1002,21,125,20,4,20,1105,1,46,104,999,1105,1,46,1101,1000,1,20,4,20,"
    "1105,1,46,98,99\n"
)


def test_parse_program_strips_and_splits():
    assert parse_program("1,9,-10,3\n") == [1, 9, -10, 3]


def test_parse_program_rejects_garbage():
    with pytest.raises(ValueError):
        parse_program("1,x,3")


def test_noun_verb_program():
    pc = IntcodeComputer(parse_program("1,9,10,3,2,3,11,0,99,30,40,50"))
    pc.set_noun_verb(9, 10)
    assert pc.run() is None
    assert pc.halted
    assert pc.memory[0] == 3500


def test_set_noun_verb_needs_three_cells():
    pc = IntcodeComputer([99, 0])
    with pytest.raises(IntcodeError):
        pc.set_noun_verb(1, 2)


def test_input_below_eight_outputs_999():
    pc = IntcodeComputer(parse_program(COMPARE_TO_EIGHT))
    pc.add_inputs(5)
    assert pc.run_until_halt() == [999]


def test_quine_reproduces_program():
    program = [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]
    pc = IntcodeComputer(program)
    assert pc.run_until_halt() == program


def test_large_immediate_output():
    pc = IntcodeComputer([104, 1125899906842624, 99])
    assert pc.run() == 1125899906842624


def test_large_product_has_sixteen_digits():
    pc = IntcodeComputer(parse_program("1102,34915192,34915192,7,4,7,99,0"))
    assert len(str(pc.run())) == 16


def test_pausing_and_resuming_with_inputs():
    pc = IntcodeComputer(parse_program("3,9,4,9,3,9,4,9,99,0"))
    pc.add_inputs(5)
    assert pc.run() == 5
    pc.add_inputs(6)
    assert pc.run() == 6
    assert pc.run() is None
    assert pc.halted


def test_missing_input_raises():
    pc = IntcodeComputer([3, 0, 99])
    with pytest.raises(IntcodeError):
        pc.run()


def test_invalid_opcode_raises():
    pc = IntcodeComputer([42, 0, 0, 0])
    with pytest.raises(IntcodeError):
        pc.run()


def test_store_in_immediate_mode_raises():
    pc = IntcodeComputer([11101, 1, 1, 0, 99])
    with pytest.raises(IntcodeError):
        pc.run()


def test_store_at_negative_address_raises():
    pc = IntcodeComputer([1101, 1, 1, -4, 99])
    with pytest.raises(IntcodeError):
        pc.run()


def test_invalid_read_mode_raises():
    pc = IntcodeComputer([304, 0, 99])
    with pytest.raises(IntcodeError):
        pc.run()