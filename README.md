# aoc2019

Solutions to days 1 to 9 of Advent of Code 2019, and the pieces they are
built from:

- `aoc2019.intcode`: the Intcode computer (`IntcodeComputer`,
  `parse_program`, `IntcodeError`). It supports position, immediate and
  relative parameter modes, sparse memory and queued inputs.
- `aoc2019.grid`: `Point`, `Point3D`, `Direction`, `adjacent4`,
  `adjacent8`, `parse_hash_grid` and `BoundedHashGrid` for two-character
  pictures.
- `aoc2019.containers`: `Deque`, `Queue`, `Stack` and a comparator-driven
  `Heap` (with `max_heap_int` and `min_heap_int`). All of them raise
  `IndexError` when you pop from or peek at an empty container.
- `aoc2019.seqs`: `parse_int`, `most_frequent`, `least_frequent`,
  `remove_all`, `remove_first` and `are_set_equal`.
- `aoc2019.days.day01` to `aoc2019.days.day09`: one module per day, each with
  `part1` and `part2`.
- `aoc2019.support`: downloads inputs and submits answers. The `aocinput`
  and `aocsubmit` commands are built on it.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Solving a day

Each day has its own command. It reads the puzzle input from the file you
give it, or from `input.in` in the working directory if you give none. It
prints the answer to part 1 and then the answer to part 2:

```
aoc2019-day01 input.in
aoc2019-day08
```

Day 8 part 2 prints the decoded image as several lines. Lit pixels show as
`#` and all other pixels as spaces.

You can also call the solvers from Python:

```python
from aoc2019.days import day01, day06

day01.part1("12\n14\n1969\n100756\n")   # 34241
day06.part1(open("input.in").read())
```

Some days take extra parameters:

- `day02.part1(text, noun=12, verb=2)`
- `day08.part1(text, width=25, height=6)` and `day08.part2(text, width=25, height=6)`

## Running Intcode

```python
from aoc2019.intcode import IntcodeComputer, parse_program

computer = IntcodeComputer(parse_program("3,0,4,0,99"))
computer.add_inputs(42)
computer.run_until_halt()   # [42]
```

- `run` executes until the next output and returns it. If the program halts
  first, it returns `None` and sets `halted` to true.
- `run_until_halt` keeps going until opcode 99 and returns every output.
- `set_noun_verb` writes into addresses 1 and 2.

`IntcodeError` is raised when the program:

- uses an invalid opcode or parameter mode,
- stores to a negative address, or
- reads input when none is queued.

## Fetching input and submitting answers

Two commands work with the Advent of Code site. Both take the year and day
from the working directory, which must be laid out as `aocYYYY/dayNN`. You
may also run them from a `partN` directory inside it. Both read your session
cookie from a `.env` file in the `aocYYYY` directory.

```
aocinput
```

This downloads the day's input and saves it as a read-only `input.in` in the
`dayNN` directory. If a request fails it tries once more. It then prints a
short preview of the input:

- the first ten lines followed by `...` when the input is longer, or
- the first line, cut to 80 characters.

```
echo 12345 | aocsubmit -p 1
```

This reads an integer answer from the first line of standard input and
submits it for part 1 or 2. It prints one of:

- a wrong answer,
- an answer sent too soon after the last one,
- a puzzle that is already solved or locked (in red),
- the right answer (in green), or
- the whole response page when it recognises none of these.

The same steps can be called from Python:

- `support.download_input`
- `support.submit_solution`
- `support.get_year_day`
- `support.fetch_input`
- `support.post_answer`
- `support.classify_response`

They raise `support.SupportError` on failure.

## What is not included

- Only days 1 to 9 have solvers.
- There is no command that runs every day at once, and answers are not cached
  or stored anywhere.