[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2019"
version = "0.1.0"
description = "Advent of Code 2019 solutions with an Intcode computer, grid helpers and puzzle input tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "intcode", "aoc2019"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocinput = "aoc2019.getinput:main"
aocsubmit = "aoc2019.submit:main"
aoc2019-day01 = "aoc2019.days.day01:main"
aoc2019-day02 = "aoc2019.days.day02:main"
aoc2019-day03 = "aoc2019.days.day03:main"
aoc2019-day04 = "aoc2019.days.day04:main"
aoc2019-day05 = "aoc2019.days.day05:main"
aoc2019-day06 = "aoc2019.days.day06:main"
aoc2019-day07 = "aoc2019.days.day07:main"
aoc2019-day08 = "aoc2019.days.day08:main"
aoc2019-day09 = "aoc2019.days.day09:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2019"]

[tool.pytest.ini_options]
addopts = "-ra"
