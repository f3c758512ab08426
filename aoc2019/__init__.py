"""Advent of Code 2019 solutions for days 1 to 9, an Intcode computer and puzzle helpers."""

__version__ = "0.1.0"