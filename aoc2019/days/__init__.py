"""Solvers for Advent of Code 2019 days 1 to 9, one module per day."""