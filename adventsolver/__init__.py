"""Advent of Code puzzle solutions for 2023 and 2024, one module per day."""

__version__ = "0.1.0"