"""Solvers for the safe-dial, product-id, battery-joltage and paper-roll puzzles."""

__version__ = "0.1.0"
__all__ = ["day1", "day2", "day3", "day4"]