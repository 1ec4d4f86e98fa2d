"""Exact travelling salesman tour lengths by branch and bound over TSPLIB coordinate files."""

__version__ = "0.1.0"

__all__ = ["tsplib", "solver", "parallel", "cli"]