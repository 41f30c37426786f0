"""Solvers for short competitive-programming puzzles, with a small command-line front end."""

__version__ = "0.1.0"
__all__ = ["simple", "arithmetic", "arrays", "strings", "cli"]