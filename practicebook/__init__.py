"""Worked programming exercises: number puzzles, a line search tool and small modelling examples."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "calculator",
    "euler",
    "geometry",
    "gun",
    "http_errors",
    "library",
    "minigrep",
    "neetcode",
    "series",
]