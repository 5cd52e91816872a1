"""Narrated step-by-step math lessons and a demonstration calculator for young learners."""

__version__ = "1.0.0"
__all__ = [
    "addition",
    "subtraction",
    "multiplication",
    "division",
    "shopping",
    "geometry",
    "safecalc",
    "calculator",
]