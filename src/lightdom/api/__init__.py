"""Public parsing API for lightdom."""

from .parser import parse, parse_string

__all__ = [
    "parse",
    "parse_string",
]
