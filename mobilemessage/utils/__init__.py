"""Utility functions for mobilemessage."""

from .timestamps import parse_timestamp

__all__ = [
    "parse_timestamp",
]
