"""Utility helpers for kitchensink."""

from .buffers import check_length, write_into

__all__ = [
    "check_length",
    "write_into",
]
