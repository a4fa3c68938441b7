"""Verbosity levels shared by discovery, probing and invocation."""
from __future__ import annotations
from enum import IntEnum


class Verbosity(IntEnum):
    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEAFENING = 3

    @classmethod
    def from_int(cls, value: int) -> "Verbosity":
        # clamp rather than reject: -vvvvv is still just deafening
        return cls(max(cls.SILENT, min(int(value), cls.DEAFENING)))

    @classmethod
    def parse(cls, text: str) -> "Verbosity":
        """Accept a level number (``0``-``3``) or a level name."""
        text = text.strip()
        if text.isdigit():
            return cls.from_int(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid verbosity: {text}") from None


SILENT = Verbosity.SILENT
NORMAL = Verbosity.NORMAL
VERBOSE = Verbosity.VERBOSE
DEAFENING = Verbosity.DEAFENING

__all__ = ["Verbosity", "SILENT", "NORMAL", "VERBOSE", "DEAFENING"]
