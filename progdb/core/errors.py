"""Centralized custom exception hierarchy for the program registry."""
from __future__ import annotations


class ProgramError(Exception):
    """Base class for all program related errors."""


class ConfigError(ProgramError):
    pass


class ProgramNotFoundError(ProgramError):
    def __init__(self, binary_name: str):
        super().__init__(f"Cannot find {binary_name} on the path")
        self.binary_name = binary_name


class UnresolvedLocationError(ProgramError):
    def __init__(self, name: str):
        super().__init__(f"Could not find location for program: {name}")
        self.name = name


class NotRegisteredError(ProgramError):
    def __init__(self, name: str):
        super().__init__(f"{name} command not found")
        self.name = name


class VersionParseError(ProgramError):
    def __init__(self, name: str, raw_output: str):
        super().__init__(f"cannot determine version of {name} :\n{raw_output!r}")
        self.name = name
        self.raw_output = raw_output


class NonZeroExitError(ProgramError):
    def __init__(self, name: str, code: int):
        super().__init__(f"{name} exited with status {code}")
        self.name = name
        self.code = code


class SpawnError(ProgramError):  # OS refused to start the process
    def __init__(self, name: str, path: str, reason: str):
        super().__init__(f"Failed running {name} ({path}): {reason}")
        self.name = name
        self.path = path
        self.reason = reason


__all__ = [
    "ProgramError",
    "ConfigError",
    "ProgramNotFoundError",
    "UnresolvedLocationError",
    "NotRegisteredError",
    "VersionParseError",
    "NonZeroExitError",
    "SpawnError",
]
