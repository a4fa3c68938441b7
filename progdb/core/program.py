"""Program descriptors.

A program is basically a name, a location, and some arguments. Descriptors
are immutable: every change (a discovered location, a probed version, user
supplied arguments) produces a new ``Program`` via ``dataclasses.replace``.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union
import re

from .errors import UnresolvedLocationError


@dataclass(frozen=True)
class Unresolved:
    """Path not yet known."""

    def __str__(self) -> str:
        return "<unresolved>"


@dataclass(frozen=True)
class UserSpecified:
    """The user gave the path to this program, eg. --with-ghc=/usr/bin/ghc-6.6"""
    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class FoundOnSystem:
    """The location of the program, as located by searching PATH."""
    path: str

    def __str__(self) -> str:
        return self.path


ProgramLocation = Union[Unresolved, UserSpecified, FoundOnSystem]

UNRESOLVED = Unresolved()


_VERSION_RE = re.compile(r"^(\d+(?:\.\d+)*)((?:-[A-Za-z0-9]+)*)$")


@dataclass(frozen=True, order=True)
class Version:
    branch: Tuple[int, ...]
    tags: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return ".".join(str(n) for n in self.branch) + "".join(f"-{t}" for t in self.tags)


def parse_version(text: str) -> Optional[Version]:
    """Parse ``8.6.5`` or ``1.0-beta`` into a Version; None if not a version."""
    m = _VERSION_RE.match(text.strip())
    if not m:
        return None
    branch = tuple(int(part) for part in m.group(1).split("."))
    tags = tuple(t for t in m.group(2).split("-") if t)
    return Version(branch=branch, tags=tags)


@dataclass(frozen=True)
class Program:
    name: str
    binary_name: str
    version: Optional[Version] = None
    args: Tuple[str, ...] = field(default_factory=tuple)
    location: ProgramLocation = UNRESOLVED

    def __post_init__(self):
        if not self.name:
            raise ValueError("Program name must be non-empty")
        # accept any sequence for args but always store a tuple
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def is_resolved(self) -> bool:
        return not isinstance(self.location, Unresolved)

    @property
    def path(self) -> str:
        """The full path of a configured program.

        Raises UnresolvedLocationError for programs whose location is not
        known yet; there is no fallback path.
        """
        if isinstance(self.location, Unresolved):
            raise UnresolvedLocationError(self.name)
        return self.location.path

    def with_location(self, location: ProgramLocation) -> "Program":
        return replace(self, location=location)

    def with_args(self, args) -> "Program":
        return replace(self, args=tuple(args))

    def with_version(self, version: Optional[Version]) -> "Program":
        return replace(self, version=version)


def simple_program_at(name: str, location: ProgramLocation) -> Program:
    return Program(name=name, binary_name=name, version=None, args=(), location=location)


def simple_program(name: str) -> Program:
    return simple_program_at(name, UNRESOLVED)


__all__ = [
    "Program",
    "ProgramLocation",
    "Unresolved",
    "UserSpecified",
    "FoundOnSystem",
    "UNRESOLVED",
    "Version",
    "parse_version",
    "simple_program",
    "simple_program_at",
]
