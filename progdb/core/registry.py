"""Immutable program registry.

The configuration is a mapping from the name of a program (eg. ghc) to its
``Program`` descriptor. It is a value: every mutating operation returns a new
``ProgramConfiguration`` and leaves the receiver untouched, so snapshots can
be shared freely between callers.
"""
from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .discovery import find_executable, resolve_user_path
from .logging import core_logger
from .program import FoundOnSystem, Program, Unresolved, simple_program
from .verbosity import DEAFENING, NORMAL, Verbosity


class ProgramConfiguration:
    def __init__(self, programs: Iterable[Program] = ()):
        self._programs: Dict[str, Program] = {}
        for p in programs:
            self._programs[p.name] = p

    # -- pure queries -------------------------------------------------------

    def get(self, name: str) -> Optional[Program]:
        """Stored descriptor for ``name`` without any PATH probing."""
        return self._programs.get(name)

    def names(self) -> List[str]:
        return sorted(self._programs)

    def programs(self) -> List[Program]:
        return [self._programs[n] for n in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._programs

    def __len__(self) -> int:
        return len(self._programs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProgramConfiguration):
            return NotImplemented
        return self._programs == other._programs

    def __repr__(self) -> str:
        return f"ProgramConfiguration({self.programs()!r})"

    # -- copy-on-write updates ----------------------------------------------

    def update_program(self, program: Program) -> "ProgramConfiguration":
        """Insert ``program``, replacing any entry of the same name in full."""
        programs = dict(self._programs)
        programs[program.name] = program
        new = ProgramConfiguration()
        new._programs = programs
        return new

    def maybe_update_program(self, program: Optional[Program]) -> "ProgramConfiguration":
        if program is None:
            return self
        return self.update_program(program)

    def set_user_path(
        self,
        name: str,
        user_path: str,
        verbosity: Verbosity = NORMAL,
        path: Optional[Sequence[str]] = None,
    ) -> "ProgramConfiguration":
        """Override any path information for ``name``; add the program if unknown.

        Raises ProgramNotFoundError if ``user_path`` is neither an existing file
        nor a name that can be found on the search path.
        """
        location = resolve_user_path(user_path, verbosity, path)
        program = self._programs.get(name) or simple_program(name)
        return self.update_program(program.with_location(location))

    def set_user_args(self, name: str, arg_string: str) -> "ProgramConfiguration":
        """Replace the default args of ``name`` with the words of ``arg_string``."""
        program = self._programs.get(name) or simple_program(name)
        return self.update_program(program.with_args(arg_string.split()))

    # -- resolving queries --------------------------------------------------

    def lookup(
        self,
        name: str,
        verbosity: Verbosity = NORMAL,
        path: Optional[Sequence[str]] = None,
    ) -> Optional[Program]:
        """Look up a program, probing PATH if its location is not known yet.

        Returns None if the program is not in the configuration at all. A
        program that cannot be found keeps its Unresolved location; the
        failure is left to whoever tries to run it.
        """
        program = self._programs.get(name)
        if program is None:
            return None
        return self._resolve(program, verbosity, path)

    def _resolve(
        self,
        program: Program,
        verbosity: Verbosity,
        path: Optional[Sequence[str]],
    ) -> Program:
        if not isinstance(program.location, Unresolved):
            return program
        found = find_executable(program.binary_name, path)
        if found is None:
            if verbosity >= DEAFENING:
                core_logger.debug(f"{program.binary_name} not found on the path")
            return program
        return program.with_location(FoundOnSystem(found))

    def list_all(
        self,
        verbosity: Verbosity = NORMAL,
        path: Optional[Sequence[str]] = None,
    ) -> List[Tuple[str, Program]]:
        out: List[Tuple[str, Program]] = []
        for name in self.names():
            out.append((name, self._resolve(self._programs[name], verbosity, path)))
        return out


def insert_or_update(conf: ProgramConfiguration, program: Program) -> ProgramConfiguration:
    return conf.update_program(program)


def maybe_update_program(conf: ProgramConfiguration, program: Optional[Program]) -> ProgramConfiguration:
    return conf.maybe_update_program(program)


def lookup(
    conf: ProgramConfiguration,
    name: str,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> Optional[Program]:
    return conf.lookup(name, verbosity, path)


def list_all(
    conf: ProgramConfiguration,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> List[Tuple[str, Program]]:
    return conf.list_all(verbosity, path)


def set_user_path(
    conf: ProgramConfiguration,
    name: str,
    user_path: str,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> ProgramConfiguration:
    return conf.set_user_path(name, user_path, verbosity, path)


def set_user_args(conf: ProgramConfiguration, name: str, arg_string: str) -> ProgramConfiguration:
    return conf.set_user_args(name, arg_string)


__all__ = [
    "ProgramConfiguration",
    "insert_or_update",
    "maybe_update_program",
    "lookup",
    "list_all",
    "set_user_path",
    "set_user_args",
]
