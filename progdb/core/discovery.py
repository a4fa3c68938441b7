"""Location resolution: explicit paths and PATH probing.

There's good default behavior for trying to find "foo" in PATH, being able
to override its location, etc. Diagnostics are only emitted at VERBOSE or
above and never change the outcome.
"""
from __future__ import annotations
import os
import shutil
from typing import Optional, Sequence

from .errors import ProgramNotFoundError
from .logging import core_logger
from .program import FoundOnSystem, Program, ProgramLocation, UserSpecified, simple_program_at
from .verbosity import NORMAL, VERBOSE, Verbosity


def _has_dir_component(name: str) -> bool:
    if os.path.isabs(name):
        return True
    seps = [os.sep] + ([os.altsep] if os.altsep else [])
    return any(s in name for s in seps)


def _join_path(path: Optional[Sequence[str]]) -> Optional[str]:
    if path is None:
        return None
    return os.pathsep.join(path)


def find_executable(binary_name: str, path: Optional[Sequence[str]] = None) -> Optional[str]:
    """Return the first executable named ``binary_name`` on the search path, or None.

    ``path`` overrides the directories from ``PATH``; entries are scanned in order.
    """
    return shutil.which(binary_name, path=_join_path(path))


def search(
    binary_name: str,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> ProgramLocation:
    """Locate ``binary_name``; raise ProgramNotFoundError if it cannot be found."""
    if _has_dir_component(binary_name) and os.path.isfile(binary_name):
        return UserSpecified(os.path.abspath(binary_name))
    if verbosity >= VERBOSE:
        core_logger.info(f"searching for {binary_name} in path.")
    found = find_executable(binary_name, path)
    if found is None:
        raise ProgramNotFoundError(binary_name)
    if verbosity >= VERBOSE:
        core_logger.info(f"found {binary_name} at {found}")
    return FoundOnSystem(found)


def resolve_user_path(
    user_path: str,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> ProgramLocation:
    """An existing file is taken as given (made absolute); anything else is searched for as a bare name."""
    if os.path.isfile(user_path):
        return UserSpecified(os.path.abspath(user_path))
    return search(user_path, verbosity, path)


def find_program(
    name: str,
    maybe_path: Optional[str] = None,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> Program:
    """Look for a program by explicit path or by its name on the search path."""
    if maybe_path is None:
        location = search(name, verbosity, path)
    else:
        location = resolve_user_path(maybe_path, verbosity, path)
    return simple_program_at(name, location)


__all__ = ["find_executable", "search", "resolve_user_path", "find_program"]
