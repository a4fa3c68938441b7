"""Version probing: run a program with a version flag and parse what it prints."""
from __future__ import annotations
import re
from typing import Callable, Optional, Sequence

from .discovery import find_program, search
from .errors import VersionParseError
from .invoker import run_stdout
from .logging import core_logger, preview_output
from .program import Program, parse_version
from .verbosity import NORMAL, VERBOSE, Verbosity

Selector = Callable[[str], str]


def identity(output: str) -> str:
    return output


def regex_selector(pattern: str, group: int = 1) -> Selector:
    """Selector returning ``group`` of the first match of ``pattern``, or ""."""
    rx = re.compile(pattern)

    def select(output: str) -> str:
        m = rx.search(output)
        return m.group(group) if m else ""

    return select


def word_selector(index: int) -> Selector:
    """Selector returning the whitespace separated word at ``index``, or ""."""

    def select(output: str) -> str:
        words = output.split()
        try:
            return words[index]
        except IndexError:
            return ""

    return select


def probe_version(
    program: Program,
    version_arg: str,
    selector: Selector,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> Program:
    """Return ``program`` with ``version`` filled in from its own output.

    An unresolved program is searched for first (ProgramNotFoundError if that
    fails). Only ``version_arg`` is passed, never the program's default args.
    """
    if not program.is_resolved:
        program = program.with_location(search(program.binary_name, verbosity, path))
    output = run_stdout(program, [version_arg], verbosity)
    version = parse_version(selector(output))
    if version is None:
        if verbosity >= VERBOSE:
            core_logger.info(f"unparsable version output from {program.name}: {preview_output(output)}")
        raise VersionParseError(program.name, output)
    if verbosity >= VERBOSE:
        core_logger.info(f"{program.name} is version {version}")
    return program.with_version(version)


def find_program_and_version(
    name: str,
    maybe_path: Optional[str],
    version_arg: str,
    selector: Selector,
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> Program:
    """Look for a program and try to find its version number."""
    program = find_program(name, maybe_path, verbosity, path)
    return probe_version(program, version_arg, selector, verbosity, path)


__all__ = [
    "Selector",
    "identity",
    "regex_selector",
    "word_selector",
    "probe_version",
    "find_program_and_version",
]
