"""Run configured programs as blocking subprocesses."""
from __future__ import annotations
import subprocess
from typing import List, Optional, Sequence, TYPE_CHECKING

from .errors import NonZeroExitError, NotRegisteredError, SpawnError
from .logging import core_logger
from .program import Program
from .verbosity import NORMAL, VERBOSE, Verbosity

if TYPE_CHECKING:  # pragma: no cover
    from .registry import ProgramConfiguration


def _spawn(program: Program, cmd: List[str], capture: bool, verbosity: Verbosity) -> subprocess.CompletedProcess:
    if verbosity >= VERBOSE:
        core_logger.info(" ".join(cmd))
    try:
        # undecodable bytes become U+FFFD; the caller decides what the text means
        return subprocess.run(cmd, capture_output=capture, text=True, errors="replace")
    except OSError as e:
        raise SpawnError(program.name, cmd[0], str(e)) from e


def run(
    program: Program,
    extra_args: Sequence[str] = (),
    verbosity: Verbosity = NORMAL,
) -> subprocess.CompletedProcess:
    """Run ``program`` with its default args followed by ``extra_args``.

    Raises UnresolvedLocationError before spawning anything if the program has
    no known location, and NonZeroExitError if it exits with a failure status.
    """
    path = program.path
    cmd = [path, *program.args, *extra_args]
    cp = _spawn(program, cmd, capture=False, verbosity=verbosity)
    if cp.returncode != 0:
        if verbosity >= VERBOSE:
            core_logger.info(f"{program.name} failed with exit code {cp.returncode}")
        raise NonZeroExitError(program.name, cp.returncode)
    return cp


def run_stdout(
    program: Program,
    args: Sequence[str],
    verbosity: Verbosity = NORMAL,
) -> str:
    """Run ``program`` with exactly ``args`` and return its stdout.

    Default args are not added and the exit status is not checked.
    """
    cp = _spawn(program, [program.path, *args], capture=True, verbosity=verbosity)
    return cp.stdout or ""


def run_by_name(
    conf: "ProgramConfiguration",
    name: str,
    extra_args: Sequence[str] = (),
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> subprocess.CompletedProcess:
    program = conf.lookup(name, verbosity, path=path)
    if program is None:
        raise NotRegisteredError(name)
    return run(program, extra_args, verbosity)


__all__ = ["run", "run_stdout", "run_by_name"]
