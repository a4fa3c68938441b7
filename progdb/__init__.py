"""
progdb

Registry of the external programs a build depends on (compilers, archivers,
linkers, documentation generators, preprocessors): where each one lives, which
arguments it always gets, and which version it reports.
"""

from .core.builtin import default_program_configuration
from .core.errors import (
    ProgramError,
    ConfigError,
    ProgramNotFoundError,
    UnresolvedLocationError,
    NotRegisteredError,
    VersionParseError,
    NonZeroExitError,
    SpawnError,
)
from .core.program import (
    Program,
    Unresolved,
    UserSpecified,
    FoundOnSystem,
    Version,
    parse_version,
    simple_program,
    simple_program_at,
)
from .core.registry import ProgramConfiguration
from .core.verbosity import Verbosity

__all__ = [
    "default_program_configuration",
    "ProgramConfiguration",
    "Program",
    "Unresolved",
    "UserSpecified",
    "FoundOnSystem",
    "Version",
    "parse_version",
    "simple_program",
    "simple_program_at",
    "Verbosity",
    "ProgramError",
    "ConfigError",
    "ProgramNotFoundError",
    "UnresolvedLocationError",
    "NotRegisteredError",
    "VersionParseError",
    "NonZeroExitError",
    "SpawnError",
]
