"""Override surface and textual form of a program configuration.

This module centralizes everything that turns text into registry updates and
back:
- flag/field names for per-program overrides (``--with-ghc``, ``ghc-options``)
- YAML override files::

      programs:
        ghc:
          path: /opt/ghc/bin/ghc
          options: -O2 -Wall

- a plain-dict / YAML rendering of a whole configuration, kept apart from
  ``ProgramConfiguration`` itself.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence
import yaml

from .errors import ConfigError
from .program import (
    UNRESOLVED,
    FoundOnSystem,
    Program,
    ProgramLocation,
    UserSpecified,
    parse_version,
)
from .registry import ProgramConfiguration
from .verbosity import NORMAL, Verbosity

VALID_OVERRIDE_KEYS = {"path", "options"}
VALID_LOCATION_KINDS = {"unresolved", "user", "system"}


def with_program_flag(program: Program) -> str:
    """The flag for giving a path to this program, eg. with-alex."""
    return f"with-{program.name}"


def program_options_flag(program: Program) -> str:
    """The flag for giving args for this program, eg. haddock-options."""
    return f"{program.name}-options"


def program_options_field(program: Program) -> str:
    """The package description field for giving args for this program."""
    return program_options_flag(program)


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e


def _validate_overrides(data: Any) -> Dict[str, Dict[str, str]]:
    if not isinstance(data, dict):
        raise ConfigError("Override file must be a mapping")
    programs = data.get("programs", {}) or {}
    if not isinstance(programs, dict):
        raise ConfigError("'programs' must be a mapping of program name to overrides")
    out: Dict[str, Dict[str, str]] = {}
    for name, entry in programs.items():
        if not isinstance(name, str) or not name:
            raise ConfigError(f"Invalid program name: {name!r}")
        entry = entry or {}
        if not isinstance(entry, dict):
            raise ConfigError(f"Overrides for {name} must be a mapping")
        unknown = set(entry) - VALID_OVERRIDE_KEYS
        if unknown:
            raise ConfigError(f"Unknown override keys for {name}: {sorted(unknown)}")
        for k, v in entry.items():
            if not isinstance(v, str):
                raise ConfigError(f"{name}.{k} must be a string")
        out[name] = dict(entry)
    return out


def load_overrides(path: Path) -> Dict[str, Dict[str, str]]:
    return _validate_overrides(_read_yaml(Path(path)))


def apply_overrides(
    conf: ProgramConfiguration,
    overrides: Dict[str, Dict[str, str]],
    verbosity: Verbosity = NORMAL,
    path: Optional[Sequence[str]] = None,
) -> ProgramConfiguration:
    for name, entry in overrides.items():
        if "path" in entry:
            conf = conf.set_user_path(name, entry["path"], verbosity, path)
        if "options" in entry:
            conf = conf.set_user_args(name, entry["options"])
    return conf


# -- textual form -------------------------------------------------------------

def _location_to_dict(location: ProgramLocation) -> Dict[str, Any]:
    if isinstance(location, UserSpecified):
        return {"kind": "user", "path": location.path}
    if isinstance(location, FoundOnSystem):
        return {"kind": "system", "path": location.path}
    return {"kind": "unresolved"}


def _location_from_dict(data: Any) -> ProgramLocation:
    if data is None:
        return UNRESOLVED
    if not isinstance(data, dict) or data.get("kind") not in VALID_LOCATION_KINDS:
        raise ConfigError(f"Invalid location: {data!r}")
    kind = data["kind"]
    if kind == "unresolved":
        return UNRESOLVED
    p = data.get("path")
    if not isinstance(p, str) or not p:
        raise ConfigError(f"Location of kind {kind} needs a path")
    return UserSpecified(p) if kind == "user" else FoundOnSystem(p)


def program_to_dict(program: Program) -> Dict[str, Any]:
    return {
        "name": program.name,
        "binary_name": program.binary_name,
        "version": str(program.version) if program.version is not None else None,
        "args": list(program.args),
        "location": _location_to_dict(program.location),
    }


def program_from_dict(data: Any) -> Program:
    if not isinstance(data, dict) or not data.get("name"):
        raise ConfigError(f"Invalid program entry: {data!r}")
    raw_version = data.get("version")
    version = None
    if raw_version is not None:
        version = parse_version(str(raw_version))
        if version is None:
            raise ConfigError(f"Invalid version for {data['name']}: {raw_version!r}")
    args = data.get("args") or []
    if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
        raise ConfigError(f"args of {data['name']} must be a list of strings")
    return Program(
        name=data["name"],
        binary_name=data.get("binary_name") or data["name"],
        version=version,
        args=tuple(args),
        location=_location_from_dict(data.get("location")),
    )


def configuration_to_dict(conf: ProgramConfiguration) -> Dict[str, Any]:
    return {"programs": [program_to_dict(p) for p in conf.programs()]}


def configuration_from_dict(data: Any) -> ProgramConfiguration:
    if not isinstance(data, dict) or not isinstance(data.get("programs", []), list):
        raise ConfigError("Configuration must be a mapping with a 'programs' list")
    return ProgramConfiguration(program_from_dict(d) for d in data.get("programs", []))


def dump_configuration(conf: ProgramConfiguration) -> str:
    return yaml.safe_dump(configuration_to_dict(conf), sort_keys=False)


def load_configuration(text: str) -> ProgramConfiguration:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}") from e
    return configuration_from_dict(data)


__all__ = [
    "with_program_flag",
    "program_options_flag",
    "program_options_field",
    "load_overrides",
    "apply_overrides",
    "program_to_dict",
    "program_from_dict",
    "configuration_to_dict",
    "configuration_from_dict",
    "dump_configuration",
    "load_configuration",
    "ConfigError",
]
