"""CLI entrypoint for progdb."""
from __future__ import annotations
import argparse
import sys
from typing import Optional

from .core import invoker
from .core.builtin import default_program_configuration
from .core.config_loader import (
    apply_overrides,
    dump_configuration,
    load_overrides,
    program_options_flag,
    with_program_flag,
)
from .core.errors import NonZeroExitError, NotRegisteredError, ProgramError, UnresolvedLocationError
from .core.registry import ProgramConfiguration
from .core.verbosity import Verbosity
from .core.version import probe_version, regex_selector

DEFAULT_VERSION_PATTERN = r"(\d+(?:\.\d+)+)"


def _dest(flag: str) -> str:
    return flag.replace("-", "_")


def build_parser(conf: Optional[ProgramConfiguration] = None):
    conf = conf if conf is not None else default_program_configuration()
    p = argparse.ArgumentParser(prog="progdb", description="Locate, configure and run build helper programs")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More diagnostics (repeatable)")
    p.add_argument("--verbosity", type=Verbosity.parse, help="Verbosity level 0-3 or name (overrides -v)")
    p.add_argument("--config", help="YAML file with per-program path/options overrides")
    overrides = p.add_argument_group("program overrides")
    # One --with-<prog> and --<prog>-options pair per known program
    for program in conf.programs():
        overrides.add_argument(
            f"--{with_program_flag(program)}",
            dest=_dest(with_program_flag(program)),
            metavar="PATH",
            help=f"Location of {program.name} (file or name to search for)",
        )
        overrides.add_argument(
            f"--{program_options_flag(program)}",
            dest=_dest(program_options_flag(program)),
            metavar="ARGS",
            help=f"Arguments always passed to {program.name}; use --{program_options_flag(program)}='-x -y'",
        )
    sub = p.add_subparsers(dest="command")
    lst = sub.add_parser("list", help="Show every known program and where it resolves")
    lst.add_argument("--format", choices=["text", "yaml"], default="text")
    loc = sub.add_parser("locate", help="Print the path of a program")
    loc.add_argument("name")
    ver = sub.add_parser("version", help="Run a program to find its version")
    ver.add_argument("name")
    ver.add_argument("--version-arg", default="--version")
    ver.add_argument("--pattern", default=DEFAULT_VERSION_PATTERN, help="Regex whose first group is the version")
    run = sub.add_parser("run", help="Run a program with its configured arguments")
    run.add_argument("name")
    run.add_argument("tool_args", nargs=argparse.REMAINDER)
    return p


def _verbosity(args) -> Verbosity:
    if args.verbosity is not None:
        return args.verbosity
    return Verbosity.from_int(Verbosity.NORMAL + args.verbose)


def configure(args, conf: ProgramConfiguration, verbosity: Verbosity) -> ProgramConfiguration:
    """Apply the --config file, then command line overrides on top of it."""
    if args.config:
        conf = apply_overrides(conf, load_overrides(args.config), verbosity)
    for program in conf.programs():
        user_path = getattr(args, _dest(with_program_flag(program)), None)
        if user_path:
            conf = conf.set_user_path(program.name, user_path, verbosity)
        user_args = getattr(args, _dest(program_options_flag(program)), None)
        if user_args is not None:
            conf = conf.set_user_args(program.name, user_args)
    return conf


def _resolved(conf: ProgramConfiguration, name: str, verbosity: Verbosity):
    program = conf.lookup(name, verbosity)
    if program is None:
        raise NotRegisteredError(name)
    if not program.is_resolved:
        raise UnresolvedLocationError(name)
    return program


def _cmd_list(conf, args, verbosity) -> int:
    if args.format == "yaml":
        resolved = ProgramConfiguration(p for _, p in conf.list_all(verbosity))
        print(dump_configuration(resolved), end="")
        return 0
    for name, program in conf.list_all(verbosity):
        extra = f" {' '.join(program.args)}" if program.args else ""
        print(f"{name}: {program.location}{extra}")
    return 0


def _cmd_locate(conf, args, verbosity) -> int:
    print(_resolved(conf, args.name, verbosity).path)
    return 0


def _cmd_version(conf, args, verbosity) -> int:
    program = _resolved(conf, args.name, verbosity)
    program = probe_version(program, args.version_arg, regex_selector(args.pattern), verbosity)
    print(f"{program.name} {program.version}")
    return 0


def _cmd_run(conf, args, verbosity) -> int:
    tool_args = list(args.tool_args)
    if tool_args and tool_args[0] == "--":
        tool_args = tool_args[1:]
    invoker.run_by_name(conf, args.name, tool_args, verbosity)
    return 0


COMMANDS = {
    "list": _cmd_list,
    "locate": _cmd_locate,
    "version": _cmd_version,
    "run": _cmd_run,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command not in COMMANDS:
        parser.print_help()
        return 1
    verbosity = _verbosity(args)
    try:
        conf = configure(args, default_program_configuration(), verbosity)
        return COMMANDS[args.command](conf, args, verbosity)
    except NonZeroExitError as e:
        print(f"progdb: {e}", file=sys.stderr)
        # killed by a signal: report it the way a shell does
        return 128 - e.code if e.code < 0 else e.code
    except ProgramError as e:
        print(f"progdb: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
