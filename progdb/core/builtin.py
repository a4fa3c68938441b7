"""Programs the build tool knows about out of the box.

All descriptors start Unresolved with no default args; their location is
found on first lookup.
"""
from __future__ import annotations
import sys
from dataclasses import replace

from .program import FoundOnSystem, Program, simple_program
from .registry import ProgramConfiguration

# Where the compiler's bundled MinGW toolchain puts its linker on Windows.
MINGW_LD_PATH = "C:\\ghc\\mingw\\bin\\ld.exe"

ghc_program = simple_program("ghc")
ghc_pkg_program = simple_program("ghc-pkg")
nhc_program = simple_program("nhc")
jhc_program = simple_program("jhc")
hugs_program = simple_program("hugs")
runghc_program = simple_program("runghc")
runhugs_program = simple_program("runhugs")
happy_program = simple_program("happy")
alex_program = simple_program("alex")
ranlib_program = simple_program("ranlib")
ar_program = simple_program("ar")
hsc2hs_program = simple_program("hsc2hs")
c2hs_program = simple_program("c2hs")
cpphs_program = simple_program("cpphs")
hscolour_program = replace(simple_program("hscolour"), binary_name="HsColour")
haddock_program = simple_program("haddock")
greencard_program = simple_program("greencard")
tar_program = simple_program("tar")
cpp_program = simple_program("cpp")
pfesetup_program = simple_program("pfesetup")


def ld_program_for(platform: str) -> Program:
    if platform == "win32":
        return simple_program("ld").with_location(FoundOnSystem(MINGW_LD_PATH))
    return simple_program("ld")


ld_program = ld_program_for(sys.platform)


def default_programs(platform: str = sys.platform):
    return [
        hscolour_program,
        haddock_program,
        happy_program,
        alex_program,
        hsc2hs_program,
        c2hs_program,
        cpphs_program,
        greencard_program,
        pfesetup_program,
        ranlib_program,
        runghc_program,
        runhugs_program,
        ar_program,
        ld_program_for(platform),
        tar_program,
        ghc_program,
        ghc_pkg_program,
        cpp_program,
    ]


def default_program_configuration(platform: str = sys.platform) -> ProgramConfiguration:
    """The startup registry; build it once and pass it down explicitly."""
    return ProgramConfiguration(default_programs(platform))


__all__ = [
    "MINGW_LD_PATH",
    "default_programs",
    "default_program_configuration",
    "ld_program_for",
    "ghc_program",
    "ghc_pkg_program",
    "nhc_program",
    "jhc_program",
    "hugs_program",
    "runghc_program",
    "runhugs_program",
    "happy_program",
    "alex_program",
    "ranlib_program",
    "ar_program",
    "hsc2hs_program",
    "c2hs_program",
    "cpphs_program",
    "hscolour_program",
    "haddock_program",
    "greencard_program",
    "ld_program",
    "tar_program",
    "cpp_program",
    "pfesetup_program",
]
