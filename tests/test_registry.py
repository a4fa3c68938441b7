from pathlib import Path

import pytest
from conftest import posix_only
from progdb.core import registry as registry_mod
from progdb.core.errors import ProgramNotFoundError
from progdb.core.program import FoundOnSystem, Program, Unresolved, UserSpecified, simple_program
from progdb.core.registry import (
    ProgramConfiguration,
    insert_or_update,
    list_all,
    lookup,
    maybe_update_program,
    set_user_args,
    set_user_path,
)


def _no_probe(*args, **kwargs):
    raise AssertionError("PATH must not be probed")


def test_insert_replaces_entry_in_full():
    conf = ProgramConfiguration([Program("ghc", "ghc", args=("-O2",))])
    conf2 = insert_or_update(conf, Program("ghc", "ghc-9.4"))
    assert conf2.get("ghc").binary_name == "ghc-9.4"
    assert conf2.get("ghc").args == ()
    assert len(conf2) == 1


def test_updates_leave_snapshot_untouched():
    base = ProgramConfiguration([simple_program("ar")])
    changed = set_user_args(base, "ar", "rcs")
    changed = insert_or_update(changed, simple_program("tar"))
    assert base.get("ar").args == ()
    assert "tar" not in base
    assert changed.get("ar").args == ("rcs",)
    assert changed.names() == ["ar", "tar"]


def test_maybe_update_program():
    conf = ProgramConfiguration()
    assert maybe_update_program(conf, None) is conf
    assert "cpp" in maybe_update_program(conf, simple_program("cpp"))


def test_lookup_absent_entry():
    assert lookup(ProgramConfiguration(), "nothing-here") is None


@pytest.mark.parametrize("location", [UserSpecified("/opt/x/ld"), FoundOnSystem("/usr/bin/ld")])
def test_lookup_keeps_explicit_location(monkeypatch, location):
    monkeypatch.setattr(registry_mod, "find_executable", _no_probe)
    p = Program("ld", "ld", location=location)
    found = lookup(insert_or_update(ProgramConfiguration(), p), "ld")
    assert found.location == location


def test_lookup_unfindable_stays_unresolved():
    conf = ProgramConfiguration([simple_program("definitely-not-a-real-tool-xyz")])
    p = lookup(conf, "definitely-not-a-real-tool-xyz", path=[])
    assert p is not None
    assert isinstance(p.location, Unresolved)


@posix_only
def test_lookup_probes_binary_name(make_tool):
    tool = make_tool("HsColour")
    conf = ProgramConfiguration([Program("hscolour", "HsColour")])
    p = conf.lookup("hscolour", path=[str(tool.parent)])
    assert p.location == FoundOnSystem(str(tool))
    # the stored entry is not changed by a lookup
    assert isinstance(conf.get("hscolour").location, Unresolved)


@posix_only
def test_set_user_path_existing_file(monkeypatch, make_tool):
    tool = make_tool("my-ghc")
    conf = set_user_path(ProgramConfiguration([Program("ghc", "ghc", args=("-v0",))]), "ghc", str(tool))
    monkeypatch.setattr(registry_mod, "find_executable", _no_probe)
    p = lookup(conf, "ghc")
    assert p.location == UserSpecified(str(tool))
    assert p.args == ("-v0",)


@posix_only
def test_set_user_path_bare_name_is_searched(make_tool):
    tool = make_tool("ghc-9.4")
    conf = set_user_path(ProgramConfiguration(), "ghc", "ghc-9.4", path=[str(tool.parent)])
    p = conf.get("ghc")
    assert p.location == FoundOnSystem(str(tool))
    assert p.binary_name == "ghc" and p.args == ()


def test_set_user_path_unfindable_raises(tmp_path: Path):
    with pytest.raises(ProgramNotFoundError):
        set_user_path(ProgramConfiguration(), "ghc", "no-such-ghc-xyz", path=[str(tmp_path)])


def test_set_user_args_replaces_not_appends():
    conf = set_user_args(ProgramConfiguration(), "haddock", "a b")
    conf = set_user_args(conf, "haddock", "c")
    p = conf.get("haddock")
    assert p.args == ("c",)
    assert isinstance(p.location, Unresolved)


def test_set_user_args_tokenizes_whitespace():
    conf = set_user_args(ProgramConfiguration(), "ar", "  -r\t-c \n -s ")
    assert conf.get("ar").args == ("-r", "-c", "-s")


def test_list_all_resolves_every_entry():
    conf = ProgramConfiguration([
        simple_program("zzz-not-real"),
        Program("ar", "ar", location=UserSpecified("/x/ar")),
    ])
    listed = list_all(conf, path=[])
    assert [n for n, _ in listed] == ["ar", "zzz-not-real"]
    assert listed[0][1].location == UserSpecified("/x/ar")
    assert not listed[1][1].is_resolved


def test_equality_by_contents():
    a = ProgramConfiguration([simple_program("ar"), simple_program("ld")])
    b = ProgramConfiguration([simple_program("ld"), simple_program("ar")])
    assert a == b
    assert a != set_user_args(a, "ar", "x")


@posix_only
def test_set_user_path_relative_file_runs_from_elsewhere(monkeypatch, tmp_path: Path, make_tool):
    from progdb.core import invoker

    out = tmp_path / "ran.txt"
    make_tool("mytool", f'echo yes > "{out}"', directory=tmp_path / "work")
    monkeypatch.chdir(tmp_path / "work")
    monkeypatch.setenv("PATH", "/usr/bin:/bin")
    conf = set_user_path(ProgramConfiguration(), "t", "mytool")
    p = conf.get("t")
    assert isinstance(p.location, UserSpecified)
    assert Path(p.path).resolve() == (tmp_path / "work" / "mytool").resolve()
    monkeypatch.chdir(tmp_path)
    invoker.run(p)
    assert out.read_text().strip() == "yes"


def test_list_all_does_not_go_through_lookup(monkeypatch):
    monkeypatch.setattr(ProgramConfiguration, "lookup", _no_probe)
    conf = ProgramConfiguration([Program("ar", "ar", location=UserSpecified("/x/ar"))])
    assert list_all(conf, path=[]) == [("ar", conf.get("ar"))]
