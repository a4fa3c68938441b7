import pytest
from conftest import posix_only
from progdb.cli import build_parser, main


def test_cli_parser_has_override_flags():
    parser = build_parser()
    ns = parser.parse_args(["--with-ghc", "/opt/ghc", "--haddock-options=-s http://foo", "locate", "ghc"])
    assert ns.with_ghc == "/opt/ghc"
    assert ns.haddock_options == "-s http://foo"
    assert ns.command == "locate" and ns.name == "ghc"
    ns = parser.parse_args(["--with-ghc-pkg=ghc-pkg-9", "list"])
    assert ns.with_ghc_pkg == "ghc-pkg-9"


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_locate_unknown_program(capsys):
    assert main(["locate", "neverRegistered"]) == 1
    assert "neverRegistered" in capsys.readouterr().err


def test_run_unknown_program(capsys):
    assert main(["run", "neverRegistered"]) == 1
    assert "neverRegistered command not found" in capsys.readouterr().err


@posix_only
def test_locate_with_user_path(capsys, make_tool):
    tool = make_tool("my-ar")
    assert main([f"--with-ar={tool}", "locate", "ar"]) == 0
    assert capsys.readouterr().out.strip() == str(tool)


@posix_only
def test_list_uses_path(monkeypatch, capsys, make_tool):
    tool = make_tool("tar")
    monkeypatch.setenv("PATH", str(tool.parent))
    assert main(["--tar-options=-v", "list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert f"tar: {tool} -v" in lines
    assert "haddock: <unresolved>" in lines


@posix_only
def test_list_yaml(monkeypatch, capsys, make_tool):
    tool = make_tool("HsColour")
    monkeypatch.setenv("PATH", str(tool.parent))
    assert main(["list", "--format", "yaml"]) == 0
    out = capsys.readouterr().out
    assert "binary_name: HsColour" in out
    assert str(tool) in out


@posix_only
def test_version_command(capsys, make_tool):
    tool = make_tool("happy", 'echo "Happy Version 1.20.1"')
    assert main([f"--with-happy={tool}", "version", "happy"]) == 0
    assert capsys.readouterr().out.strip() == "happy 1.20.1"


@posix_only
def test_run_propagates_exit_code(capsys, make_tool):
    tool = make_tool("cpp", "exit 4")
    assert main([f"--with-cpp={tool}", "run", "cpp", "x.h"]) == 4
    assert "cpp exited with status 4" in capsys.readouterr().err


@posix_only
def test_config_file_then_flags(tmp_path, capsys, make_tool):
    out = tmp_path / "args.txt"
    tool = make_tool("alex", f'echo "$@" > "{out}"')
    cfg = tmp_path / "programs.yaml"
    cfg.write_text(f"programs:\n  alex:\n    path: {tool}\n    options: -g\n")
    assert main(["--config", str(cfg), "run", "alex", "Lexer.x"]) == 0
    assert out.read_text().strip() == "-g Lexer.x"
    assert main(["--config", str(cfg), "--alex-options=--ghc", "run", "alex", "Lexer.x"]) == 0
    assert out.read_text().strip() == "--ghc Lexer.x"


def test_bad_with_path_reports_error(capsys):
    assert main(["--with-ghc=definitely-not-a-real-tool-xyz", "list"]) == 1
    assert "definitely-not-a-real-tool-xyz" in capsys.readouterr().err


@pytest.mark.parametrize("flags,expected", [([], 1), (["-v"], 2), (["-vvvv"], 3), (["--verbosity", "silent"], 0)])
def test_verbosity_flags(flags, expected):
    from progdb.cli import _verbosity
    ns = build_parser().parse_args(flags + ["list"])
    assert int(_verbosity(ns)) == expected


@posix_only
def test_run_killed_by_signal_exit_code(capsys, make_tool):
    tool = make_tool("ranlib", "kill -9 $$")
    assert main([f"--with-ranlib={tool}", "run", "ranlib"]) == 137
    assert "ranlib exited with status -9" in capsys.readouterr().err
