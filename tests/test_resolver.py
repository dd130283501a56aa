import os
from pathlib import Path

from fakes import make_executable

from minishell.core import default_registry
from minishell.core.resolver import find_executable, resolve_command, search_path
from minishell.core.types import NOT_FOUND, BuiltinMatch, ExecutableMatch


def test_search_path_splits_in_order() -> None:
    assert search_path({"PATH": "/a:/b:/c"}) == ("/a", "/b", "/c")


def test_search_path_tolerates_missing_variable() -> None:
    assert search_path({}) == ()
    assert search_path({"PATH": ""}) == ()


def test_search_path_is_reread_each_call() -> None:
    environ = {"PATH": "/a"}
    assert search_path(environ) == ("/a",)
    environ["PATH"] = "/b"
    assert search_path(environ) == ("/b",)


def test_finds_executable_on_path(bin_dir: Path, environ: dict[str, str]) -> None:
    tool = make_executable(bin_dir, "ls")
    assert find_executable("ls", environ) == ExecutableMatch(path=str(tool))


def test_earliest_directory_wins(tmp_path: Path) -> None:
    first = make_executable(tmp_path / "first", "tool")
    make_executable(tmp_path / "second", "tool")
    environ = {"PATH": f"{tmp_path / 'first'}:{tmp_path / 'second'}"}
    assert find_executable("tool", environ) == ExecutableMatch(path=str(first))


def test_skips_missing_and_non_executable_candidates(tmp_path: Path) -> None:
    make_executable(tmp_path / "plain", "tool", mode=0o644)
    runnable = make_executable(tmp_path / "runnable", "tool")
    environ = {"PATH": f"{tmp_path / 'missing'}:{tmp_path / 'plain'}:{tmp_path / 'runnable'}"}
    assert find_executable("tool", environ) == ExecutableMatch(path=str(runnable))


def test_directory_named_like_command_never_matches(bin_dir: Path, environ: dict[str, str]) -> None:
    (bin_dir / "tool").mkdir()
    os.chmod(bin_dir / "tool", 0o755)
    assert find_executable("tool", environ) is NOT_FOUND


def test_not_found_when_no_directory_matches(environ: dict[str, str]) -> None:
    assert find_executable("nonexistent_cmd_xyz", environ) is NOT_FOUND
    assert find_executable("nonexistent_cmd_xyz", {}) is NOT_FOUND


def test_empty_path_elements_are_skipped(bin_dir: Path, tmp_path: Path, monkeypatch) -> None:
    make_executable(tmp_path, "tool")
    monkeypatch.chdir(tmp_path)
    environ = {"PATH": f":{bin_dir}:"}
    assert find_executable("tool", environ) is NOT_FOUND


def test_path_like_name_is_checked_directly(bin_dir: Path) -> None:
    tool = make_executable(bin_dir, "script")
    assert find_executable(str(tool), {}) == ExecutableMatch(path=str(tool))
    assert find_executable(str(bin_dir), {}) is NOT_FOUND


def test_resolution_is_idempotent(bin_dir: Path, environ: dict[str, str]) -> None:
    make_executable(bin_dir, "tool")
    assert find_executable("tool", environ) == find_executable("tool", environ)


def test_builtins_resolve_before_path(bin_dir: Path, environ: dict[str, str]) -> None:
    make_executable(bin_dir, "echo")
    registry = default_registry()
    assert resolve_command("echo", registry, environ) == BuiltinMatch(name="echo")


def test_builtin_lookup_is_case_sensitive(environ: dict[str, str]) -> None:
    assert resolve_command("ECHO", default_registry(), environ) is NOT_FOUND


def test_empty_name_is_not_found(environ: dict[str, str]) -> None:
    assert resolve_command("", default_registry(), environ) is NOT_FOUND
    assert find_executable("", environ) is NOT_FOUND


def test_name_with_null_byte_is_not_found(bin_dir: Path, environ: dict[str, str]) -> None:
    assert find_executable("foo\x00bar", environ) is NOT_FOUND
    assert find_executable(f"{bin_dir}/foo\x00bar", environ) is NOT_FOUND
