import os

import pytest

from pipexpy.command import (
    get_env_value,
    is_executable,
    resolve_command,
    resolve_path,
    split_command,
    split_fields,
)
from pipexpy.errors import CommandNotFoundError


def _make_tool(directory, name, mode=0o755):
    directory.mkdir(parents=True, exist_ok=True)
    tool = directory / name
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(mode)
    return tool


def test_split_fields_drops_empty_fields():
    assert split_fields("  ls   -l ", " ") == ["ls", "-l"]


@pytest.mark.parametrize("text", ["", ":::", ":"])
def test_split_fields_only_separators(text):
    assert split_fields(text, ":") == []


def test_split_command_keeps_order():
    words = ["grep", "-v", "pattern"]
    assert split_command(" ".join(words)) == words


def test_get_env_value_found():
    env = {"HOME": "/home/user", "PATH": "/bin:/usr/bin"}
    assert get_env_value("PATH", env) == "/bin:/usr/bin"


def test_get_env_value_missing():
    assert get_env_value("PATH", {"HOME": "/home/user"}) is None


def test_get_env_value_matches_prefix_of_entry():
    env = {"PATHEXT": "first", "PATH": "second"}
    assert get_env_value("PATH", env) == "first"


def test_is_executable(tmp_path):
    tool = _make_tool(tmp_path, "tool")
    assert is_executable(tool) is True
    assert is_executable(tmp_path / "absent") is False


def test_resolve_path_searches_in_order(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    first = tmp_path / "first"
    second = tmp_path / "second"
    _make_tool(first, "tool")
    _make_tool(second, "tool")
    found = resolve_path("tool", f"{empty}:{first}:{second}")
    assert found == f"{first}/tool"


def test_resolve_path_skips_non_executable(tmp_path):
    plain = tmp_path / "plain"
    _make_tool(plain, "tool", mode=0o644)
    assert resolve_path("tool", str(plain)) is None


def test_resolve_command_uses_path(tmp_path):
    bindir = tmp_path / "bin"
    _make_tool(bindir, "mytool")
    program, argv = resolve_command("mytool -a  -b", {"PATH": str(bindir)})
    assert program == f"{bindir}/mytool"
    assert argv == ["mytool", "-a", "-b"]


def test_resolve_command_direct_path(tmp_path):
    tool = _make_tool(tmp_path, "direct")
    program, argv = resolve_command(f"{tool} arg", {"PATH": ""})
    assert program == str(tool)
    assert argv == [str(tool), "arg"]


def test_resolve_command_not_found(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command("nosuchtool x", {"PATH": str(tmp_path)})
    assert info.value.subject == "nosuchtool"
    assert info.value.exit_status == 127


def test_resolve_command_without_path_variable():
    with pytest.raises(CommandNotFoundError):
        resolve_command("nosuchtool", {"HOME": os.sep})


def test_resolve_command_empty():
    with pytest.raises(CommandNotFoundError):
        resolve_command("   ", {"PATH": "/bin"})