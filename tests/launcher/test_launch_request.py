"""Tests for LaunchRequest goto tokens and argument strings."""

from __future__ import annotations

import shlex
from pathlib import PurePosixPath

import pytest

from cursorlaunch.launcher.request import GOTO_FLAG, LaunchRequest, format_arguments


class TestGotoToken:
    """Position suffixes follow the ``path:line:column`` convention."""

    def test_path_only(self) -> None:
        assert LaunchRequest("/src/a.cs").goto_token() == "/src/a.cs"

    def test_line_only(self) -> None:
        token = LaunchRequest("/src/a.cs", line=12).goto_token()
        assert token == "/src/a.cs:12"

    def test_line_and_column(self) -> None:
        token = LaunchRequest("/src/a.cs", line=12, column=4).goto_token()
        assert token.endswith(":12:4")

    def test_column_without_line_ignored(self) -> None:
        assert LaunchRequest("/src/a.cs", column=4).goto_token() == "/src/a.cs"

    def test_accepts_path_objects(self) -> None:
        token = LaunchRequest(PurePosixPath("/src/a.cs"), line=1).goto_token()
        assert token == "/src/a.cs:1"

    @pytest.mark.parametrize("line, column", [(0, None), (-1, None), (3, 0)])
    def test_non_positive_rejected(self, line: int, column: int | None) -> None:
        with pytest.raises(ValueError):
            LaunchRequest("/a", line=line, column=column)


class TestArgv:
    """Arguments stay a list so no path character is reinterpreted."""

    def test_plain_path(self) -> None:
        assert LaunchRequest("/my project/a.cs").argv() == ["/my project/a.cs"]

    def test_goto_flag_with_line(self) -> None:
        assert LaunchRequest("/src/a.cs", line=7).argv() == [GOTO_FLAG, "/src/a.cs:7"]

    def test_goto_flag_with_line_and_column(self) -> None:
        assert LaunchRequest("/src/a.cs", line=7, column=3).argv() == ["-g", "/src/a.cs:7:3"]

    def test_quote_and_backslash_kept(self) -> None:
        argv = LaunchRequest('/src/say "hi"\\x.cs', line=3).argv()
        assert argv == ["-g", '/src/say "hi"\\x.cs:3']


class TestArguments:
    """The single-string rendering of ``argv``."""

    def test_posix_plain_path(self) -> None:
        assert LaunchRequest("/src/a.cs").arguments(system="Linux") == "/src/a.cs"

    def test_posix_path_with_space_is_quoted(self) -> None:
        args = LaunchRequest("/my project/a.cs").arguments(system="Linux")
        assert args == "'/my project/a.cs'"

    def test_posix_goto(self) -> None:
        args = LaunchRequest("/src/a.cs", line=7, column=3).arguments(system="Linux")
        assert args == "-g /src/a.cs:7:3"

    def test_posix_round_trips_through_shell_split(self) -> None:
        request = LaunchRequest('/src/say "hi" \\ it\'s.cs', line=3)
        assert shlex.split(request.arguments(system="Linux")) == request.argv()

    def test_windows_quotes_spaces(self) -> None:
        args = LaunchRequest(r"C:\my project\a.cs").arguments(system="Windows")
        assert args == '"C:\\my project\\a.cs"'

    def test_windows_escapes_embedded_quote(self) -> None:
        assert format_arguments(['a "b"'], system="Windows") == '"a \\"b\\""'
