"""Tests for maybe.output.console module."""

from __future__ import annotations

import pytest

from maybe.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.DATA) == "data"
        assert str(Style.ERROR) == "error"
        assert str(Style.DEFAULT) == "default"

    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "DATA", "ERROR", "WARNING", "INFO", "DIM"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_data(self) -> None:
        console = MockConsole()
        console.data('{"a": 1}')
        assert console.with_style(Style.DATA) == ['{"a": 1}']

    def test_error(self) -> None:
        console = MockConsole()
        console.error("bad")
        assert console.messages == ["error: bad"]
        assert console.has_error()

    def test_styled_print_is_not_an_error(self) -> None:
        console = MockConsole()
        console.print("careful", Style.WARNING)
        console.print("note", Style.INFO)
        assert console.text == "careful\nnote"
        assert not console.has_error()

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x", Style.DIM)


class TestRichConsole:
    def test_data_is_printed_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.data("[bold]not markup[/bold]")
        out = capsys.readouterr().out
        assert "[bold]not markup[/bold]" in out

    def test_error_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("broken")
        out = capsys.readouterr().out
        assert "error:" in out
        assert "broken" in out
