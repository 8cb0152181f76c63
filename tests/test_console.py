"""Tests for the stdio console adapter."""

import io

import pytest

from nutrition_calculator.adapters.console import StdioConsole


def _console(text: str) -> StdioConsole:
    return StdioConsole(
        stdin=io.StringIO(text), stdout=io.StringIO(), stderr=io.StringIO()
    )


def test_ask_writes_prompt_and_strips_newline() -> None:
    console = _console("250 5 30\r\n")

    answer = console.ask("Enter: ")

    assert answer == "250 5 30"
    assert console.stdout.getvalue() == "Enter: "


def test_ask_keeps_inner_spaces() -> None:
    console = _console("1  2 \n")

    assert console.ask("> ") == "1  2 "


def test_ask_raises_at_end_of_input() -> None:
    console = _console("")

    with pytest.raises(EOFError):
        console.ask("> ")


def test_write_and_error_use_separate_streams() -> None:
    console = _console("")

    console.write("report")
    console.error("problem")

    assert console.stdout.getvalue() == "report\n"
    assert console.stderr.getvalue() == "problem\n"


def test_close_is_idempotent() -> None:
    console = _console("")

    console.close()
    console.close()

    assert console.closed is True
