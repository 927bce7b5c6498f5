"""Tests for the built-in greet and echo subcommands."""

import pytest

from cli_app.commands import BUILTIN_COMMANDS, build_dispatcher, format_greeting
from cli_app.dispatcher import Dispatcher
from cli_app.models import DispatchStatus, ProgramConfig


def test_format_greeting() -> None:
    assert format_greeting("world") == "Hello, world!"
    assert format_greeting("TypeScript") == "Hello, TypeScript!"


def test_format_greeting_empty_name() -> None:
    assert format_greeting("") == "Hello, !"


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["greet", "world"], "Hello, world!"),
        (["greet", "TypeScript", "-u"], "HELLO, TYPESCRIPT!"),
        (["greet", "--uppercase", "TypeScript"], "HELLO, TYPESCRIPT!"),
        (["greet", ""], "Hello, !"),
        (["greet", "Ada Lovelace"], "Hello, Ada Lovelace!"),
        (["echo", "a", "b", "c"], "a b c"),
        (["echo", "MiXeD", "Case"], "MiXeD Case"),
        (["echo", "single"], "single"),
        (["echo", "-", "x"], "- x"),
    ],
)
def test_builtin_output(dispatcher: Dispatcher, argv: list[str], expected: str) -> None:
    result = dispatcher.dispatch(argv)

    assert result.status == DispatchStatus.SUCCESS
    assert result.exit_code == 0
    assert result.output == expected


def test_uppercase_applies_to_whole_greeting(dispatcher: Dispatcher) -> None:
    result = dispatcher.dispatch(["greet", "ß", "-u"])
    assert result.output == "Hello, ß!".upper()


def test_echo_does_not_parse_text_after_end_of_options(dispatcher: Dispatcher) -> None:
    result = dispatcher.dispatch(["echo", "--", "-u", "--uppercase"])
    assert result.output == "-u --uppercase"


def test_echo_rejects_unknown_flag(dispatcher: Dispatcher) -> None:
    result = dispatcher.dispatch(["echo", "a", "-u"])
    assert result.status == DispatchStatus.VALIDATION_ERROR


def test_greet_rejects_extra_names(dispatcher: Dispatcher) -> None:
    result = dispatcher.dispatch(["greet", "a", "b"])
    assert result.status == DispatchStatus.VALIDATION_ERROR
    assert "too many arguments for 'greet'" in result.error_message


def test_build_dispatcher_registers_builtins() -> None:
    dispatcher = build_dispatcher(ProgramConfig())
    assert tuple(dispatcher.commands.values()) == BUILTIN_COMMANDS
