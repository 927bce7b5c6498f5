"""Built-in subcommands and catalog wiring."""

from __future__ import annotations

from .dispatcher import Dispatcher
from .models import ArgumentSpec, CommandSpec, Invocation, OptionSpec, ProgramConfig


def format_greeting(name: str) -> str:
    """Return the greeting line for ``name``."""
    return f"Hello, {name}!"


def _exec_greet(invocation: Invocation) -> str:
    greeting = format_greeting(invocation.arguments["name"])
    if invocation.options.get("uppercase"):
        greeting = greeting.upper()
    return greeting


def _exec_echo(invocation: Invocation) -> str:
    return " ".join(invocation.arguments["text"])


GREET_COMMAND = CommandSpec(
    name="greet",
    description="Greet a person by name",
    handler=_exec_greet,
    arguments=(ArgumentSpec("name", "Name of the person to greet"),),
    options=(OptionSpec(("-u", "--uppercase"), "Output the greeting in uppercase"),),
)

ECHO_COMMAND = CommandSpec(
    name="echo",
    description="Echo back the provided text",
    handler=_exec_echo,
    arguments=(ArgumentSpec("text", "Text to echo back", variadic=True),),
)

BUILTIN_COMMANDS = (GREET_COMMAND, ECHO_COMMAND)


def build_dispatcher(config: ProgramConfig) -> Dispatcher:
    """Create a dispatcher with every built-in subcommand registered."""
    dispatcher = Dispatcher(config)
    for spec in BUILTIN_COMMANDS:
        dispatcher.register(spec)
    return dispatcher
