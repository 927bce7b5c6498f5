"""Argument parsing for one subcommand's tokens."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .constants import END_OF_OPTIONS, OPTION_VALUE_SEPARATOR
from .errors import (
    InvalidOptionValueError,
    MissingArgumentError,
    MissingOptionValueError,
    TooManyArgumentsError,
    UnknownOptionError,
)
from .models import CommandSpec, Invocation, OptionSpec, ValueKind


def looks_like_option(token: str) -> bool:
    # A lone "-" is conventionally a positional (stdin placeholder).
    return token.startswith("-") and token != "-"


def requests_help(tokens: Sequence[str], help_flags: Sequence[str]) -> bool:
    """Return True if a help flag appears before the end-of-options marker."""
    for token in tokens:
        if token == END_OF_OPTIONS:
            return False
        if token in help_flags:
            return True
    return False


def parse_invocation(spec: CommandSpec, tokens: Sequence[str]) -> Invocation:
    """Resolve tokens following the subcommand name into an Invocation.

    Options may be interleaved with positionals. ``--`` ends option parsing
    and every later token is positional. Long value options also accept the
    ``--flag=value`` form.

    Raises:
        UnknownOptionError: For a flag the subcommand does not declare.
        MissingOptionValueError: When a value option is last on the line.
        InvalidOptionValueError: When a value cannot be converted.
        MissingArgumentError: When a required positional is absent.
        TooManyArgumentsError: When positionals remain and nothing is variadic.
    """
    options_by_flag = {flag: option for option in spec.options for flag in option.flags}
    option_values = {option.attribute: option.initial_value() for option in spec.options}
    positionals: list[str] = []

    i = 0
    options_done = False
    while i < len(tokens):
        token = tokens[i]

        if options_done or not looks_like_option(token):
            positionals.append(token)
            i += 1
            continue

        if token == END_OF_OPTIONS:
            options_done = True
            i += 1
            continue

        flag, separator, inline_value = token, "", ""
        if token.startswith("--"):
            flag, separator, inline_value = token.partition(OPTION_VALUE_SEPARATOR)

        option = options_by_flag.get(flag)
        if option is None:
            raise UnknownOptionError(flag)

        if not option.takes_value:
            if separator:
                raise InvalidOptionValueError(option.usage, inline_value)
            option_values[option.attribute] = True
            i += 1
            continue

        if separator:
            raw_value = inline_value
            i += 1
        else:
            if i + 1 >= len(tokens):
                raise MissingOptionValueError(option.usage)
            raw_value = tokens[i + 1]
            i += 2

        option_values[option.attribute] = _convert_value(option, raw_value)

    arguments = _bind_positionals(spec, positionals)
    return Invocation(command=spec.name, arguments=arguments, options=option_values)


def _bind_positionals(spec: CommandSpec, positionals: list[str]) -> dict[str, Any]:
    bound: dict[str, Any] = {}
    remaining = list(positionals)

    for argument in spec.arguments:
        if argument.variadic:
            if not remaining and argument.required:
                raise MissingArgumentError(argument.name)
            bound[argument.name] = tuple(remaining)
            remaining = []
        elif remaining:
            bound[argument.name] = remaining.pop(0)
        elif argument.required:
            raise MissingArgumentError(argument.name)
        else:
            bound[argument.name] = None

    if remaining:
        raise TooManyArgumentsError(spec.name, len(spec.arguments), len(positionals))

    return bound


def _convert_value(option: OptionSpec, raw: str) -> Any:
    if option.kind is ValueKind.INTEGER:
        try:
            return int(raw)
        except ValueError:
            raise InvalidOptionValueError(option.usage, raw) from None
    return raw
