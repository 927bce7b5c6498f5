"""Subcommand catalog and argument vector dispatch."""

from __future__ import annotations

import difflib
import logging
import time
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .constants import SUGGESTION_CUTOFF
from .errors import ConfigurationError, UnknownCommandError, UnknownOptionError, UsageError
from .help import render_command_help, render_program_help
from .logging import log_event, summarize_argv
from .models import CommandSpec, DispatchResult, DispatchStatus, ProgramConfig
from .parser import looks_like_option, parse_invocation, requests_help


class Dispatcher:
    """Owns the subcommand catalog and turns one argument vector into one result.

    The catalog is filled through ``register`` before the first dispatch and is
    not modified afterwards. ``dispatch`` never raises for problems with the
    argument vector or the handler; those come back as a ``DispatchResult``.
    """

    def __init__(self, config: ProgramConfig) -> None:
        self._config = config
        self._commands: dict[str, CommandSpec] = {}

    @property
    def config(self) -> ProgramConfig:
        return self._config

    @property
    def commands(self) -> Mapping[str, CommandSpec]:
        return MappingProxyType(self._commands)

    def register(self, spec: CommandSpec) -> None:
        """Add a subcommand to the catalog.

        Raises:
            ConfigurationError: If the name is taken or reserved, or the
                descriptor's arguments or options are malformed.
        """
        if not spec.name or looks_like_option(spec.name):
            raise ConfigurationError(f"Invalid command name: '{spec.name}'.")
        if spec.name == self._config.help_command:
            raise ConfigurationError(f"Command name '{spec.name}' is reserved.")
        if spec.name in self._commands:
            raise ConfigurationError(f"Command '{spec.name}' is already registered.")

        _validate_arguments(spec)
        _validate_options(spec, self._config)
        self._commands[spec.name] = spec

    def dispatch(self, argv: Sequence[str]) -> DispatchResult:
        """Resolve argv to help, version, or one handler call."""
        started = time.perf_counter()
        command = argv[0] if argv else None
        log_event("dispatch_start", command=command, argv=summarize_argv(argv))

        result = self._dispatch(list(argv))

        if result.error is not None:
            log_event(
                "dispatch_error",
                level=logging.WARNING,
                command=command,
                status=result.status.value,
                error_type=type(result.error).__name__,
                error=result.error_message,
            )
        log_event(
            "dispatch_end",
            command=command,
            status=result.status.value,
            exit_code=result.exit_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return result

    def _dispatch(self, argv: list[str]) -> DispatchResult:
        if not argv or argv[0] in self._config.help_flags:
            return self._program_help()

        first, rest = argv[0], argv[1:]

        if first in self._config.version_flags:
            return DispatchResult(DispatchStatus.VERSION_SHOWN, output=self._config.version)

        if first == self._config.help_command:
            return self._help_for(rest)

        spec = self._commands.get(first)
        if spec is None:
            if looks_like_option(first):
                return _validation_failure(UnknownOptionError(first))
            return _validation_failure(UnknownCommandError(first, self._suggest(first)))

        if requests_help(rest, self._config.help_flags):
            return DispatchResult(
                DispatchStatus.HELP_SHOWN, output=render_command_help(self._config, spec)
            )

        try:
            invocation = parse_invocation(spec, rest)
        except UsageError as exc:
            return _validation_failure(exc)

        try:
            output = spec.handler(invocation)
        except Exception as exc:  # noqa: BLE001
            return DispatchResult(DispatchStatus.HANDLER_ERROR, error=exc)

        return DispatchResult(DispatchStatus.SUCCESS, output=output)

    def _help_for(self, targets: list[str]) -> DispatchResult:
        if not targets:
            return self._program_help()

        spec = self._commands.get(targets[0])
        if spec is None:
            # Unrecognized targets fall back to the general overview.
            log_event("help_target_unknown", level=logging.WARNING, target=targets[0])
            return self._program_help()

        return DispatchResult(
            DispatchStatus.HELP_SHOWN, output=render_command_help(self._config, spec)
        )

    def _program_help(self) -> DispatchResult:
        return DispatchResult(
            DispatchStatus.HELP_SHOWN,
            output=render_program_help(self._config, self._commands.values()),
        )

    def _suggest(self, name: str) -> str | None:
        candidates = [*self._commands, self._config.help_command]
        matches = difflib.get_close_matches(name, candidates, n=1, cutoff=SUGGESTION_CUTOFF)
        return matches[0] if matches else None


def _validation_failure(error: UsageError) -> DispatchResult:
    return DispatchResult(DispatchStatus.VALIDATION_ERROR, error=error)


def _validate_arguments(spec: CommandSpec) -> None:
    seen: set[str] = set()
    optional_seen = False
    for index, argument in enumerate(spec.arguments):
        if argument.name in seen:
            raise ConfigurationError(
                f"Command '{spec.name}' declares argument '{argument.name}' twice."
            )
        seen.add(argument.name)

        if argument.variadic and index != len(spec.arguments) - 1:
            raise ConfigurationError(
                f"Command '{spec.name}': variadic argument '{argument.name}' must be last."
            )
        if argument.required and optional_seen:
            raise ConfigurationError(
                f"Command '{spec.name}': required argument '{argument.name}' "
                "cannot follow an optional argument."
            )
        optional_seen = optional_seen or not argument.required


def _validate_options(spec: CommandSpec, config: ProgramConfig) -> None:
    seen_flags: set[str] = set()
    seen_attributes: set[str] = set()
    for option in spec.options:
        if not option.flags:
            raise ConfigurationError(f"Command '{spec.name}' declares an option without flags.")
        for flag in option.flags:
            if not looks_like_option(flag):
                raise ConfigurationError(
                    f"Command '{spec.name}': '{flag}' is not an option flag."
                )
            if flag in config.help_flags:
                raise ConfigurationError(
                    f"Command '{spec.name}': flag '{flag}' is reserved for help."
                )
            if flag in seen_flags:
                raise ConfigurationError(
                    f"Command '{spec.name}' declares flag '{flag}' twice."
                )
            seen_flags.add(flag)

        if option.attribute in seen_attributes:
            raise ConfigurationError(
                f"Command '{spec.name}' declares option '{option.attribute}' twice."
            )
        seen_attributes.add(option.attribute)
