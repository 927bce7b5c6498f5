"""Custom exception types for cli-app."""

from __future__ import annotations


class CliAppError(Exception):
    """Base class for all cli-app errors."""


class ConfigurationError(CliAppError):
    """Raised when the command catalog is built incorrectly."""


class UsageError(CliAppError):
    """Base class for argument vector validation failures."""


class UnknownCommandError(UsageError):
    def __init__(self, name: str, suggestion: str | None = None) -> None:
        self.name = name
        message = f"unknown command '{name}'"
        if suggestion:
            message += f" (did you mean {suggestion}?)"
        super().__init__(message)


class UnknownOptionError(UsageError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"unknown option '{flag}'")


class MissingArgumentError(UsageError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"missing required argument '{name}'")


class TooManyArgumentsError(UsageError):
    def __init__(self, command: str, expected: int, received: int) -> None:
        noun = "argument" if expected == 1 else "arguments"
        super().__init__(
            f"too many arguments for '{command}'. "
            f"Expected {expected} {noun} but got {received}."
        )


class MissingOptionValueError(UsageError):
    def __init__(self, usage: str) -> None:
        super().__init__(f"option '{usage}' argument missing")


class InvalidOptionValueError(UsageError):
    def __init__(self, usage: str, value: str) -> None:
        super().__init__(f"option '{usage}' argument '{value}' is invalid")


class HandlerError(CliAppError):
    """Raised by subcommand logic when it cannot produce output."""


class LogFileError(CliAppError):
    """Raised when the --log destination cannot be opened."""
