"""Descriptors and result types for cli-app."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .constants import (
    APP_DESCRIPTION,
    APP_NAME,
    DEFAULT_VALUE_NAME,
    EXIT_FAILURE,
    EXIT_OK,
    HELP_COMMAND,
    HELP_FLAGS,
    UNKNOWN_ERROR_MESSAGE,
    UNKNOWN_VERSION,
    VERSION_FLAGS,
)


class ValueKind(StrEnum):
    FLAG = "flag"
    STRING = "string"
    INTEGER = "integer"


class DispatchStatus(StrEnum):
    HELP_SHOWN = "help_shown"
    VERSION_SHOWN = "version_shown"
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    HANDLER_ERROR = "handler_error"


class ProgramConfig(BaseModel):
    """Program-level identity handed to the dispatcher at construction."""

    model_config = ConfigDict(frozen=True)

    name: str = APP_NAME
    description: str = APP_DESCRIPTION
    version: str = UNKNOWN_VERSION
    help_flags: tuple[str, ...] = HELP_FLAGS
    version_flags: tuple[str, ...] = VERSION_FLAGS
    help_command: str = HELP_COMMAND

    @field_validator("name", "version", "help_command")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("help_flags", "version_flags")
    @classmethod
    def _flags_look_like_options(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one flag is required")
        for flag in value:
            if not flag.startswith("-") or flag == "-":
                raise ValueError(f"'{flag}' is not an option flag")
        return value

    @model_validator(mode="after")
    def _flag_sets_disjoint(self) -> ProgramConfig:
        shared = set(self.help_flags) & set(self.version_flags)
        if shared:
            raise ValueError(f"flags used for both help and version: {sorted(shared)}")
        return self


@dataclass(frozen=True)
class ArgumentSpec:
    name: str
    description: str = ""
    required: bool = True
    variadic: bool = False

    @property
    def usage(self) -> str:
        label = f"{self.name}..." if self.variadic else self.name
        return f"<{label}>" if self.required else f"[{label}]"


@dataclass(frozen=True)
class OptionSpec:
    flags: tuple[str, ...]
    description: str = ""
    kind: ValueKind = ValueKind.FLAG
    default: Any = None
    value_name: str = DEFAULT_VALUE_NAME

    @property
    def takes_value(self) -> bool:
        return self.kind is not ValueKind.FLAG

    @property
    def long_flag(self) -> str:
        for flag in self.flags:
            if flag.startswith("--"):
                return flag
        return self.flags[-1]

    @property
    def attribute(self) -> str:
        """Key under which the parsed value is stored (``--dry-run`` -> ``dry_run``)."""
        return self.long_flag.lstrip("-").replace("-", "_")

    @property
    def usage(self) -> str:
        flags = ", ".join(self.flags)
        if self.takes_value:
            return f"{flags} <{self.value_name}>"
        return flags

    def initial_value(self) -> Any:
        if self.kind is ValueKind.FLAG:
            return bool(self.default)
        return self.default


@dataclass(frozen=True)
class Invocation:
    command: str
    arguments: Mapping[str, Any] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)


Handler = Callable[[Invocation], str]


@dataclass(frozen=True)
class CommandSpec:
    name: str
    description: str
    handler: Handler
    arguments: tuple[ArgumentSpec, ...] = ()
    options: tuple[OptionSpec, ...] = ()

    @property
    def usage(self) -> str:
        parts = [self.name]
        if self.options:
            parts.append("[options]")
        parts.extend(argument.usage for argument in self.arguments)
        return " ".join(parts)


@dataclass(frozen=True)
class DispatchResult:
    status: DispatchStatus
    output: str | None = None
    error: BaseException | None = None

    @property
    def exit_code(self) -> int:
        if self.status in (DispatchStatus.VALIDATION_ERROR, DispatchStatus.HANDLER_ERROR):
            return EXIT_FAILURE
        return EXIT_OK

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        # Exceptions raised without arguments carry no usable message.
        return str(self.error) or UNKNOWN_ERROR_MESSAGE
