"""Usage text rendering for the program and its subcommands.

Every section of one help screen shares a single description column.
"""

from __future__ import annotations

from collections.abc import Iterable

from .constants import HELP_COLUMN_GAP, HELP_COMMAND_DESCRIPTION, HELP_INDENT
from .models import CommandSpec, OptionSpec, ProgramConfig

_HELP_OPTION_DESCRIPTION = "Display help information"
_COMMAND_HELP_OPTION_DESCRIPTION = "Display help for command"
_VERSION_OPTION_DESCRIPTION = "Output the version number"

Rows = list[tuple[str, str]]


def render_program_help(config: ProgramConfig, commands: Iterable[CommandSpec]) -> str:
    """Render usage for the whole program, commands in registration order."""
    option_rows = [
        (", ".join(config.version_flags), _VERSION_OPTION_DESCRIPTION),
        (", ".join(config.help_flags), _HELP_OPTION_DESCRIPTION),
    ]
    command_rows = [(spec.usage, spec.description) for spec in commands]
    command_rows.append((f"{config.help_command} [command]", HELP_COMMAND_DESCRIPTION))

    header = [f"Usage: {config.name} [options] [command]", "", config.description]
    return _render_screen(header, [("Options:", option_rows), ("Commands:", command_rows)])


def render_command_help(config: ProgramConfig, spec: CommandSpec) -> str:
    """Render usage for a single subcommand."""
    sections: list[tuple[str, Rows]] = []
    if spec.arguments:
        sections.append(
            ("Arguments:", [(argument.name, argument.description) for argument in spec.arguments])
        )

    option_rows = [(option.usage, _describe_option(option)) for option in spec.options]
    option_rows.append((", ".join(config.help_flags), _COMMAND_HELP_OPTION_DESCRIPTION))
    sections.append(("Options:", option_rows))

    header = [f"Usage: {config.name} {spec.usage}", "", spec.description]
    return _render_screen(header, sections)


def _describe_option(option: OptionSpec) -> str:
    if option.takes_value and option.default is not None:
        return f"{option.description} (default: {option.default})"
    return option.description


def _render_screen(header: list[str], sections: list[tuple[str, Rows]]) -> str:
    width = max(len(term) for _, rows in sections for term, _ in rows) + HELP_COLUMN_GAP

    lines = list(header)
    for title, rows in sections:
        lines.append("")
        lines.append(title)
        for term, description in rows:
            lines.append(f"{HELP_INDENT}{term.ljust(width)}{description}".rstrip())
    return "\n".join(lines)
