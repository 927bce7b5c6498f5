"""Centralized constants for cli-app."""

from __future__ import annotations

# Program identity
APP_NAME = "cli-app"
APP_DESCRIPTION = "A CLI application with greet and echo subcommands"
DISTRIBUTION_NAME = "cli-app"
UNKNOWN_VERSION = "0.0.0+unknown"

# Global flags
HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-V", "--version")
HELP_COMMAND = "help"
HELP_COMMAND_DESCRIPTION = "Display help for command"
ARG_LOG = "--log"
END_OF_OPTIONS = "--"
OPTION_VALUE_SEPARATOR = "="
DEFAULT_VALUE_NAME = "value"

# Output
ERROR_PREFIX = "Error: "
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"
HELP_INDENT = "  "
HELP_COLUMN_GAP = 2

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1

# Suggestions for mistyped command names
SUGGESTION_CUTOFF = 0.6
