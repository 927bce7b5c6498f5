"""CLI entry and startup wiring."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from .commands import build_dispatcher
from .config import load_program_config
from .constants import (
    ARG_LOG,
    ERROR_PREFIX,
    EXIT_FAILURE,
    OPTION_VALUE_SEPARATOR,
    UNKNOWN_ERROR_MESSAGE,
)
from .errors import CliAppError, MissingOptionValueError
from .logging import log_event, setup_logging


def run(argv: Sequence[str] | None = None) -> int:
    """Run one dispatch and return the process exit code.

    This is the single boundary that writes to stdout/stderr. Errors raised
    while building the catalog are reported the same way as dispatch errors.
    """
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        log_file, dispatch_args = _split_log_option(args)
        setup_logging(log_file)

        config = load_program_config()
        log_event("app_start", program=config.name, version=config.version, log_file=log_file)

        dispatcher = build_dispatcher(config)
        result = dispatcher.dispatch(dispatch_args)
    except CliAppError as exc:
        _print_error(str(exc))
        return EXIT_FAILURE
    except Exception as exc:  # noqa: BLE001
        logging.exception("Unexpected startup failure")
        _print_error(str(exc))
        return EXIT_FAILURE

    if result.output is not None:
        print(result.output)
    if result.error_message is not None:
        _print_error(result.error_message)
    return result.exit_code


def main() -> None:
    """Application entry point."""
    sys.exit(run())


def _split_log_option(args: list[str]) -> tuple[str | None, list[str]]:
    """Strip leading ``--log <path>`` options; the last one wins."""
    log_file: str | None = None
    i = 0
    while i < len(args):
        token = args[i]
        if token == ARG_LOG:
            if i + 1 >= len(args):
                raise MissingOptionValueError(f"{ARG_LOG} <path>")
            log_file = args[i + 1]
            i += 2
        elif token.startswith(ARG_LOG + OPTION_VALUE_SEPARATOR):
            log_file = token[len(ARG_LOG) + 1:]
            if not log_file:
                raise MissingOptionValueError(f"{ARG_LOG} <path>")
            i += 1
        else:
            break
    return log_file, args[i:]


def _print_error(message: str) -> None:
    print(f"{ERROR_PREFIX}{message or UNKNOWN_ERROR_MESSAGE}", file=sys.stderr)
