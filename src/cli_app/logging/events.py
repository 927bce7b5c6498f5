"""Structured event emission and logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from ..errors import LogFileError
from .formatter import StructuredTextFormatter


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def summarize_argv(argv: Sequence[str]) -> str:
    """Return the argument vector as one normalized line for logs."""
    return " ".join(" ".join(str(token).split()) for token in argv)


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event."""
    payload = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(log_file: str | Path | None = None) -> None:
    """Set up logging configuration.

    With a path, records go to that file as structured blocks. Without one,
    logging is disabled so nothing reaches stdout or stderr. Logging stays
    disabled if the file cannot be opened.

    Raises:
        LogFileError: If the log file or its directory cannot be created.
    """
    logging.disable(logging.CRITICAL)
    if not log_file:
        return

    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
    except OSError as exc:
        raise LogFileError(f"Could not open log file: {exc}") from exc

    handler.setFormatter(StructuredTextFormatter())
    logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    logging.disable(logging.NOTSET)
