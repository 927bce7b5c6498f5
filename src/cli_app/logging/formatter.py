"""Render log records as ``=== event ===`` blocks."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER


def _decode_payload(record: logging.LogRecord) -> dict[str, Any]:
    """Return the JSON payload written by log_event, or wrap a plain message."""
    message = record.getMessage()
    try:
        payload = json.loads(message)
    except json.JSONDecodeError:
        payload = None
    if isinstance(payload, dict):
        return payload
    return {"event": record.name, "message": message}


def _one_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


class StructuredTextFormatter(logging.Formatter):
    """One block per record; blocks after the first start with a blank line."""

    def __init__(self) -> None:
        super().__init__()
        self._separator = ""

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = {
            "ts_utc": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
        }
        fields.update(_decode_payload(record))
        event = str(fields.pop("event", record.name))

        preferred = EVENT_KEY_ORDER.get(event, DEFAULT_EVENT_KEY_ORDER)
        present = {key: value for key, value in fields.items() if value is not None}
        keys = [key for key in preferred if key in present]
        keys += sorted(key for key in present if key not in preferred)

        lines = [f"=== {event} ==="]
        lines += [f"{key}: {_one_line(present[key])}" for key in keys]
        if record.exc_info:
            lines += ["traceback:", self.formatException(record.exc_info)]

        block = self._separator + "\n".join(lines)
        self._separator = "\n"
        return block
