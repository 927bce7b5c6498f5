"""Preferred field ordering for structured log events."""

from __future__ import annotations

DEFAULT_EVENT_KEY_ORDER = ("ts_utc", "ts", "level", "logger", "message")

EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
    "app_start": ("ts_utc", "ts", "level", "program", "version", "log_file"),
    "dispatch_start": ("ts_utc", "ts", "level", "command", "argv"),
    "dispatch_end": ("ts_utc", "ts", "level", "command", "status", "exit_code", "elapsed_ms"),
    "dispatch_error": ("ts_utc", "ts", "level", "command", "status", "error_type", "error"),
    "help_target_unknown": ("ts_utc", "ts", "level", "target"),
}
