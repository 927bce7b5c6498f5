"""Program configuration assembly."""

from __future__ import annotations

from . import __version__
from .models import ProgramConfig


def load_program_config(version: str | None = None) -> ProgramConfig:
    """Build the program descriptor, defaulting to the installed package version."""
    return ProgramConfig(version=version if version is not None else __version__)
