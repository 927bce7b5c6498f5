"""Pytest configuration and fixtures for cli-app tests."""

import logging

import pytest

from cli_app.commands import build_dispatcher
from cli_app.dispatcher import Dispatcher
from cli_app.models import ProgramConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo global logging changes made by setup_logging()."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def config() -> ProgramConfig:
    return ProgramConfig(version="9.8.7")


@pytest.fixture
def dispatcher(config: ProgramConfig) -> Dispatcher:
    return build_dispatcher(config)
