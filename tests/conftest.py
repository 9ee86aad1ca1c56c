from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

import lib_cli_exit_tools
import pytest
from rich.console import Console

from arg_reporter import config
from arg_reporter.logging_setup import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _isolate_ambient_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep dotenv, traceback and logger state from leaking between tests."""

    for name in (config.DOTENV_ENV_VAR, config.LOG_LEVEL_ENV_VAR, config.TRACEBACK_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    config._reset_dotenv_state_for_testing()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    try:
        yield
    finally:
        config._reset_dotenv_state_for_testing()
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        for handler in handlers:
            package_logger.addHandler(handler)
        package_logger.setLevel(level)
        package_logger.propagate = propagate


@pytest.fixture
def record_console() -> Console:
    """Return a recording Rich console that never touches the real terminal."""

    return Console(file=StringIO(), record=True, width=120, color_system=None)
