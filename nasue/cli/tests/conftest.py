"""Shared fixtures for CLI tests."""

import logging
from collections.abc import Iterator

import pytest

from nasue.configs.options import OptionTable, create_option_table
from nasue.utils import logging_config


@pytest.fixture
def option_table() -> OptionTable:
    """Provide a fresh, unresolved option table."""
    return create_option_table()


@pytest.fixture(autouse=True)
def reset_process_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep process logging and defaults-file settings from leaking between tests."""
    monkeypatch.delenv("NAS_DEFAULTS_FILE", raising=False)
    monkeypatch.delenv("NAS_LOG_FILE", raising=False)
    yield
    logger = logging.getLogger("nasue")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logging_config._loggers.pop("nasue", None)
