"""Shared pytest fixtures."""

import logging

import pytest
import structlog

from figletctl.utils import logging as figlet_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging after each test."""
    yield
    root_logger = logging.getLogger()
    for handler in figlet_logging._installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    figlet_logging._installed_handlers.clear()
    structlog.reset_defaults()
