"""Shared pytest fixtures."""

import logging
import pytest


@pytest.fixture(autouse=True)
def reset_consensus_logger():
    """Drop handlers bound to a captured stream after each test."""
    yield
    logger = logging.getLogger('consensus')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
