"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Keep syn loggers quiet during tests."""
    os.environ['SYN_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # The launcher warns on analyzer retries, which several tests trigger on purpose
    logging.getLogger('syn.launch.launcher').setLevel(logging.ERROR)
