"""Pytest fixtures for test configuration.

Global test safety measures:
 - Keep M3U__* variables from the developer's environment out of the tests
"""
import os

import pytest
from typing import Dict, Any

from .mocks.fixtures import *  # noqa: F401,F403


def pytest_sessionstart(session):  # type: ignore[no-untyped-def]
    for key in [k for k in os.environ if k.startswith('M3U__')]:
        del os.environ[key]
    os.environ.pop('M3U_ENABLE_DOTENV', None)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests pass it to the CLI via ``CliRunner.invoke(cli, ..., obj=cfg)``
    instead of setting environment variables.
    """
    return {
        'log_level': 'DEBUG',
        'reader': {
            'encoding': 'utf-8',
            'errors': 'strict',
        },
        'output': {
            'format': 'text',
            'lenient': False,
        },
    }
