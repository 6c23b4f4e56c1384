"""Fixtures for infrastructure.logging tests."""

import pytest
from unittest.mock import Mock, patch

from infrastructure.configuration import Settings
from infrastructure.logging.setup import configure_logging


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.ENVIRONMENT = "development"
    settings.is_production = False
    return settings


@pytest.fixture
def outside_tests():
    """Run configure_logging as it would outside pytest, then silence it again."""
    with patch("infrastructure.logging.setup._is_test_environment", return_value=False):
        yield
    configure_logging()
