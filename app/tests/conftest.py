import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.notifications`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

# Importing infrastructure.logging configures structlog; under pytest all
# output is suppressed
from infrastructure.logging import clear_dispatch_context
from infrastructure.services.providers import get_settings, get_slack_client_manager


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Prevent context variables bound in one test from leaking into the next."""
    clear_dispatch_context()
    yield
    clear_dispatch_context()


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached provider singletons between tests."""
    get_settings.cache_clear()
    get_slack_client_manager.cache_clear()
    yield
    get_settings.cache_clear()
    get_slack_client_manager.cache_clear()
