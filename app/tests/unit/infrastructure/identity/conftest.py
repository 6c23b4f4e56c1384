"""Fixtures for infrastructure.identity tests."""

import pytest

from infrastructure.identifiers import Identity
from infrastructure.identity import InMemoryUserStore
from tests.factories import make_user


@pytest.fixture
def rufus():
    return make_user(
        key="rufus",
        identities=[
            Identity.of("username", "rufus"),
            Identity.of("email", "rufus@example.com"),
            Identity.of("gitlab.com/id", 1001),
        ],
        preferences={"com.example.one": {"email": True, "slack": False}},
    )


@pytest.fixture
def mabel():
    return make_user(
        key="mabel",
        identities=[
            Identity.of("username", "mabel"),
            Identity.of("email", "mabel@example.com"),
        ],
    )


@pytest.fixture
def user_store(rufus, mabel):
    """In-memory store holding rufus then mabel."""
    return InMemoryUserStore(rufus, mabel)
