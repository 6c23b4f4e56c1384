"""Recipient users and their resolution.

Usage:
    from infrastructure.identity import InMemoryUserStore, User

    store = InMemoryUserStore(User(key="rufus", identities=identities))
    user = store.find(notification.recipient)
"""

from infrastructure.identity.models import Preferences, User
from infrastructure.identity.resolver import InMemoryUserStore, UserStore

__all__ = ["User", "Preferences", "UserStore", "InMemoryUserStore"]
