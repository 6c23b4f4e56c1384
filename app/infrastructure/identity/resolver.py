"""Recipient resolution.

The dispatcher resolves the recipient of a notification by handing the
notification's identities to a ``UserStore``. How identities are matched
(any vs all) is the store's decision.
"""

from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, Optional

from infrastructure.identifiers import IdentitySet
from infrastructure.identity.models import User
from infrastructure.logging import get_module_logger
from infrastructure.operations.errors import RecipientNotFoundError

logger = get_module_logger()


class UserStore(ABC):
    """Source of notification recipients."""

    @abstractmethod
    def find(self, identities: IdentitySet) -> User:
        """Find the user addressed by ``identities``.

        Raises:
            RecipientNotFoundError: If no stored user matches
        """
        pass


class InMemoryUserStore(UserStore):
    """User store backed by a dict, matching on any shared identity.

    A user matches when at least one of the requested identities has the same
    key and value as one of the user's identities. When several users match,
    the first one added wins.

    Example:
        store = InMemoryUserStore(rufus, mabel)
        user = store.find(IdentitySet(Identity.of("email", "rufus@example.com")))
    """

    def __init__(self, *users: User):
        self._users: Dict[str, User] = {}
        self._lock = Lock()
        self._logger = logger.bind(store="in_memory")
        for user in users:
            self.add(user)

    def add(self, user: User) -> None:
        """Add or replace a user (keyed by ``user.key``)."""
        with self._lock:
            self._users[user.key] = user

    def get(self, key: str) -> Optional[User]:
        with self._lock:
            return self._users.get(key)

    def find(self, identities: IdentitySet) -> User:
        wanted = {(i.key, i.value) for i in identities.to_list()}

        with self._lock:
            users = list(self._users.values())

        for user in users:
            if wanted & {(i.key, i.value) for i in user.identities.to_list()}:
                self._logger.debug("user_found", user=user.key)
                return user

        raise RecipientNotFoundError(f"no user matches identities {identities}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
