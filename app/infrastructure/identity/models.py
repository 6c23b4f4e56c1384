"""Recipient user model.

A user owns an ``IdentitySet`` (every way of addressing them) and a set of
delivery preferences keyed by event type and transport key.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.identifiers import Identity, IdentitySet

# event type -> transport key -> wants
Preferences = Dict[str, Dict[str, bool]]


class User(BaseModel):
    """A notification recipient.

    Absence of an explicit preference for an (event type, transport) pair
    means "does not want": there is no implicit opt-in.

    Example:
        user = User(
            key="rufus",
            identities=IdentitySet(Identity.of("username", "rufus")),
            preferences={"com.example.one": {"email": True, "slack": False}},
        )
        user.wants("com.example.one", "email")  # True
        user.wants("com.example.two", "email")  # False
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: str = Field(..., min_length=1, description="Stable key of the user in its store")
    identities: IdentitySet = Field(default_factory=IdentitySet)
    preferences: Preferences = Field(default_factory=dict)

    def wants(self, event_type: str, transport_key: str) -> bool:
        """Check whether the user opted into ``event_type`` via ``transport_key``."""
        return self.preferences.get(event_type, {}).get(transport_key, False)

    def set_preference(self, event_type: str, transport_key: str, wants: bool) -> "User":
        self.preferences.setdefault(event_type, {})[transport_key] = wants
        return self

    def add_identity(self, identity: Identity) -> "User":
        self.identities.merge(IdentitySet(identity))
        return self

    def __str__(self) -> str:
        return self.key
