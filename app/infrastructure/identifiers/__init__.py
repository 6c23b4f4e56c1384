"""Namespaced identifiers for addressing recipients across systems.

Usage:
    from infrastructure.identifiers import Identity, IdentitySet, NamespacedKey

    slack_id = NamespacedKey.of("slack.com", "id")
    identities = IdentitySet(
        Identity.of("email", "rufus@example.com"),
        Identity.of(slack_id, "U1234567"),
    )
"""

from infrastructure.identifiers.models import (
    GENERIC_EMAIL,
    GENERIC_ID,
    GENERIC_USERNAME,
    KIND_EMAIL,
    KIND_ID,
    KIND_USERNAME,
    SEPARATOR,
    Identity,
    IdentitySet,
    KeyLike,
    NamespacedKey,
    merge_identities,
    new_identity,
)

__all__ = [
    "NamespacedKey",
    "Identity",
    "IdentitySet",
    "KeyLike",
    "new_identity",
    "merge_identities",
    "SEPARATOR",
    "KIND_EMAIL",
    "KIND_USERNAME",
    "KIND_ID",
    "GENERIC_EMAIL",
    "GENERIC_USERNAME",
    "GENERIC_ID",
]
