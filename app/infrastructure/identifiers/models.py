"""Namespaced identifier models.

A recipient can be addressed in many external systems at once (an email
address, a chat user ID, a username in some internal directory). Each of
those addresses is an ``Identity``: a ``NamespacedKey`` describing what kind
of address it is, plus the address value itself.

Keys serialize as ``namespace/kind`` or just ``kind`` when the namespace is
empty:

    email                -> ("", "email")
    slack.com/id         -> ("slack.com", "id")
    gitlab.com/username  -> ("gitlab.com", "username")

Usage:
    from infrastructure.identifiers import Identity, IdentitySet

    identities = IdentitySet(
        Identity.of("email", "rufus@example.com"),
        Identity.of("slack.com/id", "U1234567"),
    )
    identities.get("slack.com/id")  # "U1234567"
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

SEPARATOR = "/"

KIND_EMAIL = "email"
KIND_USERNAME = "username"
KIND_ID = "id"


@dataclass(frozen=True)
class NamespacedKey:
    """Address type identifier composed of an optional namespace and a kind.

    Construction fails fast with ``ValueError`` when ``kind`` is empty or when
    ``namespace`` contains the separator, since neither would survive a
    serialize/parse round trip.

    Attributes:
        namespace: Owning system, e.g. "slack.com" (may be empty)
        kind: Address kind, e.g. "email" or "id" (required)
    """

    namespace: str
    kind: str

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("kind is required")
        if SEPARATOR in self.namespace:
            raise ValueError(
                f"namespace must not contain '{SEPARATOR}': {self.namespace!r}"
            )

    @classmethod
    def of(cls, namespace: str, kind: str) -> "NamespacedKey":
        """Create a key from a namespace (possibly empty) and a kind."""
        return cls(namespace=namespace, kind=kind)

    @classmethod
    def parse(cls, value: Union["NamespacedKey", str]) -> "NamespacedKey":
        """Parse ``namespace/kind`` or bare ``kind``.

        Splits on the first separator only, so ``a.com/b/c`` parses to
        ``("a.com", "b/c")``. Already-typed keys are returned unchanged.
        """
        if isinstance(value, NamespacedKey):
            return value
        namespace, sep, kind = value.partition(SEPARATOR)
        if not sep:
            return cls(namespace="", kind=namespace)
        return cls(namespace=namespace, kind=kind)

    def split(self) -> Tuple[str, str]:
        return self.namespace, self.kind

    def __str__(self) -> str:
        if not self.namespace:
            return self.kind
        return f"{self.namespace}{SEPARATOR}{self.kind}"


KeyLike = Union[NamespacedKey, str]

GENERIC_EMAIL = NamespacedKey.of("", KIND_EMAIL)
GENERIC_USERNAME = NamespacedKey.of("", KIND_USERNAME)
GENERIC_ID = NamespacedKey.of("", KIND_ID)


def _normalize_value(value: Union[str, int]) -> str:
    # bool is an int subclass but never a meaningful address
    if isinstance(value, bool):
        raise TypeError("identity value must be a str or int, not bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(
        f"identity value must be a str or int, not {type(value).__name__}"
    )


@dataclass(frozen=True)
class Identity:
    """One way to address a recipient in some external system.

    Attributes:
        key: What kind of address this is
        value: The address, always stored as a string
    """

    key: NamespacedKey
    value: str

    @classmethod
    def of(cls, key: KeyLike, value: Union[str, int]) -> "Identity":
        """Create an identity from a key (or ``namespace/kind`` string) and a value.

        Integer values are rendered in base 10 with no grouping:

            Identity.of("gitlab.com/id", 123456).value == "123456"
        """
        return cls(key=NamespacedKey.parse(key), value=_normalize_value(value))

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"


def new_identity(key: KeyLike, value: Union[str, int]) -> Identity:
    return Identity.of(key, value)


class IdentitySet:
    """Unique-keyed, unordered collection of identities for one recipient.

    At most one value is kept per key; later writes win.

    Example:
        identities = IdentitySet(
            Identity.of("username", "rufus"),
            Identity.of("email", "rufus@example.com"),
        )
        identities.merge(IdentitySet(Identity.of("email", "new@example.com")))
        identities.get("email")  # "new@example.com"
    """

    def __init__(self, *identities: Identity):
        self._values: Dict[NamespacedKey, str] = {}
        for identity in identities:
            self._values[identity.key] = identity.value

    @classmethod
    def from_list(cls, identities: Iterable[Identity]) -> "IdentitySet":
        return cls(*identities)

    def get(self, key: KeyLike, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(NamespacedKey.parse(key), default)

    def set(self, key: KeyLike, value: Union[str, int]) -> None:
        identity = Identity.of(key, value)
        self._values[identity.key] = identity.value

    def merge(self, other: Optional["IdentitySet"]) -> "IdentitySet":
        """Merge ``other`` into this set in place.

        Every key present in ``other`` overwrites ours; keys absent from
        ``other`` are untouched. ``None`` or an empty set is a no-op.

        Returns:
            This set, to allow chaining
        """
        if other:
            self._values.update(other._values)
        return self

    def to_list(self) -> List[Identity]:
        """Return an unordered snapshot of the identities in this set."""
        return [Identity(key=key, value=value) for key, value in self._values.items()]

    def copy(self) -> "IdentitySet":
        return IdentitySet.from_list(self.to_list())

    def keys(self) -> List[NamespacedKey]:
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (NamespacedKey, str)):
            return False
        return NamespacedKey.parse(key) in self._values

    def __iter__(self) -> Iterator[NamespacedKey]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentitySet):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"IdentitySet({', '.join(repr(i) for i in self.to_list())})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self.to_list()) + "]"


def merge_identities(
    base: Optional[IdentitySet], other: Optional[IdentitySet]
) -> IdentitySet:
    """Merge two possibly-absent identity sets.

    Unlike ``IdentitySet.merge`` this tolerates an absent receiver: merging
    into ``None`` yields a set equal to ``other`` (a new set, so ``other`` is
    never aliased), and merging two absent sets yields an empty set.
    """
    if base is None:
        base = IdentitySet()
    return base.merge(other)
