"""Notification core models.

A notification is an event of some type addressed to a recipient (an
``IdentitySet``) with a message that can be rendered differently for each
transport. Features build notifications with ``NotificationBuilder``, the
only supported way to create one; transports only read them through the
``Notification`` protocol.

Usage:
    from infrastructure.notifications.models import NotificationBuilder

    notification = (
        NotificationBuilder("com.example.build.failed")
        .with_recipient(Identity.of("email", "rufus@example.com"))
        .with_default_message("Build #42 failed")
        .with_message("slack", ":x: Build *#42* failed")
        .build()
    )

    notification.render("slack")   # ":x: Build *#42* failed"
    notification.render("email")   # "Build #42 failed"
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from infrastructure.identifiers import Identity, IdentitySet

EventType = str
TransportKey = str


@runtime_checkable
class Notification(Protocol):
    """Read-only contract every notification satisfies.

    Transports may probe for richer, transport-specific capabilities with
    ``isinstance`` against additional runtime-checkable protocols (see
    ``SlackRichNotification``).
    """

    @property
    def event_type(self) -> EventType: ...  # pragma: no cover

    @property
    def recipient(self) -> IdentitySet: ...  # pragma: no cover

    def render(self, transport_key: TransportKey) -> str: ...  # pragma: no cover


class NotificationBuilder:
    """Accumulates the parts of a notification and builds an immutable ``Message``.

    Recipients added in several calls are merged; later identities overwrite
    earlier ones sharing a key.

    Example:
        builder = NotificationBuilder("com.example.one")
        builder.with_recipients(user.identities)
        builder.with_recipient(Identity.of("slack.com/id", "U123"))
        notification = builder.with_default_message("hello world").build()
    """

    def __init__(self, event_type: EventType, message_class: Optional[type] = None):
        """
        Args:
            event_type: Event type of the notification
            message_class: ``Message`` subclass to build, for notifications
                that expose extra capabilities (rich payloads, ...)
        """
        self._event_type = event_type
        self._identities = IdentitySet()
        self._default_message = ""
        self._messages: Dict[TransportKey, str] = {}
        self._message_class = message_class or Message
        self._extra: Dict[str, object] = {}

    def with_recipient(self, *identities: Identity) -> "NotificationBuilder":
        self._identities.merge(IdentitySet(*identities))
        return self

    def with_recipients(self, *identity_sets: Optional[IdentitySet]) -> "NotificationBuilder":
        for identity_set in identity_sets:
            self._identities.merge(identity_set)
        return self

    def with_default_message(self, message: str) -> "NotificationBuilder":
        self._default_message = message
        return self

    def with_message(self, transport_key: TransportKey, message: str) -> "NotificationBuilder":
        """Override the message rendered for one transport."""
        self._messages[transport_key] = message
        return self

    def with_fields(self, **fields: object) -> "NotificationBuilder":
        """Set extra fields declared by a custom ``message_class``."""
        self._extra.update(fields)
        return self

    def build(self) -> "Message":
        """Build a notification snapshot; later builder calls do not affect it."""
        return self._message_class(
            event_type=self._event_type,
            identities=self._identities,
            default_message=self._default_message,
            messages=self._messages,
            **self._extra,
        )


class Message(BaseModel):
    """Immutable notification produced by ``NotificationBuilder.build()``.

    Not meant to be constructed directly by features; subclass it and pass
    the subclass as the builder's ``message_class`` to add capabilities.
    The recipient's identities are copied in at construction and only handed
    out as copies through ``recipient``; ``messages`` is a read-only mapping.

    Attributes:
        event_type: Opaque identifier of the kind of occurrence
        default_message: Message used by transports without an override
        messages: Per-transport message overrides keyed by transport key
    """

    model_config = ConfigDict(frozen=True)

    event_type: EventType
    default_message: str = ""
    messages: Mapping[TransportKey, str] = Field(default_factory=dict, validate_default=True)

    _identities: IdentitySet = PrivateAttr(default_factory=IdentitySet)

    def __init__(self, identities: Optional[IdentitySet] = None, **data: Any):
        super().__init__(**data)
        if identities is not None:
            self._identities = identities.copy()

    @field_validator("event_type")
    @classmethod
    def validate_event_type(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("event_type is required")
        return v

    @field_validator("messages")
    @classmethod
    def freeze_messages(cls, v: Mapping[TransportKey, str]) -> Mapping[TransportKey, str]:
        return MappingProxyType(dict(v))

    @property
    def recipient(self) -> IdentitySet:
        """A copy of the recipient's identities; the notification never changes."""
        return self._identities.copy()

    def render(self, transport_key: TransportKey) -> str:
        """Render the message for a transport.

        Returns the transport-specific override if present, else the default
        message, else an empty string.
        """
        if transport_key in self.messages:
            return self.messages[transport_key]
        return self.default_message

    def __str__(self) -> str:
        return f"{self.event_type} -> {self._identities}"
