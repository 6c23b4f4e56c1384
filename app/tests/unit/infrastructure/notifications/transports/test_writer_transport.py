"""Unit tests for WriterTransport."""

import io

import pytest

from infrastructure.identifiers import Identity
from infrastructure.notifications.transports import Transport, Validator, WriterTransport
from infrastructure.operations import PushCancelledError


@pytest.mark.unit
class TestWriterTransport:
    def test_is_transport_without_validation(self):
        transport = WriterTransport("writer", stream=io.StringIO())

        assert isinstance(transport, Transport)
        assert not isinstance(transport, Validator)
        assert transport.key == "writer"
        assert repr(transport) == "WriterTransport(key='writer')"

    def test_writes_one_line(self, notification_factory, background_context):
        stream = io.StringIO()
        transport = WriterTransport("writer", stream=stream)
        notification = notification_factory(
            event_type="com.example.one",
            identities=[Identity.of("username", "rufus")],
            default_message="hello world",
        )

        transport.push(notification, background_context)

        assert stream.getvalue() == (
            "notification: type=com.example.one, to=[username:rufus], "
            "message=hello world\n"
        )

    def test_renders_message_for_own_key(self, notification_factory, background_context):
        stream = io.StringIO()
        transport = WriterTransport("writer", stream=stream)
        notification = notification_factory(messages={"writer": "plain text"})

        transport.push(notification, background_context)

        assert stream.getvalue().endswith("message=plain text\n")

    def test_defaults_to_stdout(self, capsys, notification_factory, background_context):
        WriterTransport("writer").push(notification_factory(), background_context)

        assert capsys.readouterr().out.startswith("notification: type=com.example.one")

    def test_cancelled_context_writes_nothing(
        self, notification_factory, cancelled_context
    ):
        stream = io.StringIO()

        with pytest.raises(PushCancelledError):
            WriterTransport("writer", stream=stream).push(
                notification_factory(), cancelled_context
            )

        assert stream.getvalue() == ""

    def test_write_failure_propagates(self, notification_factory, background_context):
        stream = io.StringIO()
        stream.close()

        with pytest.raises(ValueError):
            WriterTransport("writer", stream=stream).push(
                notification_factory(), background_context
            )
