"""Basic tests for message logger"""

import pytest
import uuid
from datetime import datetime, timezone

from message_logger import Message, MessageSeverity, NIL_ID
from message_logger.core.severity import SEVERITY_LABELS


class TestMessageSeverity:
    """Test message severity functionality."""

    def test_severity_ranks(self):
        assert MessageSeverity.NONE < MessageSeverity.DEBUG
        assert MessageSeverity.DEBUG < MessageSeverity.INFORMATIONAL
        assert MessageSeverity.INFORMATIONAL < MessageSeverity.WARNING
        assert MessageSeverity.WARNING < MessageSeverity.ERROR

    def test_labels(self):
        assert MessageSeverity.INFORMATIONAL.label == "INFO"
        assert MessageSeverity.WARNING.label == "WARNING"
        assert MessageSeverity.ERROR.label == "ERROR"
        assert set(SEVERITY_LABELS) == set(MessageSeverity)

    def test_from_string(self):
        assert MessageSeverity.from_string("DEBUG") == MessageSeverity.DEBUG
        assert MessageSeverity.from_string("warning") == MessageSeverity.WARNING
        assert MessageSeverity.from_string("info") == MessageSeverity.INFORMATIONAL
        assert MessageSeverity.from_string("Informational") == MessageSeverity.INFORMATIONAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            MessageSeverity.from_string("fatal")


class TestMessage:
    """Test message structure."""

    def test_create_message(self):
        message = Message.create("Hello {0}", "World")
        assert message.severity == MessageSeverity.INFORMATIONAL
        assert message.format == "Hello {0}"
        assert message.values == ("World",)
        assert message.correlated_id == NIL_ID
        assert isinstance(message.id, uuid.UUID)
        assert message.timestamp.tzinfo is not None

    def test_render(self):
        message = Message.create("Hello {0}", "World")
        assert message.render() == "Hello World"
        assert str(message) == "Hello World"

    def test_render_multiple_values(self):
        message = Message.create("{1} before {0}", "b", "a", severity=MessageSeverity.ERROR)
        assert message.render() == "a before b"
        assert message.severity == MessageSeverity.ERROR

    def test_from_text(self):
        message = Message.from_text("plain text")
        assert message.values == ()
        assert message.render() == "plain text"

    def test_ids_are_unique(self):
        first = Message.create("same")
        second = Message.create("same")
        assert first.id != second.id
        assert first != second

    def test_format_none_rejected(self):
        with pytest.raises(TypeError):
            Message.create(None)

    def test_severity_type_checked(self):
        with pytest.raises(TypeError):
            Message(severity="ERROR", format="x")

    def test_values_coerced_to_tuple(self):
        message = Message(severity=MessageSeverity.DEBUG, format="{0}{1}", values=[1, 2])
        assert message.values == (1, 2)

    def test_clone_equals_original(self):
        message = Message.create("x {0}", [1, 2])
        clone = message.clone()
        assert clone == message
        assert clone is not message
        assert clone.values is message.values

    def test_clone_with_changes_only_given_field(self):
        message = Message.create("x {0}", 1)
        correlated_id = uuid.uuid4()
        stamped = message.clone_with(correlated_id=correlated_id)

        assert stamped.correlated_id == correlated_id
        assert message.correlated_id == NIL_ID
        assert stamped.id == message.id
        assert stamped.timestamp == message.timestamp
        assert stamped != message

    def test_equality_compares_values_elementwise(self):
        message = Message.create("x {0}", 1)
        other = message.clone_with(values=(2,))
        assert other != message
        assert message.clone_with(values=[1]) == message

    def test_to_dict(self):
        timestamp = datetime(2024, 1, 5, 13, 45, 2, 123000, tzinfo=timezone.utc)
        message = Message(
            severity=MessageSeverity.WARNING,
            format="disk {0}",
            values=("full",),
            timestamp=timestamp,
        )
        data = message.to_dict()
        assert data["severity"] == "WARNING"
        assert data["format"] == "disk {0}"
        assert data["values"] == ["full"]
        assert data["id"] == str(message.id)
        assert data["correlated_id"] == str(NIL_ID)
        assert Message.from_dict(data) == message

    def test_fields_are_read_only(self):
        message = Message.create("x {0}", 1)
        original_id = message.id

        with pytest.raises(AttributeError):
            message.id = uuid.uuid4()
        with pytest.raises(AttributeError):
            message.format = None
        with pytest.raises(AttributeError):
            message.values = (2,)
        with pytest.raises(AttributeError):
            message.severity = MessageSeverity.ERROR
        with pytest.raises(AttributeError):
            message.timestamp = datetime.now()

        assert message.id == original_id
        assert message.render() == "x 1"

    def test_correlated_id_is_writable(self):
        message = Message.create("x")
        correlated_id = uuid.uuid4()
        message.correlated_id = correlated_id
        assert message.correlated_id == correlated_id

    def test_hashable_by_id(self):
        message = Message.create("x")
        clone = message.clone()
        assert hash(message) == hash(clone)
        assert len({message, clone, Message.create("x")}) == 2
