"""Tests for message formatters"""

import pytest
from datetime import datetime, timedelta, timezone

from message_logger import Message, MessageSeverity
from message_logger.formatters import TextFormatter, TimestampFormatter, DEFAULT_TIMESTAMP_FORMAT

TIMESTAMP = datetime(2024, 1, 5, 13, 45, 2, 123456, tzinfo=timezone.utc)


class TestTimestampFormatter:
    """Test timestamp formatting."""

    def test_default_format_utc(self):
        formatter = TimestampFormatter()
        assert formatter.pattern == DEFAULT_TIMESTAMP_FORMAT
        assert formatter.format(TIMESTAMP) == "2024-01-05 13:45:02.123Z"

    def test_positive_offset(self):
        ts = TIMESTAMP.replace(tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert TimestampFormatter()(ts) == "2024-01-05 13:45:02.123+05:30"

    def test_negative_offset(self):
        ts = TIMESTAMP.replace(tzinfo=timezone(timedelta(hours=-3)))
        assert TimestampFormatter("%H:%M%K").format(ts) == "13:45-03:00"

    def test_zero_offset_local_zone_is_not_utc(self):
        ts = TIMESTAMP.replace(tzinfo=timezone(timedelta(0), "UTC"))
        assert TimestampFormatter().format(ts) == "2024-01-05 13:45:02.123+00:00"

    def test_naive_timestamp_has_no_offset(self):
        ts = TIMESTAMP.replace(tzinfo=None)
        assert TimestampFormatter().format(ts) == "2024-01-05 13:45:02.123"

    def test_escaped_percent(self):
        assert TimestampFormatter("%%K %K").format(TIMESTAMP) == "%K Z"

    def test_invalid_pattern(self):
        with pytest.raises(ValueError):
            TimestampFormatter("")
        with pytest.raises(TypeError):
            TimestampFormatter(None)


class TestTextFormatter:
    """Test console line layout."""

    def test_format_error_message(self):
        message = Message(
            severity=MessageSeverity.ERROR,
            format="Hello {0}",
            values=("World",),
            timestamp=TIMESTAMP,
        )
        assert TextFormatter().format(message) == "2024-01-05 13:45:02.123Z ERROR Hello World"

    def test_informational_label(self):
        message = Message(severity=MessageSeverity.INFORMATIONAL, format="ready", timestamp=TIMESTAMP)
        assert TextFormatter("%H:%M:%S")(message) == "13:45:02 INFO ready"

    def test_segments(self):
        message = Message(severity=MessageSeverity.DEBUG, format="x", timestamp=TIMESTAMP)
        segments = TextFormatter("%Y").segments(message)
        assert segments == [
            ("timestamp", "2024"),
            (None, " "),
            ("severity", "DEBUG"),
            (None, " "),
            ("body", "x"),
        ]
