"""Tests for message filters"""

import pytest
import re

from message_logger import Message, MessageSeverity
from message_logger.filters import CallbackFilter, PatternFilter, SeverityFilter


def make(severity, text="text"):
    return Message.create(text, severity=severity)


class TestSeverityFilter:
    """Test severity range filtering."""

    def test_min_severity(self):
        f = SeverityFilter(min_severity=MessageSeverity.WARNING)
        assert f(make(MessageSeverity.ERROR)) is True
        assert f(make(MessageSeverity.WARNING)) is True
        assert f(make(MessageSeverity.INFORMATIONAL)) is False

    def test_range(self):
        f = SeverityFilter(MessageSeverity.DEBUG, MessageSeverity.INFORMATIONAL)
        assert f.should_log(make(MessageSeverity.DEBUG))
        assert not f.should_log(make(MessageSeverity.WARNING))
        assert not f.should_log(make(MessageSeverity.NONE))

    def test_no_bounds(self):
        assert SeverityFilter().should_log(make(MessageSeverity.NONE))

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            SeverityFilter(MessageSeverity.ERROR, MessageSeverity.DEBUG)


class TestPatternFilter:
    """Test regex filtering on rendered text."""

    def test_matches_rendered_text(self):
        f = PatternFilter(r"user 42")
        assert f(Message.create("user {0} logged in", 42))
        assert not f(Message.create("user {0} logged in", 7))

    def test_exclude(self):
        f = PatternFilter(r"heartbeat", exclude=True)
        assert not f(Message.create("heartbeat ok"))
        assert f(Message.create("request served"))

    def test_case_insensitive(self):
        f = PatternFilter("error", case_sensitive=False)
        assert f(Message.create("ERROR in module"))

    def test_compiled_pattern(self):
        f = PatternFilter(re.compile(r"^\d+$"))
        assert f(Message.create("{0}", 123))
        assert "include" in repr(f)


class TestCallbackFilter:
    """Test callback filtering."""

    def test_callback(self):
        f = CallbackFilter(lambda m: m.values == (1,))
        assert f(Message.create("{0}", 1))
        assert not f(Message.create("{0}", 2))

    def test_callback_errors_propagate(self):
        def broken(message):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            CallbackFilter(broken)(Message.create("x"))

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            CallbackFilter("nope")
