"""
Text formatter producing the console line layout

    <timestamp> <SEVERITY_LABEL> <body>
"""

from typing import List

from message_logger.core.message import Message
from message_logger.formatters.base_formatter import BaseFormatter, Segment
from message_logger.formatters.timestamp_formatter import (
    DEFAULT_TIMESTAMP_FORMAT,
    TimestampFormatter,
)

TIMESTAMP = "timestamp"
SEVERITY = "severity"
BODY = "body"


class TextFormatter(BaseFormatter):
    """
    Format messages as timestamp, severity label and rendered body.

    Example:
        formatter = TextFormatter("%H:%M:%S")
        formatter.format(Message.create("Hello {0}", "World"))
        # '13:45:02 INFO Hello World'
    """

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT):
        self.timestamp_formatter = TimestampFormatter(timestamp_format)

    @property
    def timestamp_format(self) -> str:
        return self.timestamp_formatter.pattern

    def segments(self, message: Message) -> List[Segment]:
        return [
            (TIMESTAMP, self.timestamp_formatter.format(message.timestamp)),
            (None, " "),
            (SEVERITY, message.severity.label),
            (None, " "),
            (BODY, message.render()),
        ]

    def __repr__(self) -> str:
        return f"TextFormatter(timestamp_format='{self.timestamp_format}')"
