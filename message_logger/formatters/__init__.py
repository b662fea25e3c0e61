"""Formatters module - Message rendering for sinks"""

from message_logger.formatters.base_formatter import BaseFormatter
from message_logger.formatters.text_formatter import TextFormatter
from message_logger.formatters.timestamp_formatter import (
    DEFAULT_TIMESTAMP_FORMAT,
    TimestampFormatter,
)

__all__ = ["BaseFormatter", "TextFormatter", "TimestampFormatter", "DEFAULT_TIMESTAMP_FORMAT"]
