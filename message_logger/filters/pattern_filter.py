"""
Pattern-based filter using regular expressions

Filters messages based on their rendered text
"""

import re
from typing import Union, Pattern
from message_logger.core.message import Message
from message_logger.filters.base_filter import BaseFilter


class PatternFilter(BaseFilter):
    """
    Filter messages based on regex pattern matching.

    The pattern is searched in the rendered text (format with values applied).
    Can be configured to include or exclude matching messages.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, exclude matching messages. If False, include only matching messages.
            case_sensitive: Whether pattern matching is case-sensitive

        Example:
            # Drop health-check noise
            filter = PatternFilter(r"GET /health", exclude=True)
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude

    def should_log(self, message: Message) -> bool:
        matches = self.pattern.search(message.render()) is not None
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode})"
