"""
Severity-based filter

Filters messages based on a severity range
"""

from typing import Optional
from message_logger.core.message import Message
from message_logger.core.severity import MessageSeverity
from message_logger.filters.base_filter import BaseFilter


class SeverityFilter(BaseFilter):
    """
    Filter messages based on severity.

    Allows filtering by minimum and/or maximum severity.
    """

    def __init__(
        self,
        min_severity: Optional[MessageSeverity] = None,
        max_severity: Optional[MessageSeverity] = None
    ):
        """
        Initialize severity filter.

        Args:
            min_severity: Minimum severity (inclusive). If None, no minimum.
            max_severity: Maximum severity (inclusive). If None, no maximum.

        Example:
            # Only log WARNING and above
            filter = SeverityFilter(min_severity=MessageSeverity.WARNING)

            # Only log DEBUG to INFORMATIONAL
            filter = SeverityFilter(
                min_severity=MessageSeverity.DEBUG,
                max_severity=MessageSeverity.INFORMATIONAL,
            )
        """
        if (min_severity is not None and max_severity is not None
                and min_severity > max_severity):
            raise ValueError("min_severity cannot exceed max_severity")

        self.min_severity = min_severity
        self.max_severity = max_severity

    def should_log(self, message: Message) -> bool:
        if self.min_severity is not None and message.severity < self.min_severity:
            return False

        if self.max_severity is not None and message.severity > self.max_severity:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"SeverityFilter(min={self.min_severity}, max={self.max_severity})"
