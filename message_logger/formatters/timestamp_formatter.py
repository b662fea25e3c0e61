"""
Timestamp formatting

strftime with two extra directives:
  %3f  milliseconds (3 digits)
  %K   offset indicator: "Z" for timezone.utc, "+HH:MM" otherwise, "" for naive times
"""

import re
from datetime import datetime, timezone

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%3f%K"

_DIRECTIVE = re.compile(r"%(%|3f|K)")


def _offset_indicator(ts: datetime) -> str:
    offset = ts.utcoffset()
    if offset is None:
        return ""
    if ts.tzinfo is timezone.utc:
        return "Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


class TimestampFormatter:
    """Format datetimes with an extended strftime pattern."""

    def __init__(self, pattern: str = DEFAULT_TIMESTAMP_FORMAT):
        """
        Initialize timestamp formatter.

        Args:
            pattern: strftime pattern, optionally using %3f and %K

        Raises:
            TypeError: If pattern is not a string
            ValueError: If pattern is empty
        """
        if not isinstance(pattern, str):
            raise TypeError("timestamp format must be a string")
        if not pattern:
            raise ValueError("timestamp format must not be empty")
        self.pattern = pattern

    def format(self, ts: datetime) -> str:
        def expand(match):
            directive = match.group(1)
            if directive == "3f":
                return f"{ts.microsecond // 1000:03d}"
            if directive == "K":
                return _offset_indicator(ts)
            return "%%"

        return ts.strftime(_DIRECTIVE.sub(expand, self.pattern))

    def __call__(self, ts: datetime) -> str:
        return self.format(ts)

    def __repr__(self) -> str:
        return f"TimestampFormatter(pattern='{self.pattern}')"
