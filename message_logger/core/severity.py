"""
Message severity enumeration
"""

from enum import IntEnum
from typing import Dict


class MessageSeverity(IntEnum):
    """
    Severity of a logged message.

    Ranked so that severities can be compared (``DEBUG < ERROR``).
    Values line up with Python's logging module.
    """

    NONE = 0
    DEBUG = 10
    INFORMATIONAL = 20
    WARNING = 30
    ERROR = 40

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        """Label printed by the console logger."""
        return SEVERITY_LABELS[self]

    @classmethod
    def from_string(cls, value: str) -> "MessageSeverity":
        """
        Convert a name or a label to MessageSeverity.

        Args:
            value: Severity name or label (case-insensitive), e.g. "warning" or "INFO"

        Returns:
            MessageSeverity enum value

        Raises:
            ValueError: If value names no severity
        """
        key = value.upper()
        if key in cls.__members__:
            return cls[key]
        if key in SEVERITY_FROM_LABEL:
            return SEVERITY_FROM_LABEL[key]
        raise ValueError(f"Invalid message severity: {value}")

    @property
    def label_color(self) -> str:
        """Default ANSI color for the severity label."""
        colors = {
            MessageSeverity.DEBUG: "\033[37m",          # Gray
            MessageSeverity.INFORMATIONAL: "\033[97m",  # White
            MessageSeverity.WARNING: "\033[93m",        # Yellow
            MessageSeverity.ERROR: "\033[91m",          # Red
        }
        return colors.get(self, "")

    @property
    def message_color(self) -> str:
        """Default ANSI color for the message body."""
        colors = {
            MessageSeverity.DEBUG: "\033[90m",          # Dark gray
            MessageSeverity.INFORMATIONAL: "\033[37m",  # Gray
            MessageSeverity.WARNING: "\033[33m",        # Dark yellow
            MessageSeverity.ERROR: "\033[31m",          # Dark red
        }
        return colors.get(self, "")


RESET_COLOR = "\033[0m"
TIMESTAMP_COLOR = "\033[96m"  # Cyan

SEVERITY_LABELS: Dict[MessageSeverity, str] = {
    MessageSeverity.NONE: "NONE",
    MessageSeverity.DEBUG: "DEBUG",
    MessageSeverity.INFORMATIONAL: "INFO",
    MessageSeverity.WARNING: "WARNING",
    MessageSeverity.ERROR: "ERROR",
}

SEVERITY_FROM_LABEL: Dict[str, MessageSeverity] = {v: k for k, v in SEVERITY_LABELS.items()}
