"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from message_logger.core.message import Message

# (role, text); role is None for plain separators
Segment = Tuple[Optional[str], str]


class BaseFormatter(ABC):
    """
    Abstract base class for message formatters.

    Formatters split a Message into ordered, role-tagged segments so that
    a sink can decorate each part (e.g. color it) before writing.
    """

    @abstractmethod
    def segments(self, message: Message) -> List[Segment]:
        """
        Split a message into display segments.

        Args:
            message: The message to format

        Returns:
            Ordered list of (role, text) pairs
        """
        pass

    def format(self, message: Message) -> str:
        """Render the message as one plain line, without terminator."""
        return "".join(text for _, text in self.segments(message))

    def __call__(self, message: Message) -> str:
        """Allow formatters to be callable."""
        return self.format(message)
