"""
Base filter interface
"""

from abc import ABC, abstractmethod
from message_logger.core.message import Message


class BaseFilter(ABC):
    """
    Abstract base class for message filters.

    Filters are predicates over a Message; pass one to ``when()`` or
    ``FilteredLogger`` to decide which messages get forwarded.
    """

    @abstractmethod
    def should_log(self, message: Message) -> bool:
        """
        Determine if a message should be logged.

        Args:
            message: The message to filter

        Returns:
            True if the message should be logged, False otherwise
        """
        pass

    def __call__(self, message: Message) -> bool:
        """Allow filters to be used as plain predicates."""
        return self.should_log(message)
