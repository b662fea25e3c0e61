"""
Filtering decorator

Forwards only the messages a predicate accepts.
"""

from typing import Callable, Optional

from message_logger.core.cancellation import CancellationSignal
from message_logger.core.logger import Logger
from message_logger.core.message import Message


class FilteredLogger(Logger):
    """
    Forward messages to an inner logger when a predicate returns True.

    Errors raised by the predicate propagate to the caller.
    """

    def __init__(self, logger: Logger, condition: Callable[[Message], bool]):
        """
        Initialize filtered logger.

        Args:
            logger: Logger receiving accepted messages
            condition: Predicate deciding whether a message is forwarded

        Example:
            # Only forward warnings and errors
            logger = FilteredLogger(console, lambda m: m.severity >= MessageSeverity.WARNING)
        """
        if logger is None:
            raise TypeError("logger must not be None")
        if not callable(condition):
            raise TypeError("condition must be callable")

        self.logger = logger
        self.condition = condition

    def log(self, message: Message) -> None:
        if self.condition(message):
            self.logger.log(message)

    async def log_async(
        self,
        message: Message,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        if self.condition(message):
            await self.logger.log_async(message, cancel)

    def __repr__(self) -> str:
        condition_name = getattr(self.condition, "__name__", repr(self.condition))
        return f"FilteredLogger(logger={self.logger!r}, condition={condition_name})"
