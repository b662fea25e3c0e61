"""
Logger interface

Every sink and decorator implements this two-method contract.
"""

from abc import ABC, abstractmethod
from typing import Optional

from message_logger.core.cancellation import CancellationSignal
from message_logger.core.message import Message


class Logger(ABC):
    """
    Abstract base class for loggers.

    Sinks (console, null) terminate a chain; decorators (filtered,
    correlated, composite) hold one or more inner loggers and forward to them.
    """

    @abstractmethod
    def log(self, message: Message) -> None:
        """
        Log a message synchronously.

        Args:
            message: The message to log
        """
        pass

    @abstractmethod
    async def log_async(
        self,
        message: Message,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        """
        Log a message asynchronously.

        Args:
            message: The message to log
            cancel: Optional cancellation signal

        Raises:
            asyncio.CancelledError: If cancel is set before a write begins
        """
        pass
