"""
Correlating decorator

Stamps a correlation id on every message before forwarding it.
"""

from typing import Callable, Optional
import uuid

from message_logger.core.cancellation import CancellationSignal
from message_logger.core.logger import Logger
from message_logger.core.message import Message


class CorrelatedLogger(Logger):
    """
    Forward a clone of each message carrying a computed correlation id.

    The caller's message is never modified.
    """

    def __init__(self, logger: Logger, id_generator: Callable[[Message], uuid.UUID]):
        """
        Initialize correlated logger.

        Args:
            logger: Logger receiving the stamped clones
            id_generator: Function mapping an incoming message to its correlation id
        """
        if logger is None:
            raise TypeError("logger must not be None")
        if not callable(id_generator):
            raise TypeError("id_generator must be callable")

        self.logger = logger
        self.id_generator = id_generator

    @classmethod
    def with_id(cls, logger: Logger, correlated_id: uuid.UUID) -> "CorrelatedLogger":
        """Stamp every message with the same id."""
        if not isinstance(correlated_id, uuid.UUID):
            raise TypeError("correlated_id must be a UUID")
        return cls(logger, lambda message: correlated_id)

    @classmethod
    def with_message(cls, logger: Logger, correlated_message: Message) -> "CorrelatedLogger":
        """Stamp every message with the id of another message."""
        if correlated_message is None:
            raise TypeError("correlated_message must not be None")
        return cls(logger, lambda message: correlated_message.id)

    def _stamp(self, message: Message) -> Message:
        correlated_id = self.id_generator(message)
        return message.clone_with(correlated_id=correlated_id)

    def log(self, message: Message) -> None:
        self.logger.log(self._stamp(message))

    async def log_async(
        self,
        message: Message,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        await self.logger.log_async(self._stamp(message), cancel)

    def __repr__(self) -> str:
        return f"CorrelatedLogger(logger={self.logger!r})"
