"""Logger that discards every message"""

from typing import Optional

from message_logger.core.cancellation import CancellationSignal
from message_logger.core.logger import Logger
from message_logger.core.message import Message


class NullLogger(Logger):
    """Discard all messages. Useful as a chain terminator or a default."""

    def log(self, message: Message) -> None:
        pass

    async def log_async(
        self,
        message: Message,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        pass

    def __repr__(self) -> str:
        return "NullLogger()"
