"""
Composite logger

Fans each message out to several loggers.
"""

import asyncio
from typing import Iterable, List, Optional, Tuple

from message_logger.core.cancellation import CancellationSignal
from message_logger.core.logger import Logger
from message_logger.core.message import Message


class CompositeLogError(Exception):
    """Raised when more than one child of a CompositeLogger failed."""

    def __init__(self, errors: List[BaseException]):
        self.errors = list(errors)
        summary = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} loggers failed: {summary}")


class CompositeLogger(Logger):
    """
    Forward every message to each of several loggers.

    The synchronous path calls the loggers in order and stops at the first
    error. The asynchronous path runs all loggers concurrently and waits
    for every one of them before reporting failures.
    """

    def __init__(self, *loggers: Logger):
        """
        Initialize composite logger.

        Args:
            *loggers: Loggers to fan out to, in delivery order

        Example:
            logger = CompositeLogger(ConsoleLogger(), audit_logger)
        """
        if any(logger is None for logger in loggers):
            raise TypeError("loggers must not contain None")
        self._loggers: Tuple[Logger, ...] = tuple(loggers)

    @classmethod
    def from_iterable(cls, loggers: Iterable[Logger]) -> "CompositeLogger":
        """Build a composite from any iterable of loggers."""
        return cls(*loggers)

    @property
    def loggers(self) -> Tuple[Logger, ...]:
        return self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def log(self, message: Message) -> None:
        for logger in self._loggers:
            logger.log(message)

    async def log_async(
        self,
        message: Message,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        results = await asyncio.gather(
            *(logger.log_async(message, cancel) for logger in self._loggers),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if not failures:
            return

        errors = [f for f in failures if not isinstance(f, asyncio.CancelledError)]
        if not errors:
            raise failures[0]
        if len(errors) == 1:
            raise errors[0]
        raise CompositeLogError(errors) from errors[0]

    def __repr__(self) -> str:
        return f"CompositeLogger(loggers={list(self._loggers)!r})"
