"""Cooperative cancellation for the asynchronous logging path"""

import asyncio
from typing import Optional, Protocol


class CancellationSignal(Protocol):
    """Anything that can report whether cancellation was requested.

    ``asyncio.Event`` and ``threading.Event`` both qualify.
    """

    def is_set(self) -> bool:
        ...


def raise_if_cancelled(cancel: Optional[CancellationSignal]) -> None:
    """
    Fail the current operation if cancellation was requested.

    Args:
        cancel: Cancellation signal, or None for "never cancelled"

    Raises:
        asyncio.CancelledError: If the signal is set
    """
    if cancel is not None and cancel.is_set():
        raise asyncio.CancelledError("logging operation was cancelled")
