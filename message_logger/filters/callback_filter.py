"""
Callback-based filter

Filters messages using custom callback functions
"""

from typing import Callable
from message_logger.core.message import Message
from message_logger.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter messages using a custom callback function.

    Errors raised by the callback propagate to the caller.
    """

    def __init__(self, callback: Callable[[Message], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes a Message and returns bool.
                     Should return True to log the message, False to discard it.

        Example:
            # Only messages belonging to a request
            def correlated(message):
                return message.correlated_id != NIL_ID

            filter = CallbackFilter(correlated)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, message: Message) -> bool:
        return bool(self.callback(message))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
