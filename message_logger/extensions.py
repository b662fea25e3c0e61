"""
Convenience functions over the Logger contract

Build a Message from a severity, a format and its values, and hand it to
a logger:

    from message_logger import extensions as ext

    ext.info(logger, "Listening on {0}:{1}", host, port)
    await ext.warn_async(logger, "Retrying {0}", url, cancel=stop_event)
    ext.when(logger, SeverityFilter(MessageSeverity.WARNING))
"""

import traceback
from typing import Any, Callable, Iterator, Optional, Union
import uuid

from message_logger.core.cancellation import CancellationSignal
from message_logger.core.logger import Logger
from message_logger.core.message import Message
from message_logger.core.severity import MessageSeverity
from message_logger.loggers.correlated_logger import CorrelatedLogger
from message_logger.loggers.filtered_logger import FilteredLogger

CorrelationTarget = Union[uuid.UUID, Message, Callable[[Message], uuid.UUID]]


def _build(logger: Logger, severity: MessageSeverity, format: str, values: tuple) -> Message:
    if logger is None:
        raise TypeError("logger must not be None")
    if format is None:
        raise TypeError("format must not be None")
    return Message(severity=severity, format=format, values=values)


def log(logger: Logger, severity: MessageSeverity, format: str, *values: Any) -> None:
    """
    Log a message with the given severity.

    Args:
        logger: Target logger
        severity: Message severity
        format: Template with positional placeholders
        *values: Substitution values

    Raises:
        TypeError: If logger or format is None
    """
    message = _build(logger, severity, format, values)
    logger.log(message)


async def log_async(
    logger: Logger,
    severity: MessageSeverity,
    format: str,
    *values: Any,
    cancel: Optional[CancellationSignal] = None,
) -> None:
    """
    Log a message with the given severity asynchronously.

    Args:
        logger: Target logger
        severity: Message severity
        format: Template with positional placeholders
        *values: Substitution values
        cancel: Optional cancellation signal

    Raises:
        TypeError: If logger or format is None
        asyncio.CancelledError: If cancel is set before a write begins
    """
    message = _build(logger, severity, format, values)
    await logger.log_async(message, cancel)


def debug(logger: Logger, format: str, *values: Any) -> None:
    """Log a debug message."""
    log(logger, MessageSeverity.DEBUG, format, *values)


async def debug_async(
    logger: Logger, format: str, *values: Any, cancel: Optional[CancellationSignal] = None
) -> None:
    """Log a debug message asynchronously."""
    await log_async(logger, MessageSeverity.DEBUG, format, *values, cancel=cancel)


def info(logger: Logger, format: str, *values: Any) -> None:
    """Log an informational message."""
    log(logger, MessageSeverity.INFORMATIONAL, format, *values)


async def info_async(
    logger: Logger, format: str, *values: Any, cancel: Optional[CancellationSignal] = None
) -> None:
    """Log an informational message asynchronously."""
    await log_async(logger, MessageSeverity.INFORMATIONAL, format, *values, cancel=cancel)


def warn(logger: Logger, format: str, *values: Any) -> None:
    """Log a warning message."""
    log(logger, MessageSeverity.WARNING, format, *values)


async def warn_async(
    logger: Logger, format: str, *values: Any, cancel: Optional[CancellationSignal] = None
) -> None:
    """Log a warning message asynchronously."""
    await log_async(logger, MessageSeverity.WARNING, format, *values, cancel=cancel)


def error(logger: Logger, format: str, *values: Any) -> None:
    """Log an error message."""
    log(logger, MessageSeverity.ERROR, format, *values)


async def error_async(
    logger: Logger, format: str, *values: Any, cancel: Optional[CancellationSignal] = None
) -> None:
    """Log an error message asynchronously."""
    await log_async(logger, MessageSeverity.ERROR, format, *values, cancel=cancel)


def _exception_chain(exception: BaseException) -> Iterator[BaseException]:
    seen = set()
    current: Optional[BaseException] = exception
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def _exception_text(exception: BaseException) -> str:
    text = "".join(traceback.format_exception_only(type(exception), exception)).rstrip()
    if exception.__traceback__ is not None:
        stack = "".join(traceback.format_tb(exception.__traceback__)).rstrip()
        if stack:
            text += "\n" + stack
    return text


def log_exception(logger: Logger, exception: BaseException) -> None:
    """
    Log an exception and each exception in its cause chain.

    Every link becomes its own ERROR message holding the exception text and
    its traceback, outermost first.

    Raises:
        TypeError: If logger or exception is None
    """
    if exception is None:
        raise TypeError("exception must not be None")

    for link in _exception_chain(exception):
        error(logger, "{0}", _exception_text(link))


async def log_exception_async(
    logger: Logger,
    exception: BaseException,
    cancel: Optional[CancellationSignal] = None,
) -> None:
    """Asynchronous form of log_exception; messages are logged one after another."""
    if exception is None:
        raise TypeError("exception must not be None")

    for link in _exception_chain(exception):
        await error_async(logger, "{0}", _exception_text(link), cancel=cancel)


def when(logger: Logger, condition: Callable[[Message], bool]) -> Logger:
    """
    Wrap a logger so it only receives messages accepted by condition.

    Raises:
        TypeError: If logger or condition is None
    """
    if logger is None:
        raise TypeError("logger must not be None")
    if condition is None:
        raise TypeError("condition must not be None")
    return FilteredLogger(logger, condition)


def correlate(logger: Logger, target: CorrelationTarget) -> Logger:
    """
    Wrap a logger so every message is stamped with a correlation id.

    Args:
        logger: Logger receiving the stamped messages
        target: A fixed UUID, a Message whose id is used, or a function
                computing the id from each message

    Raises:
        TypeError: If logger is None or target is none of the accepted forms
    """
    if logger is None:
        raise TypeError("logger must not be None")
    if isinstance(target, uuid.UUID):
        return CorrelatedLogger.with_id(logger, target)
    if isinstance(target, Message):
        return CorrelatedLogger.with_message(logger, target)
    if callable(target):
        return CorrelatedLogger(logger, target)
    raise TypeError("target must be a UUID, a Message or a callable")
