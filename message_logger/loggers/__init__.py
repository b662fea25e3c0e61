"""Loggers module - Sinks and decorators implementing the Logger contract"""

from message_logger.loggers.null_logger import NullLogger
from message_logger.loggers.console_logger import ConsoleLogger
from message_logger.loggers.filtered_logger import FilteredLogger
from message_logger.loggers.correlated_logger import CorrelatedLogger
from message_logger.loggers.composite_logger import CompositeLogger, CompositeLogError

__all__ = [
    "NullLogger",
    "ConsoleLogger",
    "FilteredLogger",
    "CorrelatedLogger",
    "CompositeLogger",
    "CompositeLogError",
]
