"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Message Logger - composable loggers with sync and async paths
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from message_logger.core.severity import MessageSeverity
from message_logger.core.message import Message, NIL_ID
from message_logger.core.logger import Logger
from message_logger.core.logger_config import LoggerConfig
from message_logger.core.logger_builder import LoggerBuilder
from message_logger.loggers import (
    NullLogger,
    ConsoleLogger,
    FilteredLogger,
    CorrelatedLogger,
    CompositeLogger,
    CompositeLogError,
)

# Import submodules (not all classes by default)
from message_logger import extensions
from message_logger import filters
from message_logger import formatters

__all__ = [
    "MessageSeverity",
    "Message",
    "NIL_ID",
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
    "NullLogger",
    "ConsoleLogger",
    "FilteredLogger",
    "CorrelatedLogger",
    "CompositeLogger",
    "CompositeLogError",
    "extensions",
    "filters",
    "formatters",
]
