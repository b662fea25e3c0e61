"""
Core module for message logger

This module contains the fundamental classes:
- MessageSeverity: Severity enumeration
- Message: Log message data structure
- Logger: Abstract logger contract
- LoggerConfig: Configuration management
- LoggerBuilder: Builder pattern for logger chains
"""

from message_logger.core.severity import MessageSeverity
from message_logger.core.message import Message, NIL_ID
from message_logger.core.cancellation import CancellationSignal, raise_if_cancelled
from message_logger.core.logger import Logger
from message_logger.core.logger_config import LoggerConfig
from message_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "MessageSeverity",
    "Message",
    "NIL_ID",
    "CancellationSignal",
    "raise_if_cancelled",
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
]
