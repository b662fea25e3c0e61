"""Logger builder pattern"""

from dataclasses import replace
from typing import Callable, List, Optional, Union

from message_logger.core.logger import Logger
from message_logger.core.logger_config import LoggerConfig
from message_logger.core.message import Message
from message_logger.core.severity import MessageSeverity
from message_logger.extensions import CorrelationTarget, correlate, when
from message_logger.filters.severity_filter import SeverityFilter
from message_logger.loggers.composite_logger import CompositeLogger
from message_logger.loggers.console_logger import ConsoleLogger
from message_logger.loggers.null_logger import NullLogger


class LoggerBuilder:
    """Builder pattern for logger chains."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        # The caller's config is copied, never modified
        self._config = replace(config) if config is not None else LoggerConfig(console_output=False)
        self._custom_loggers: List[Logger] = []
        self._custom_filters: List[Callable[[Message], bool]] = []
        self._correlation: Optional[CorrelationTarget] = self._config.correlated_id

    def with_console(self, colored: bool = True, use_stdout: bool = True) -> "LoggerBuilder":
        """Enable console output."""
        self._config.console_output = True
        self._config.colored_output = colored
        self._config.use_stdout = use_stdout
        return self

    def without_console(self) -> "LoggerBuilder":
        """Disable console output."""
        self._config.console_output = False
        return self

    def with_timestamp_format(self, timestamp_format: str) -> "LoggerBuilder":
        """Set console timestamp format."""
        self._config.timestamp_format = timestamp_format
        return self

    def with_min_severity(self, severity: Union[MessageSeverity, str]) -> "LoggerBuilder":
        """Drop messages below severity (a MessageSeverity or its name)."""
        if isinstance(severity, str):
            severity = MessageSeverity.from_string(severity)
        elif not isinstance(severity, MessageSeverity):
            raise TypeError("severity must be MessageSeverity enum or name")
        self._config.min_severity = severity
        return self

    def with_filter(self, condition: Callable[[Message], bool]) -> "LoggerBuilder":
        """
        Add a message filter.

        Args:
            condition: Predicate or filter instance (BaseFilter subclass)

        Returns:
            Self for method chaining

        Example:
            from message_logger.filters import PatternFilter

            logger = (LoggerBuilder()
                .with_console()
                .with_filter(PatternFilter(r"heartbeat", exclude=True))
                .build())
        """
        if not callable(condition):
            raise TypeError("condition must be callable")
        self._custom_filters.append(condition)
        return self

    def with_correlation(self, target: CorrelationTarget) -> "LoggerBuilder":
        """
        Stamp every message with a correlation id.

        Args:
            target: A fixed UUID, a Message whose id is used, or a function
                    computing the id per message

        Returns:
            Self for method chaining
        """
        self._correlation = target
        return self

    def add_logger(self, logger: Logger) -> "LoggerBuilder":
        """
        Add a custom logger to fan out to.

        Args:
            logger: Logger instance

        Returns:
            Self for method chaining
        """
        if logger is None:
            raise TypeError("logger must not be None")
        self._custom_loggers.append(logger)
        return self

    def build(self) -> Logger:
        """
        Build and return the logger chain.

        Sinks are fanned out through a CompositeLogger when there is more
        than one; filters wrap the sinks; correlation wraps the filters.
        """
        sinks: List[Logger] = []

        if self._config.console_output:
            sinks.append(ConsoleLogger(
                timestamp_format=self._config.timestamp_format,
                use_stdout=self._config.use_stdout,
                colored=self._config.colored_output,
            ))

        sinks.extend(self._custom_loggers)

        if not sinks:
            logger: Logger = NullLogger()
        elif len(sinks) == 1:
            logger = sinks[0]
        else:
            logger = CompositeLogger(*sinks)

        if self._config.min_severity is not None:
            logger = when(logger, SeverityFilter(min_severity=self._config.min_severity))

        for condition in self._custom_filters:
            logger = when(logger, condition)

        if self._correlation is not None:
            logger = correlate(logger, self._correlation)

        return logger
