"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional, Union
import uuid

from message_logger.core.severity import MessageSeverity
from message_logger.formatters.timestamp_formatter import DEFAULT_TIMESTAMP_FORMAT


@dataclass
class LoggerConfig:
    """
    Settings consumed by LoggerBuilder.
    """

    # Console settings
    console_output: bool = True
    use_stdout: bool = True
    colored_output: bool = True

    # Format settings
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    # Filtering settings
    min_severity: Optional[Union[MessageSeverity, str]] = None

    # Correlation settings
    correlated_id: Optional[uuid.UUID] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.timestamp_format, str) or not self.timestamp_format:
            raise ValueError("timestamp_format must be a non-empty string")

        # Accept severity names such as "warning" or "INFO"
        if isinstance(self.min_severity, str):
            self.min_severity = MessageSeverity.from_string(self.min_severity)

        if isinstance(self.correlated_id, str):
            self.correlated_id = uuid.UUID(self.correlated_id)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_severity=MessageSeverity.DEBUG,
            console_output=True,
            colored_output=True,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_severity=MessageSeverity.WARNING,
            use_stdout=False,
            colored_output=False,
        )
