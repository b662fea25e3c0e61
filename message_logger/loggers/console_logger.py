"""
Console logger with ANSI colors

Writes one line per message:

    <timestamp> <SEVERITY_LABEL> <body>

Colors are set and reset around each segment. The stream and its color
state are shared: concurrent writers (threads or tasks) are not serialized
and may interleave segments. Serialize console logging externally if that
matters.
"""

import asyncio
import sys
from typing import Dict, List, Optional, TextIO

from message_logger.core.cancellation import CancellationSignal, raise_if_cancelled
from message_logger.core.logger import Logger
from message_logger.core.message import Message
from message_logger.core.severity import MessageSeverity, RESET_COLOR, TIMESTAMP_COLOR
from message_logger.formatters.base_formatter import BaseFormatter
from message_logger.formatters.text_formatter import BODY, SEVERITY, TIMESTAMP, TextFormatter
from message_logger.formatters.timestamp_formatter import DEFAULT_TIMESTAMP_FORMAT


class ConsoleLogger(Logger):
    """Write messages to stdout or stderr with optional colors."""

    def __init__(
        self,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        use_stdout: bool = True,
        stream: Optional[TextIO] = None,
        colored: bool = True,
        timestamp_color: str = TIMESTAMP_COLOR,
        label_colors: Optional[Dict[MessageSeverity, str]] = None,
        message_colors: Optional[Dict[MessageSeverity, str]] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize console logger.

        Args:
            timestamp_format: Timestamp pattern (see TimestampFormatter)
            use_stdout: Write to stdout if True, stderr otherwise
            stream: Explicit output stream, overrides use_stdout
            colored: Use ANSI color codes
            timestamp_color: ANSI color of the timestamp
            label_colors: ANSI color per severity for the label
            message_colors: ANSI color per severity for the body
            formatter: Segment formatter (default: TextFormatter(timestamp_format))
        """
        self.use_stdout = use_stdout
        self.colored = colored
        self.timestamp_color = timestamp_color
        self.label_colors = dict(label_colors) if label_colors is not None else {
            severity: severity.label_color for severity in MessageSeverity
        }
        self.message_colors = dict(message_colors) if message_colors is not None else {
            severity: severity.message_color for severity in MessageSeverity
        }
        self.formatter = formatter or TextFormatter(timestamp_format)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Target stream, resolved at write time unless given explicitly."""
        if self._stream is not None:
            return self._stream
        return sys.stdout if self.use_stdout else sys.stderr

    def _color_for(self, role: Optional[str], severity: MessageSeverity) -> str:
        if role == TIMESTAMP:
            return self.timestamp_color
        if role == SEVERITY:
            return self.label_colors.get(severity, "")
        if role == BODY:
            return self.message_colors.get(severity, "")
        return ""

    def _pieces(self, message: Message) -> List[str]:
        pieces = []
        for role, text in self.formatter.segments(message):
            color = self._color_for(role, message.severity) if self.colored else ""
            pieces.append(f"{color}{text}{RESET_COLOR}" if color else text)
        pieces.append("\n")
        return pieces

    def log(self, message: Message) -> None:
        stream = self.stream
        for piece in self._pieces(message):
            stream.write(piece)
        stream.flush()

    async def log_async(
        self,
        message: Message,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        stream = self.stream
        for piece in self._pieces(message):
            raise_if_cancelled(cancel)
            stream.write(piece)
            await asyncio.sleep(0)
        stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        target = "stdout" if self.use_stdout else "stderr"
        return f"ConsoleLogger(stream={target}, colored={self.colored})"
