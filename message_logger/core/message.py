"""
Message data structure

One log entry: severity, a format template and its positional values,
plus identifiers and the time it was created.
"""

from dataclasses import FrozenInstanceError, dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Tuple
import uuid

from message_logger.core.severity import MessageSeverity

NIL_ID = uuid.UUID(int=0)

# Fields fixed once a message is constructed; only correlated_id may change
_READ_ONLY_FIELDS = frozenset({"id", "timestamp", "severity", "format", "values"})


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Message:
    """
    A single log message.

    ``correlated_id`` is the only field meant to change after construction;
    decorators stamp it on a clone rather than on the caller's instance.
    Two messages are equal when every field is equal, values compared
    element by element.
    """

    severity: MessageSeverity
    format: str
    values: Tuple[Any, ...] = ()
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    correlated_id: uuid.UUID = NIL_ID
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self):
        """Validate message after initialization."""
        if self.format is None:
            raise TypeError("format must not be None")
        if not isinstance(self.format, str):
            raise TypeError("format must be a string")
        if not isinstance(self.severity, MessageSeverity):
            raise TypeError("severity must be MessageSeverity enum")
        if self.values is None:
            self.values = ()
        elif not isinstance(self.values, tuple):
            self.values = tuple(self.values)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY_FIELDS and self.__dict__.get("_sealed", False):
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def create(
        cls,
        format: str,
        *values: Any,
        severity: MessageSeverity = MessageSeverity.INFORMATIONAL,
    ) -> "Message":
        """
        Create a message from a format template and its values.

        Args:
            format: Template with positional placeholders ("{0}", "{1}", ...)
            *values: Substitution values
            severity: Message severity (default: INFORMATIONAL)

        Returns:
            New Message with a fresh id and the current local time
        """
        return cls(severity=severity, format=format, values=values)

    @classmethod
    def from_text(cls, text: str) -> "Message":
        """Create an informational message from plain text."""
        return cls.create(text)

    def render(self) -> str:
        """Apply the values to the format template."""
        return self.format.format(*self.values)

    def clone(self) -> "Message":
        """Shallow copy sharing the same values tuple."""
        return replace(self)

    def clone_with(self, **changes: Any) -> "Message":
        """
        Shallow copy with some fields replaced.

        Example:
            stamped = message.clone_with(correlated_id=request_id)
        """
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert message to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "id": str(self.id),
            "correlated_id": str(self.correlated_id),
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.name,
            "format": self.format,
            "values": list(self.values),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        """
        Create message from dictionary.

        Args:
            data: Dictionary with message data

        Returns:
            New Message instance
        """
        return cls(
            severity=MessageSeverity[data.get("severity", "INFORMATIONAL")],
            format=data["format"],
            values=tuple(data.get("values", ())),
            id=uuid.UUID(data["id"]) if "id" in data else uuid.uuid4(),
            correlated_id=uuid.UUID(data.get("correlated_id", str(NIL_ID))),
            timestamp=datetime.fromisoformat(data["timestamp"]) if "timestamp" in data else _now(),
        )

    def __str__(self) -> str:
        """Rendered message text."""
        return self.render()
