"""
Message filters module

Reusable predicates for FilteredLogger and ``when()``.
"""

from message_logger.filters.base_filter import BaseFilter
from message_logger.filters.severity_filter import SeverityFilter
from message_logger.filters.pattern_filter import PatternFilter
from message_logger.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "SeverityFilter",
    "PatternFilter",
    "CallbackFilter",
]
