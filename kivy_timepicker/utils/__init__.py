"""
Utilities for the time picker.
"""

from .errors import (
    TimepickerError,
    DuplicateBindingError,
    TimeValidationError,
)
from .time_adapter import (
    format_time,
    parse_time,
    is_time_available,
    get_hours,
    get_minutes,
)

__all__ = [
    'TimepickerError',
    'DuplicateBindingError',
    'TimeValidationError',
    'format_time',
    'parse_time',
    'is_time_available',
    'get_hours',
    'get_minutes',
]
