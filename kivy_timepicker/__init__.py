"""
Time picker for Kivy applications.
"""

from .models import (
    AnimationEvent,
    AnimationState,
    ClockFaceTime,
    TimeFormat,
    TimePeriod,
    TimeUnit,
    TimepickerBinding,
)
from .timepicker import Timepicker
from .utils.errors import DuplicateBindingError, TimepickerError, TimeValidationError

__all__ = [
    'AnimationEvent',
    'AnimationState',
    'ClockFaceTime',
    'TimeFormat',
    'TimePeriod',
    'TimeUnit',
    'TimepickerBinding',
    'Timepicker',
    'TimepickerError',
    'DuplicateBindingError',
    'TimeValidationError',
]
