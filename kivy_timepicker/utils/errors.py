"""
Error types raised by the time picker.
"""


class TimepickerError(Exception):
    """Base exception for the time picker"""
    pass


class DuplicateBindingError(TimepickerError):
    """Raised when a second input is registered with the same picker"""
    pass


class TimeValidationError(TimepickerError, ValueError):
    """Raised when a time string cannot be parsed or breaks the minutes gap"""
    pass
