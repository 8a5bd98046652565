"""
Custom widgets for the time picker.
"""

from .dial_button import DialButton
from .timepicker_input import TimepickerTextInput

__all__ = ['DialButton', 'TimepickerTextInput']
