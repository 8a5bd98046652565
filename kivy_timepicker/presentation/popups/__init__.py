"""
Popup components for the time picker.
"""

from .timepicker_popup import TimepickerPopup

__all__ = ['TimepickerPopup']
