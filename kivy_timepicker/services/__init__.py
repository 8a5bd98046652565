"""
Service layer for the time picker.
"""

from .timepicker_service import TimepickerService, Subscription
from .overlay_service import OverlayService

__all__ = ['TimepickerService', 'Subscription', 'OverlayService']
