"""
Selection service shared by a picker and its dials.
Holds the current hour, minute and period and broadcasts every change.
"""
import logging
from typing import Callable, Optional

from kivy.event import EventDispatcher
from kivy.properties import ObjectProperty, OptionProperty

from ..models import DEFAULT_HOUR, DEFAULT_MINUTE, ClockFaceTime, TimePeriod
from ..utils.errors import TimeValidationError
from ..utils.time_adapter import get_full_time, is_time_available, parse_time, to_clock_hour

logger = logging.getLogger(__name__)


class Subscription:
    """Disposable handle for one callback bound on a dispatcher property"""

    def __init__(self, dispatcher: EventDispatcher, name: str, uid: int):
        self._dispatcher = dispatcher
        self._name = name
        self._uid: Optional[int] = uid or None

    @property
    def active(self) -> bool:
        return self._uid is not None

    def dispose(self):
        """Unbind the callback; safe to call more than once"""
        if self._uid is None:
            return
        self._dispatcher.unbind_uid(self._name, self._uid)
        self._uid = None


class TimepickerService(EventDispatcher):
    """Broadcasts hour, minute and period selections to every subscriber"""
    hour = ObjectProperty(DEFAULT_HOUR)
    minute = ObjectProperty(DEFAULT_MINUTE)
    period = OptionProperty(TimePeriod.AM, options=[TimePeriod.AM, TimePeriod.PM])

    def subscribe(self, name: str, callback: Callable) -> Subscription:
        """
        Bind a callback to one of 'hour', 'minute' or 'period'.

        Args:
            name: Property to follow
            callback: Called as callback(service, value) on every change

        Returns:
            Subscription that unbinds the callback when disposed
        """
        uid = self.fbind(name, callback)
        return Subscription(self, name, uid)

    def set_default_time_if_available(self, time: str, min_time=None, max_time=None,
                                      time_format: int = 12, minutes_gap: Optional[int] = None):
        """
        Publish a default time if it is valid and inside the bounds.

        Invalid text is logged and otherwise ignored.
        """
        try:
            if is_time_available(time, min_time, max_time, 'minutes', minutes_gap):
                self._set_default_time(time, time_format)
            else:
                logger.info(f"[TIMEPICKER_SERVICE] Default time {time!r} is outside the allowed range")
        except TimeValidationError as e:
            logger.error(f"[TIMEPICKER_SERVICE] Cannot use default time: {e}")

    def _set_default_time(self, time: str, time_format: int):
        value = parse_time(time)
        hour, period = to_clock_hour(value.hour, time_format)
        self.hour = ClockFaceTime.hour(hour)
        self.minute = ClockFaceTime.minute(value.minute)
        self.period = period
        logger.debug(f"[TIMEPICKER_SERVICE] Default time set to {hour}:{value.minute:02d} {period.value}")

    def get_full_time(self, time_format: int) -> str:
        """Current selection as text in the given format"""
        return get_full_time(self.hour.time, self.minute.time, self.period, time_format)
