"""
Time picker state machine.

A Timepicker is bound to exactly one input. It takes the input's
constraints, follows hour/minute/period selections through the shared
TimepickerService, sequences the open/close animation and reports the
chosen time through kivy events:

    on_opened()              picker was opened
    on_closed(time)          closing finished; time is the last value set, None if none or without animation
    on_hour_selected(hour)   user picked an hour on the dial
    on_time_set(time)        user confirmed; time is formatted for the picker format
"""
import logging
from typing import List, Optional

from kivy.event import EventDispatcher
from kivy.properties import (
    AliasProperty,
    BooleanProperty,
    NumericProperty,
    ObjectProperty,
    OptionProperty,
)

from .config import TimepickerSettings, load_settings
from .models import (
    DEFAULT_HOUR,
    DEFAULT_MINUTE,
    AnimationState,
    ClockFaceTime,
    TimeFormat,
    TimePeriod,
    TimeUnit,
)
from .services.overlay_service import OverlayService
from .services.timepicker_service import Subscription, TimepickerService
from .utils.errors import DuplicateBindingError
from .utils.time_adapter import disable_hours, disable_minutes, format_time, get_hours, get_minutes

logger = logging.getLogger(__name__)

KEYCODE_ESCAPE = 27


class Timepicker(EventDispatcher):
    """Selection and open/close lifecycle of a single time picker"""
    __events__ = ('on_opened', 'on_closed', 'on_hour_selected', 'on_time_set')

    is_opened = BooleanProperty(False)
    animation_state = OptionProperty(AnimationState.UNSET, options=list(AnimationState))
    active_time_unit = OptionProperty(TimeUnit.HOUR, options=list(TimeUnit))

    selected_hour = ObjectProperty(DEFAULT_HOUR)
    selected_minute = ObjectProperty(DEFAULT_MINUTE)
    selected_period = OptionProperty(TimePeriod.AM, options=list(TimePeriod))

    min_time = ObjectProperty(None, allownone=True)
    max_time = ObjectProperty(None, allownone=True)
    disabled = BooleanProperty(False)
    is_esc = BooleanProperty(True)
    disable_animation = BooleanProperty(False)
    enter_duration = NumericProperty(0.15)
    leave_duration = NumericProperty(0.1)

    _format = TimeFormat.TWELVE
    _minutes_gap = None
    _default_time = ''

    def _get_format(self):
        return self._format

    def _set_format(self, value):
        self._format = TimeFormat.normalize(value)
        return True

    format = AliasProperty(_get_format, _set_format)

    def _get_minutes_gap(self):
        return self._minutes_gap

    def _set_minutes_gap(self, gap):
        if gap is None:
            return False
        try:
            gap = int(gap)
        except (TypeError, ValueError):
            logger.warning(f"[TIMEPICKER] Invalid minutes gap {gap!r}, using 1")
            gap = 1
        self._minutes_gap = gap if 1 <= gap <= 60 else 1
        return True

    minutes_gap = AliasProperty(_get_minutes_gap, _set_minutes_gap)

    def _get_default_time(self):
        return self._default_time

    def _set_default_time(self, time):
        # Every assignment re-seeds, even when the text is unchanged
        self._default_time = time or ''
        if time:
            self.set_default_time(time)
        return True

    default_time = AliasProperty(_get_default_time, _set_default_time)

    def __init__(self, service: Optional[TimepickerService] = None,
                 overlay: Optional[OverlayService] = None, **kwargs):
        """
        Args:
            service: Selection service shared with the dials
            overlay: Mounts the picker view while open
        """
        self._service = service or TimepickerService()
        self._overlay = overlay or OverlayService()
        self._timepicker_input = None
        self._subscriptions: List[Subscription] = []
        self._last_time: Optional[str] = None
        super().__init__(**kwargs)

    @classmethod
    def from_config(cls, config=None, **kwargs) -> 'Timepicker':
        """Build a picker with settings read from a kivy ConfigParser"""
        picker = cls(**kwargs)
        picker.apply_settings(load_settings(config))
        return picker

    def apply_settings(self, settings: TimepickerSettings):
        self.format = settings.format
        self.minutes_gap = settings.minutes_gap
        self.is_esc = settings.is_esc
        self.disable_animation = settings.disable_animation
        self.enter_duration = settings.enter_duration
        self.leave_duration = settings.leave_duration

    @property
    def service(self) -> TimepickerService:
        return self._service

    @property
    def timepicker_input(self):
        return self._timepicker_input

    # Lifecycle

    def initialize(self):
        """Start following the selection service"""
        if self._subscriptions:
            return
        service = self._service
        self.selected_hour = service.hour
        self.selected_minute = service.minute
        self.selected_period = service.period
        self._subscriptions = [
            service.subscribe('hour', self._on_service_hour),
            service.subscribe('minute', self._on_service_minute),
            service.subscribe('period', self._on_service_period),
        ]

    def teardown(self):
        """Release subscriptions and drop back to the closed baseline"""
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions = []

        if self.is_opened:
            self._overlay.destroy_picker()
        self.is_opened = False
        self.animation_state = AnimationState.UNSET

    def _on_service_hour(self, service, hour):
        self.selected_hour = hour

    def _on_service_minute(self, service, minute):
        self.selected_minute = minute

    def _on_service_period(self, service, period):
        self.selected_period = period

    # Binding

    def register_input_and_define_time(self, timepicker_input):
        """
        Bind the input this picker serves and take over its constraints.

        Args:
            timepicker_input: Object exposing min, max, disabled, format and value

        Raises:
            DuplicateBindingError: if an input is already registered
        """
        if self._timepicker_input is not None:
            raise DuplicateBindingError('A Timepicker can only be associated with a single input.')
        self._timepicker_input = timepicker_input

        self.min_time = getattr(timepicker_input, 'min', None)
        self.max_time = getattr(timepicker_input, 'max', None)
        self.disabled = bool(getattr(timepicker_input, 'disabled', False))
        self.format = getattr(timepicker_input, 'format', None)

        if self.min_time is not None and not getattr(timepicker_input, 'value', None):
            self.set_default_time(format_time(self.min_time, self.format))

    # Selection

    def set_default_time(self, time: str):
        self._service.set_default_time_if_available(
            time, self.min_time, self.max_time, self.format, self.minutes_gap
        )

    def change_time_unit(self, unit):
        self.active_time_unit = unit

    def change_hour(self, hour: ClockFaceTime):
        self._service.hour = hour

    def change_minute(self, minute: ClockFaceTime):
        self._service.minute = minute

    def change_period(self, period):
        self._service.period = period

    def select_hour(self, hour: int):
        """Report the picked hour and move on to the minute dial"""
        self.dispatch('on_hour_selected', hour)
        self.change_time_unit(TimeUnit.MINUTE)

    def set_time(self):
        """Report the composed time, then close"""
        self._last_time = self._service.get_full_time(self.format)
        self.dispatch('on_time_set', self._last_time)
        self.close()

    def get_hours(self) -> List[ClockFaceTime]:
        """Hour dial values with out-of-range hours disabled"""
        return disable_hours(get_hours(self.format), self.min_time, self.max_time,
                             self.format, self.selected_period)

    def get_minutes(self) -> List[ClockFaceTime]:
        """Minute dial values for the selected hour with out-of-range minutes disabled"""
        return disable_minutes(get_minutes(self.minutes_gap), self.selected_hour.time,
                               self.min_time, self.max_time, self.format, self.selected_period)

    # Open / close

    def open(self):
        if self.disabled:
            logger.debug("[TIMEPICKER] Ignoring open request, picker is disabled")
            return
        if self.is_opened:
            logger.debug("[TIMEPICKER] Picker already open")
            return

        self.is_opened = True
        if not self.disable_animation:
            self.animation_state = AnimationState.ENTER
        self._overlay.append_picker(self)
        logger.debug("[TIMEPICKER] Opened")
        self.dispatch('on_opened')

    def close(self):
        if self.disable_animation:
            self._close_timepicker()
            return
        if self.animation_state == AnimationState.LEAVE:
            return
        self.animation_state = AnimationState.LEAVE

    def animation_done(self, event):
        """
        Completion signal from the view animation.

        Only the end of the leave animation finishes closing.
        """
        if event.phase_name != 'done' or event.to_state != AnimationState.LEAVE:
            return
        if not self.is_opened:
            return
        self._close_timepicker()

    def _close_timepicker(self):
        self.is_opened = False
        self.animation_state = AnimationState.UNSET
        self.active_time_unit = TimeUnit.HOUR
        self._overlay.destroy_picker()
        logger.debug("[TIMEPICKER] Closed")
        # Without animation there is no leave phase to carry the time
        time = None if self.disable_animation else self._last_time
        self.dispatch('on_closed', time)

    def handle_keydown(self, window, key, scancode=None, codepoint=None, modifiers=None):
        """
        Window key handler while the picker is mounted.

        Returns True so the key does not reach other window listeners.
        """
        if key == KEYCODE_ESCAPE and self.is_esc:
            self.close()
        return True

    # Default event handlers

    def on_opened(self):
        pass

    def on_closed(self, time):
        pass

    def on_hour_selected(self, hour):
        pass

    def on_time_set(self, time):
        pass
