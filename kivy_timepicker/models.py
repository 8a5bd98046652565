"""
Value objects shared by the time picker, its services and its views.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class TimePeriod(str, Enum):
    AM = 'AM'
    PM = 'PM'


class TimeUnit(str, Enum):
    HOUR = 'hour'
    MINUTE = 'minute'


class AnimationState(str, Enum):
    """Animation phase of the picker overlay"""
    ENTER = 'enter'
    LEAVE = 'leave'
    UNSET = 'unset'


class TimeFormat:
    TWELVE = 12
    TWENTY_FOUR = 24

    @staticmethod
    def normalize(value) -> int:
        """Anything other than 24 means a 12-hour clock"""
        return TimeFormat.TWENTY_FOUR if value == TimeFormat.TWENTY_FOUR else TimeFormat.TWELVE


HOUR_ANGLE_STEP = 30
MINUTE_ANGLE_STEP = 6


@dataclass(frozen=True)
class ClockFaceTime:
    """A dial value: the number shown and where it sits on the clock face"""
    time: int
    angle: int = 0
    disabled: bool = False

    @classmethod
    def hour(cls, time: int) -> 'ClockFaceTime':
        return cls(time=time, angle=(time % 12) * HOUR_ANGLE_STEP)

    @classmethod
    def minute(cls, time: int) -> 'ClockFaceTime':
        return cls(time=time, angle=(time * MINUTE_ANGLE_STEP) % 360)

    def with_disabled(self, disabled: bool) -> 'ClockFaceTime':
        return replace(self, disabled=disabled)


DEFAULT_HOUR = ClockFaceTime.hour(12)
DEFAULT_MINUTE = ClockFaceTime.minute(0)


@dataclass(frozen=True)
class AnimationEvent:
    """Completion signal from the animation driving the overlay"""
    phase_name: str
    to_state: str


@dataclass
class TimepickerBinding:
    """
    Plain bound-input description.

    Anything exposing the same attributes can be registered with a picker;
    the Kivy text input widget does.
    """
    min: Optional[Any] = None
    max: Optional[Any] = None
    disabled: bool = False
    format: int = TimeFormat.TWELVE
    value: Optional[str] = None
