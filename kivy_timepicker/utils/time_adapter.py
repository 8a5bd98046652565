"""
Conversions between time text, datetime.time and clock face values.
"""
import datetime
import re
from typing import List, Optional

from ..models import ClockFaceTime, TimeFormat, TimePeriod
from .errors import TimeValidationError

_TIME_PATTERN = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])?\s*$')


def to_24_hour(hour: int, period) -> int:
    """Convert a 12-hour clock value to 0-23"""
    hour = hour % 12
    if period == TimePeriod.PM:
        hour += 12
    return hour


def to_clock_hour(hour: int, time_format: int):
    """
    Split a 0-23 hour into what the dial shows for the given format.

    Returns:
        (hour, period) tuple; the period is derived for both formats
    """
    period = TimePeriod.PM if hour >= 12 else TimePeriod.AM
    if time_format == TimeFormat.TWENTY_FOUR:
        return hour, period
    return (hour % 12) or 12, period


def parse_time(text: str) -> datetime.time:
    """
    Parse "hh:mm AM"/"hh:mm pm" or 24-hour "HH:MM" text.

    Raises:
        TimeValidationError: if the text is not a valid time
    """
    match = _TIME_PATTERN.match(text or '')
    if not match:
        raise TimeValidationError(f"Invalid time: {text!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    suffix = match.group(3)
    if minute > 59:
        raise TimeValidationError(f"Invalid minutes in {text!r}")

    if suffix:
        if not 1 <= hour <= 12:
            raise TimeValidationError(f"Invalid 12-hour value in {text!r}")
        hour = to_24_hour(hour, TimePeriod(suffix.upper()))
    elif hour > 23:
        raise TimeValidationError(f"Invalid hour in {text!r}")

    return datetime.time(hour=hour, minute=minute)


def format_time(value, time_format: int) -> str:
    """Format anything with hour/minute attributes as dial text"""
    if time_format == TimeFormat.TWENTY_FOUR:
        return f"{value.hour:02d}:{value.minute:02d}"
    hour, period = to_clock_hour(value.hour, TimeFormat.TWELVE)
    return f"{hour:02d}:{value.minute:02d} {period.value}"


def get_full_time(hour: int, minute: int, period, time_format: int) -> str:
    """Compose the dial selection into text for the given format"""
    if time_format != TimeFormat.TWENTY_FOUR:
        hour = to_24_hour(hour, period)
    return format_time(datetime.time(hour=hour, minute=minute), time_format)


def _compare_key(value, granularity: str):
    if granularity == 'hours':
        return (value.hour,)
    return (value.hour, value.minute)


def is_within(value, min_time=None, max_time=None, granularity: str = 'minutes') -> bool:
    """Inclusive bounds check; a missing bound is open"""
    key = _compare_key(value, granularity)
    if min_time is not None and key < _compare_key(min_time, granularity):
        return False
    if max_time is not None and key > _compare_key(max_time, granularity):
        return False
    return True


def is_time_available(text: str, min_time=None, max_time=None, granularity: str = 'minutes',
                      minutes_gap: Optional[int] = None) -> bool:
    """
    Check whether a time string may be selected.

    Args:
        text: Time text accepted by parse_time
        min_time: Lower bound, inclusive
        max_time: Upper bound, inclusive
        granularity: 'hours' or 'minutes'
        minutes_gap: Minute step the value has to land on

    Raises:
        TimeValidationError: if the text is invalid or off the minutes gap
    """
    if not text:
        return False
    value = parse_time(text)
    if minutes_gap and value.minute % minutes_gap != 0:
        raise TimeValidationError(
            f"Your minutes - {value.minute} doesn't match your minutesGap - {minutes_gap}"
        )
    return is_within(value, min_time, max_time, granularity)


def get_hours(time_format: int) -> List[ClockFaceTime]:
    """Hours in dial order, starting at one o'clock"""
    total = 24 if time_format == TimeFormat.TWENTY_FOUR else 12
    return [ClockFaceTime.hour(hour % 24) for hour in range(1, total + 1)]


def get_minutes(gap: Optional[int] = None) -> List[ClockFaceTime]:
    minutes = [ClockFaceTime.minute(minute) for minute in range(60)]
    if gap and gap > 1:
        minutes = [minute for minute in minutes if minute.time % gap == 0]
    return minutes


def disable_hours(hours: List[ClockFaceTime], min_time=None, max_time=None,
                  time_format: int = TimeFormat.TWELVE, period=None) -> List[ClockFaceTime]:
    """Mark hours outside the bounds as disabled"""
    if min_time is None and max_time is None:
        return list(hours)

    result = []
    for hour in hours:
        value = hour.time
        if time_format != TimeFormat.TWENTY_FOUR:
            value = to_24_hour(value, period)
        available = is_within(datetime.time(hour=value), min_time, max_time, 'hours')
        result.append(hour.with_disabled(not available))
    return result


def disable_minutes(minutes: List[ClockFaceTime], selected_hour: int, min_time=None, max_time=None,
                    time_format: int = TimeFormat.TWELVE, period=None) -> List[ClockFaceTime]:
    """Mark minutes of the selected hour outside the bounds as disabled"""
    if min_time is None and max_time is None:
        return list(minutes)

    hour = selected_hour
    if time_format != TimeFormat.TWENTY_FOUR:
        hour = to_24_hour(hour, period)

    result = []
    for minute in minutes:
        value = datetime.time(hour=hour, minute=minute.time)
        result.append(minute.with_disabled(not is_within(value, min_time, max_time)))
    return result
