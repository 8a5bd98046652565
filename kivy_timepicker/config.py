"""
Picker settings read from a kivy ConfigParser section.
"""
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SECTION = 'timepicker'

DEFAULTS = {
    'format': 12,
    'minutes_gap': 0,
    'is_esc': 1,
    'disable_animation': 0,
    'enter_duration': 0.15,
    'leave_duration': 0.1,
}


@dataclass
class TimepickerSettings:
    """Picker options that can come from the app configuration"""
    format: int = 12
    minutes_gap: Optional[int] = None
    is_esc: bool = True
    disable_animation: bool = False
    enter_duration: float = 0.15
    leave_duration: float = 0.1


def set_defaults(config):
    """Register the timepicker section defaults on a kivy ConfigParser"""
    config.setdefaults(SECTION, DEFAULTS)


def load_settings(config=None) -> TimepickerSettings:
    """
    Read picker settings.

    Args:
        config: kivy ConfigParser; defaults to the global kivy Config

    Returns:
        TimepickerSettings with missing keys filled from DEFAULTS
    """
    if config is None:
        from kivy.config import Config
        config = Config
    set_defaults(config)

    minutes_gap = config.getint(SECTION, 'minutes_gap')
    settings = TimepickerSettings(
        format=config.getint(SECTION, 'format'),
        minutes_gap=minutes_gap or None,
        is_esc=config.getboolean(SECTION, 'is_esc'),
        disable_animation=config.getboolean(SECTION, 'disable_animation'),
        enter_duration=config.getfloat(SECTION, 'enter_duration'),
        leave_duration=config.getfloat(SECTION, 'leave_duration'),
    )
    logger.debug(f"[CONFIG] Loaded timepicker settings: {settings}")
    return settings
