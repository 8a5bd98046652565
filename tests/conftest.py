import os

# Kivy parses sys.argv and writes config/log files on import unless told not to
os.environ.setdefault('KIVY_NO_ARGS', '1')
os.environ.setdefault('KIVY_NO_CONSOLELOG', '1')
os.environ.setdefault('KIVY_NO_FILELOG', '1')
os.environ.setdefault('KIVY_NO_CONFIG', '1')

import pytest

from kivy_timepicker.services.timepicker_service import TimepickerService
from kivy_timepicker.timepicker import Timepicker


class RecordingOverlay:
    """Overlay stand-in that counts mount/unmount calls"""

    def __init__(self):
        self.appended = []
        self.destroyed = 0

    def append_picker(self, picker):
        self.appended.append(picker)

    def destroy_picker(self):
        self.destroyed += 1


@pytest.fixture
def overlay():
    """Recording overlay service"""
    return RecordingOverlay()


@pytest.fixture
def service():
    """Fresh selection service"""
    return TimepickerService()


@pytest.fixture
def picker(service, overlay):
    """Picker that has not subscribed to its service yet"""
    return Timepicker(service=service, overlay=overlay)


@pytest.fixture
def subscribed_picker(picker):
    """Picker following its service, torn down afterwards"""
    picker.initialize()
    yield picker
    picker.teardown()


@pytest.fixture
def events(picker):
    """Collects every event the picker dispatches as (name, args) tuples"""
    recorded = []
    for name in ('on_opened', 'on_closed', 'on_hour_selected', 'on_time_set'):
        picker.bind(**{name: lambda instance, *args, n=name: recorded.append((n, args))})
    return recorded
