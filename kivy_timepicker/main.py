"""
Demo application: a form with two time fields bound to pickers.
"""
import datetime
import logging

from kivy.app import App
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label

from .config import set_defaults
from .timepicker import Timepicker
from .presentation.widgets import TimepickerTextInput

# Setup logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


class TimepickerDemoApp(App):
    """Shows a 12-hour and a 24-hour field, each with its own picker"""

    def build_config(self, config):
        set_defaults(config)

    def build(self):
        self.pickers = []
        root = BoxLayout(orientation='vertical', spacing=10, padding=20)

        start_input = TimepickerTextInput(
            min=datetime.time(hour=8),
            max=datetime.time(hour=18),
            format=12,
            size_hint_y=None,
            height='50dp'
        )
        end_input = TimepickerTextInput(format=24, size_hint_y=None, height='50dp')

        for label, field in (("Start (12h, 08:00-18:00)", start_input), ("End (24h)", end_input)):
            picker = Timepicker.from_config(self.config)
            picker.initialize()
            self.pickers.append(picker)
            picker.bind(on_time_set=lambda instance, time, name=label: logger.info(f"{name}: {time}"))
            field.timepicker = picker
            root.add_widget(Label(text=label, size_hint_y=None, height='40dp'))
            root.add_widget(field)

        root.add_widget(Label())
        return root

    def on_stop(self):
        for picker in self.pickers:
            picker.teardown()


def run():
    TimepickerDemoApp().run()


if __name__ == '__main__':
    run()
