"""
Text input bound to a Timepicker.
"""
import logging
from kivy.uix.textinput import TextInput
from kivy.properties import NumericProperty, ObjectProperty

logger = logging.getLogger(__name__)


class TimepickerTextInput(TextInput):
    """
    Read-only text field that opens its picker on focus and shows the chosen time.

    Exposes min, max, disabled, format and value, which is what a
    Timepicker reads when the input is registered.
    """
    timepicker = ObjectProperty(None, allownone=True)
    min = ObjectProperty(None, allownone=True)
    max = ObjectProperty(None, allownone=True)
    format = NumericProperty(12)

    def __init__(self, **kwargs):
        kwargs.setdefault('readonly', True)
        kwargs.setdefault('multiline', False)
        self._bound_picker = None
        super().__init__(**kwargs)

    @property
    def value(self):
        return self.text or None

    def on_timepicker(self, instance, picker):
        if self._bound_picker is not None:
            self._bound_picker.unbind(on_time_set=self._on_time_set)
            self._bound_picker = None
        if picker is None:
            return
        picker.register_input_and_define_time(self)
        picker.bind(on_time_set=self._on_time_set)
        self._bound_picker = picker
        if self.text:
            picker.default_time = self.text

    def _on_time_set(self, picker, time):
        logger.debug(f"[TIMEPICKER_INPUT] Time set to {time}")
        self.text = time

    def on_focus(self, instance, value):
        # on_focus is a property callback, not a method - no need to call super()
        if value and self.timepicker is not None:
            self.focus = False
            self.timepicker.open()
