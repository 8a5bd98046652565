"""
Dial button showing one clock face value.
"""
import time
from kivy.uix.button import Button
from kivy.properties import BooleanProperty, ObjectProperty

SELECTED_COLOR = (0.2, 0.6, 0.9, 1)
IDLE_COLOR = (0.4, 0.4, 0.4, 1)
DEBOUNCE_SECONDS = 0.3


class DialButton(Button):
    """Button for a ClockFaceTime that ignores double taps"""
    face = ObjectProperty(None, allownone=True)
    selected = BooleanProperty(False)

    def __init__(self, face=None, **kwargs):
        kwargs.setdefault('font_size', '18sp')
        kwargs.setdefault('size_hint_y', None)
        kwargs.setdefault('height', '50dp')
        super().__init__(**kwargs)
        self.background_color = IDLE_COLOR
        self.face = face

    def on_face(self, instance, face):
        if face is None:
            return
        self.text = f"{face.time:02d}"
        self.disabled = face.disabled

    def on_selected(self, instance, selected):
        self.background_color = SELECTED_COLOR if selected else IDLE_COLOR

    def on_touch_down(self, touch):
        if not self.collide_point(*touch.pos):
            return super().on_touch_down(touch)

        current_time = time.time()
        last_touch = getattr(self, '_last_touch_time', None)
        if last_touch is not None and current_time - last_touch < DEBOUNCE_SECONDS:
            return True  # Consume the event without action
        self._last_touch_time = current_time

        return super().on_touch_down(touch)
