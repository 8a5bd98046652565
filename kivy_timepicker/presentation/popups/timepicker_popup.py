"""
Overlay view for a Timepicker - hour/minute grids with period and confirm controls.
"""
import logging
from kivy.animation import Animation
from kivy.graphics import Color, Rectangle
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.floatlayout import FloatLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.uix.scrollview import ScrollView
from kivy.properties import ObjectProperty

from ...models import AnimationEvent, AnimationState, TimeFormat, TimePeriod, TimeUnit
from ..widgets import DialButton

logger = logging.getLogger(__name__)


class TimepickerPopup(FloatLayout):
    """Dimmed overlay rendering a Timepicker's state"""
    picker = ObjectProperty(None)

    def __init__(self, picker=None, **kwargs):
        super().__init__(**kwargs)
        self.picker = picker
        self.dial_buttons = []

        with self.canvas.before:
            Color(0, 0, 0, 0.6)
            self._backdrop = Rectangle(pos=self.pos, size=self.size)
        self.bind(pos=self._update_backdrop, size=self._update_backdrop)

        # Horizontal layout for landscape screens
        main_layout = BoxLayout(
            orientation='horizontal',
            spacing=10,
            padding=5,
            size_hint=(0.95, 0.95),
            pos_hint={'center_x': 0.5, 'center_y': 0.5}
        )

        # --- LEFT PANEL: unit switch and dial (65% width) ---
        left_panel = BoxLayout(orientation='vertical', spacing=5, size_hint_x=0.65)

        header = BoxLayout(orientation='horizontal', size_hint_y=None, height='60dp', spacing=10)
        self.hour_tab = DialButton(text="Hour", height='60dp', font_size='22sp')
        self.hour_tab.bind(on_release=lambda x: picker.change_time_unit(TimeUnit.HOUR))
        self.minute_tab = DialButton(text="Minute", height='60dp', font_size='22sp')
        self.minute_tab.bind(on_release=lambda x: picker.change_time_unit(TimeUnit.MINUTE))
        header.add_widget(self.hour_tab)
        header.add_widget(self.minute_tab)
        left_panel.add_widget(header)

        dial_scroll = ScrollView(do_scroll_x=False, do_scroll_y=True, bar_width=10)
        self.dial_grid = GridLayout(cols=4, spacing=3, size_hint_y=None)
        self.dial_grid.bind(minimum_height=self.dial_grid.setter('height'))
        dial_scroll.add_widget(self.dial_grid)
        left_panel.add_widget(dial_scroll)
        main_layout.add_widget(left_panel)

        # --- RIGHT PANEL: selection display and controls (35% width) ---
        right_panel = BoxLayout(orientation='vertical', spacing=10, size_hint_x=0.35, padding=[5, 0, 0, 0])

        self.time_display = Label(
            font_size='28sp',
            bold=True,
            color=(0.2, 0.8, 0.2, 1),
            size_hint_y=1
        )
        right_panel.add_widget(self.time_display)

        btn_height = '60dp'

        if picker.format == TimeFormat.TWELVE:
            period_row = BoxLayout(orientation='horizontal', size_hint_y=None, height=btn_height, spacing=5)
            self.period_buttons = {}
            for period in TimePeriod:
                btn = DialButton(text=period.value, height=btn_height, font_size='20sp')
                btn.bind(on_release=lambda x, p=period: picker.change_period(p))
                period_row.add_widget(btn)
                self.period_buttons[period] = btn
            right_panel.add_widget(period_row)
        else:
            self.period_buttons = {}

        ok_btn = DialButton(text="OK", height=btn_height, font_size='20sp')
        ok_btn.background_color = (0, 0.7, 0, 1)
        ok_btn.bind(on_release=lambda x: picker.set_time())
        right_panel.add_widget(ok_btn)

        cancel_btn = DialButton(text="Cancel", height=btn_height, font_size='20sp')
        cancel_btn.background_color = (0.7, 0.2, 0.2, 1)
        cancel_btn.bind(on_release=lambda x: picker.close())
        right_panel.add_widget(cancel_btn)

        main_layout.add_widget(right_panel)
        self.add_widget(main_layout)

        picker.bind(
            animation_state=self._on_animation_state,
            active_time_unit=self._rebuild_dial,
            selected_hour=self._on_selection,
            selected_minute=self._on_selection,
            selected_period=self._on_period,
        )
        self._rebuild_dial()
        self._update_display()

        if picker.animation_state == AnimationState.ENTER:
            self.opacity = 0
            self._animate(AnimationState.ENTER)

    def _update_backdrop(self, *_):
        self._backdrop.pos = self.pos
        self._backdrop.size = self.size

    def on_parent(self, instance, parent):
        # Stop following the picker once the overlay service removes us
        if parent is None and self.picker is not None:
            self.picker.unbind(
                animation_state=self._on_animation_state,
                active_time_unit=self._rebuild_dial,
                selected_hour=self._on_selection,
                selected_minute=self._on_selection,
                selected_period=self._on_period,
            )

    def _on_animation_state(self, picker, state):
        if state in (AnimationState.ENTER, AnimationState.LEAVE):
            self._animate(state)

    def _animate(self, state):
        """Fade in or out and report completion back to the picker"""
        Animation.cancel_all(self, 'opacity')
        if state == AnimationState.ENTER:
            anim = Animation(opacity=1, d=self.picker.enter_duration)
        else:
            anim = Animation(opacity=0, d=self.picker.leave_duration)
        anim.bind(on_complete=lambda *_: self.picker.animation_done(AnimationEvent('done', state.value)))
        anim.start(self)

    def _on_selection(self, *_):
        self._update_display()
        if self.picker.active_time_unit == TimeUnit.MINUTE:
            self._rebuild_dial()
        else:
            self._update_button_colors()

    def _on_period(self, *_):
        self._update_display()
        self._rebuild_dial()

    def _rebuild_dial(self, *_):
        """Fill the grid with the values of the active dial"""
        picker = self.picker
        self.dial_grid.clear_widgets()
        self.dial_buttons = []

        if picker.active_time_unit == TimeUnit.HOUR:
            faces = picker.get_hours()
            on_select = self._select_hour
        else:
            faces = picker.get_minutes()
            on_select = self._select_minute

        for face in faces:
            btn = DialButton(face=face)
            btn.bind(on_release=lambda instance, f=face: on_select(f))
            self.dial_grid.add_widget(btn)
            self.dial_buttons.append(btn)

        self.hour_tab.selected = picker.active_time_unit == TimeUnit.HOUR
        self.minute_tab.selected = picker.active_time_unit == TimeUnit.MINUTE
        self._update_button_colors()

    def _select_hour(self, face):
        self.picker.change_hour(face)
        self.picker.select_hour(face.time)

    def _select_minute(self, face):
        self.picker.change_minute(face)

    def _update_button_colors(self):
        """Highlight the selected dial value and period"""
        picker = self.picker
        if picker.active_time_unit == TimeUnit.HOUR:
            current = picker.selected_hour.time
        else:
            current = picker.selected_minute.time
        for btn in self.dial_buttons:
            btn.selected = btn.face.time == current
        for period, btn in self.period_buttons.items():
            btn.selected = period == picker.selected_period

    def _update_display(self):
        picker = self.picker
        text = f"{picker.selected_hour.time:02d}:{picker.selected_minute.time:02d}"
        if picker.format == TimeFormat.TWELVE:
            text = f"{text} {TimePeriod(picker.selected_period).value}"
        self.time_display.text = text
