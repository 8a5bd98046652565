"""
Overlay service for mounting the picker view on top of the window.
"""
import logging

logger = logging.getLogger(__name__)


class OverlayService:
    """Adds the picker view to the window while the picker is open"""

    def __init__(self, window=None, view_factory=None):
        """
        Initialize overlay service.

        Args:
            window: Window to mount on; defaults to kivy's Window
            view_factory: Callable building the view as view_factory(picker=picker)
        """
        self._window = window
        self._view_factory = view_factory
        self._view = None
        self._picker = None

    @property
    def window(self):
        if self._window is None:
            from kivy.core.window import Window
            self._window = Window
        return self._window

    @property
    def is_mounted(self) -> bool:
        return self._view is not None

    @property
    def view(self):
        return self._view

    def append_picker(self, picker):
        """
        Build the view for a picker and mount it.

        Args:
            picker: Timepicker the view renders; its key handler is bound to the window
        """
        if self._view is not None:
            logger.warning("[OVERLAY] Picker view already mounted, replacing it")
            self.destroy_picker()

        factory = self._view_factory
        if factory is None:
            # Import here to avoid circular imports
            from ..presentation.popups.timepicker_popup import TimepickerPopup
            factory = TimepickerPopup

        self._picker = picker
        self._view = factory(picker=picker)
        self.window.add_widget(self._view)
        self.window.bind(on_key_down=picker.handle_keydown)
        logger.debug("[OVERLAY] Picker view mounted")

    def destroy_picker(self):
        """Unmount the current view; does nothing if none is mounted"""
        if self._view is None:
            return
        self.window.unbind(on_key_down=self._picker.handle_keydown)
        self.window.remove_widget(self._view)
        self._view = None
        self._picker = None
        logger.debug("[OVERLAY] Picker view removed")
