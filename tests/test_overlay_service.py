"""Tests for the overlay mounting service."""

import pytest

from kivy_timepicker.services.overlay_service import OverlayService


class FakeWindow:
    """Window stand-in recording widgets and key bindings"""

    def __init__(self):
        self.children = []
        self.key_handlers = []

    def add_widget(self, widget):
        self.children.append(widget)

    def remove_widget(self, widget):
        self.children.remove(widget)

    def bind(self, on_key_down):
        self.key_handlers.append(on_key_down)

    def unbind(self, on_key_down):
        self.key_handlers.remove(on_key_down)


class FakePicker:
    def handle_keydown(self, window, key, *args):
        return True


class FakeView:
    def __init__(self, picker):
        self.picker = picker


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def overlay_service(window):
    return OverlayService(window=window, view_factory=FakeView)


class TestOverlayService:
    """Mounting and unmounting the picker view"""

    def test_append_mounts_view(self, overlay_service, window):
        picker = FakePicker()
        overlay_service.append_picker(picker)

        assert overlay_service.is_mounted
        assert window.children == [overlay_service.view]
        assert overlay_service.view.picker is picker
        assert window.key_handlers == [picker.handle_keydown]

    def test_destroy_unmounts_view(self, overlay_service, window):
        overlay_service.append_picker(FakePicker())
        overlay_service.destroy_picker()

        assert not overlay_service.is_mounted
        assert window.children == []
        assert window.key_handlers == []

    def test_destroy_without_view(self, overlay_service, window):
        overlay_service.destroy_picker()
        assert window.children == []

    def test_append_twice_replaces_view(self, overlay_service, window):
        overlay_service.append_picker(FakePicker())
        second = FakePicker()
        overlay_service.append_picker(second)

        assert len(window.children) == 1
        assert window.children[0].picker is second
        assert window.key_handlers == [second.handle_keydown]
