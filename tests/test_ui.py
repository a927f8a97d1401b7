import pytest

from fujihack.framebuffer import Framebuffer
from fujihack.fuji import FujiKey, InputMap
from fujihack.ui import (
    BUTTON_COLOR,
    BUTTON_HEIGHT,
    BUTTON_SELECTED_COLOR,
    MAX_CONTAINER,
    Button,
    Ui,
    button_to_key,
    key_is_down,
)


class Keys:
    """Each pressed button stays down for a fixed number of queries."""

    def __init__(self):
        self.remaining = {}

    def press(self, button, queries=1):
        self.remaining[button] = queries

    def __call__(self, button):
        left = self.remaining.get(button, 0)
        if left > 0:
            self.remaining[button] = left - 1
            return True
        return False


def make_ui():
    keys = Keys()
    return Ui(Framebuffer(160, 120), keys), keys


def stored(rgb):
    return ((rgb << 8) | 0xFF) & 0xFFFFFFFF


def test_button_to_key_mapping():
    assert button_to_key(Button.QUIT) == FujiKey.DISPBACK
    assert button_to_key(Button.OK) == FujiKey.OK
    assert button_to_key(Button.DOWN) == FujiKey.DOWN
    assert button_to_key(Button.NONE) == 0


def test_key_is_down():
    held = InputMap(key_code=FujiKey.DISPBACK, key_status=0)
    released = InputMap(key_code=FujiKey.DISPBACK, key_status=0x80)
    assert key_is_down(held, Button.QUIT)
    assert not key_is_down(released, Button.QUIT)
    assert not key_is_down(held, Button.OK)


def test_selected_button_is_highlighted():
    ui, _ = make_ui()
    ui.button("One")
    ui.button("Two")
    assert ui.screen.get_pixel(0, 0) == stored(BUTTON_SELECTED_COLOR)
    assert ui.screen.get_pixel(0, BUTTON_HEIGHT) == stored(BUTTON_COLOR)
    assert ui.index_y == 2


def test_ok_activates_selected_button():
    ui, keys = make_ui()
    clicked = []

    def menu(u):
        if u.button("One"):
            clicked.append("One")
        if u.button("Two"):
            clicked.append("Two")
        return 0

    keys.press(Button.OK)
    assert ui.frame(menu) is False
    assert clicked == ["One"]


def test_down_moves_selection_and_wraps():
    ui, keys = make_ui()

    def menu(u):
        u.button("One")
        u.button("Two")
        return 0

    keys.press(Button.DOWN)
    ui.frame(menu)
    assert ui.select_y == 1
    keys.press(Button.DOWN)
    ui.frame(menu)
    assert ui.select_y == 0


def test_up_from_top_returns_to_first_item():
    ui, keys = make_ui()
    calls = []

    def menu(u):
        calls.append(1)
        u.button("One")
        u.button("Two")
        return 0

    keys.press(Button.UP)
    ui.frame(menu)
    assert ui.select_y == 0
    assert len(calls) == 2


def test_quit_closes_without_rendering():
    ui, keys = make_ui()
    calls = []
    keys.press(Button.QUIT)
    assert ui.frame(lambda u: calls.append(1)) is True
    assert calls == []


def test_renderer_can_stop():
    ui, _ = make_ui()
    assert ui.update(lambda u: 1) is True


def test_frame_waits_for_release():
    ui, keys = make_ui()
    keys.press(Button.DOWN, queries=3)
    ui.frame(lambda u: (u.button("A"), u.button("B"), u.button("C")) and 0)
    assert keys.remaining[Button.DOWN] == 0


def test_text_moves_down_each_line():
    ui, _ = make_ui()
    ui.text("a", 0xFFFFFF)
    first = ui.y[0]
    ui.text("b", 0xFFFFFF)
    second = ui.y[0]
    assert second > first
    assert ui.x[0] == 7


def test_container_nesting_and_limits():
    ui, _ = make_ui()
    for _ in range(MAX_CONTAINER - 1):
        ui.container(0, 0, 0, 0, 0x101010)
    assert ui.cur == MAX_CONTAINER - 1
    with pytest.raises(RuntimeError):
        ui.container(0, 0, 0, 0, 0x101010)
    for _ in range(MAX_CONTAINER - 1):
        ui.end_container()
    with pytest.raises(RuntimeError):
        ui.end_container()


def test_container_fills_area():
    ui, _ = make_ui()
    ui.container(10, 10, 20, 20, 0x123456)
    assert ui.screen.get_pixel(15, 15) == stored(0x123456)
    assert ui.x[ui.cur] == 10
    assert ui.y[ui.cur] == 10


def test_reset_keeps_selection():
    ui, _ = make_ui()
    ui.select_y = 1
    ui.button("x")
    ui.reset()
    assert ui.index_y == 0
    assert ui.select_y == 1