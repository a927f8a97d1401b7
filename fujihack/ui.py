"""A small immediate-mode menu engine drawn onto a framebuffer."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable

from fujihack.framebuffer import Framebuffer
from fujihack.fuji import FujiKey, InputMap

MAX_CONTAINER = 5

BUTTON_HEIGHT = 48
BUTTON_COLOR = 0x222222
BUTTON_SELECTED_COLOR = 0x666666
BUTTON_TEXT_COLOR = 0xFFFFFF
_BUTTON_TEXT_INSET = 14
_TEXT_PADDING = 7
_TEXT_LINE = 20


class Button(IntEnum):
    """Abstract buttons the menu reacts to."""

    NONE = 0
    QUIT = 1
    UP = 2
    DOWN = 3
    LEFT = 4
    RIGHT = 5
    OK = 6


_BUTTON_KEYS = {
    Button.QUIT: FujiKey.DISPBACK,
    Button.DOWN: FujiKey.DOWN,
    Button.UP: FujiKey.UP,
    Button.LEFT: FujiKey.LEFT,
    Button.RIGHT: FujiKey.RIGHT,
    Button.OK: FujiKey.OK,
}


def button_to_key(button: int) -> int:
    """Return the camera key code for ``button``; unknown values pass through."""
    return int(_BUTTON_KEYS.get(button, button))


def key_is_down(input_map: InputMap, button: int) -> bool:
    """Whether ``input_map`` shows ``button`` as currently pressed."""
    return input_map.key_code == button_to_key(button) and input_map.key_status == 0


Renderer = Callable[["Ui"], object]


class Ui:
    """Layout state and widgets for one menu screen.

    ``key_pressed`` is called with a :class:`Button` and reports whether it is
    held. A renderer is called with the ``Ui`` and returns 1 to stop.
    """

    def __init__(self, screen: Framebuffer, key_pressed: Callable[[Button], bool]) -> None:
        self.screen = screen
        self.key_pressed = key_pressed
        self.select_x = 0
        self.select_y = 0
        self.reset()

    def reset(self) -> None:
        """Clear the layout; the selection is kept."""
        self.x = [0] * MAX_CONTAINER
        self.y = [0] * MAX_CONTAINER
        self.padded = [False] * MAX_CONTAINER
        self.cur = 0
        self.index_x = 0
        self.index_y = 0
        self.interacted = False

    def process_key(self) -> Button:
        """Read the buttons once, move the selection, and return what was pressed."""
        if self.key_pressed(Button.QUIT):
            return Button.QUIT
        if self.key_pressed(Button.DOWN):
            self.select_y = (self.select_y + 1) & 0xFF
            return Button.DOWN
        if self.key_pressed(Button.UP):
            self.select_y = (self.select_y - 1) & 0xFF
            return Button.UP
        if self.key_pressed(Button.OK):
            self.interacted = True
            return Button.OK
        return Button.NONE

    def update(self, renderer: Renderer) -> bool:
        """Render, re-rendering once if the selection ran past the last item."""
        if renderer(self) == 1:
            return True
        if self.select_y >= self.index_y:
            self.select_y = 0
            self.reset()
            if renderer(self) == 1:
                return True
        return False

    def frame(self, renderer: Renderer) -> bool:
        """Process one key event and redraw; return True when the menu should close."""
        self.reset()
        key = self.process_key()
        if key is Button.QUIT:
            return True
        self.screen.clear(0)
        result = self.update(renderer)
        if key is not Button.NONE:
            while self.key_pressed(key):
                time.sleep(0.001)
        return result

    def container(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Open a filled container; zero arguments take the available space."""
        if self.cur + 1 >= MAX_CONTAINER:
            raise RuntimeError(f"at most {MAX_CONTAINER - 1} nested containers")
        if x == 0:
            x = self.x[self.cur]
        if y == 0:
            y = self.y[self.cur]
        if width == 0:
            width = self.screen.width - self.x[self.cur]
        if height == 0:
            height = self.screen.height - self.y[self.cur]

        self.screen.fill_rect(x, y, width, height, color)

        if x + width == self.screen.width:
            x = 0
            width = 0

        self.x[self.cur] = x + width
        self.y[self.cur] = y + height
        self.padded[self.cur] = False

        self.cur += 1
        self.x[self.cur] = x
        self.y[self.cur] = y
        self.padded[self.cur] = False
        self.index_x = (self.index_x + 1) & 0xFF

    def end_container(self) -> None:
        """Close the innermost container."""
        if self.cur == 0:
            raise RuntimeError("no open container")
        self.cur -= 1

    def button(self, text: str) -> bool:
        """Draw a full-width button; return True when it was activated."""
        selected = self.index_y == self.select_y
        bg = BUTTON_SELECTED_COLOR if selected else BUTTON_COLOR
        x, y = self.x[self.cur], self.y[self.cur]
        self.screen.fill_rect(x, y, self.screen.width, BUTTON_HEIGHT, bg)
        self.screen.draw_string(
            x + _BUTTON_TEXT_INSET, y + _BUTTON_TEXT_INSET, text, BUTTON_TEXT_COLOR
        )
        self.x[self.cur] = 0
        self.y[self.cur] += BUTTON_HEIGHT
        self.index_y = (self.index_y + 1) & 0xFF
        return selected and self.interacted

    def text(self, text: str, color: int) -> None:
        """Draw a line of text below the previous widget."""
        if not self.padded[self.cur]:
            self.x[self.cur] += _TEXT_PADDING
            self.y[self.cur] += _TEXT_PADDING
            self.padded[self.cur] = True
        else:
            self.y[self.cur] += _TEXT_LINE
        self.screen.draw_string(self.x[self.cur], self.y[self.cur], text, color)
        self.y[self.cur] += _TEXT_LINE