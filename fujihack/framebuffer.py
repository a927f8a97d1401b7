"""An RGBA framebuffer with rectangle, text and BMP drawing."""

from __future__ import annotations

import struct
from typing import Callable, Optional

from fujihack.font import DESCENDERS, GLYPH_HEIGHT, glyph, glyph_width

Shader = Callable[[int, int, int], int]

_SPACE_ADVANCE = 5
_CHAR_GAP = 3
_BMP_HEADER_SIZE = 30


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def blue_shade(r: int, g: int, b: int) -> int:
    """Shader that tints pure black blue and leaves other colours alone."""
    if r == 0 and g == 0 and b == 0:
        return (r << 16) | (g << 8) | (b + 100)
    return (r << 16) | (g << 8) | b


class Framebuffer:
    """A grid of 32-bit pixel words.

    ``pixel`` stores an ``0xRRGGBB`` colour as ``0xRRGGBBAA`` with full alpha;
    ``clear`` stores its word unchanged. Drawing outside the grid is clipped.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid framebuffer size: {width}x{height}")
        self.width = width
        self.height = height
        self.font_size = 2
        self._pixels = [0] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int, rgb: int) -> None:
        """Set one pixel to ``rgb`` with full alpha."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = ((rgb << 8) | 0xFF) & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored word at ``(x, y)``."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self._pixels[y * self.width + x]

    def clear(self, rgb: int) -> None:
        """Fill the whole buffer with the word ``rgb``."""
        self._pixels = [rgb & 0xFFFFFFFF] * (self.width * self.height)

    def fill_rect(self, x: int, y: int, width: int, height: int, rgb: int) -> None:
        """Fill a ``width`` by ``height`` rectangle whose corner is ``(x, y)``."""
        for py in range(max(y, 0), min(y + height, self.height)):
            for px in range(max(x, 0), min(x + width, self.width)):
                self.pixel(px, py, rgb)

    def draw_char(self, x: int, y: int, char: str, color: int) -> int:
        """Draw ``char`` at font-unit position ``(x, y)``; return its lit width."""
        size = self.font_size
        rows = glyph(char)
        if char in DESCENDERS:
            y += size
        for py, row in enumerate(rows):
            for px, cell in enumerate(row):
                if cell != "#":
                    continue
                if size == 1:
                    self.pixel(x + px, y + py, color)
                else:
                    self.fill_rect((x + px) * size, (y + py) * size, size, size, color)
        return glyph_width(char)

    def draw_string(self, x: int, y: int, text: str, color: int) -> int:
        """Draw ``text`` starting at pixel ``(x, y)``; return the final column in font units."""
        size = self.font_size
        cx = _trunc_div(x, size)
        cy = _trunc_div(y, size)
        for char in text:
            if char == "\n":
                cx = _trunc_div(x, size)
                cy += GLYPH_HEIGHT + size
            elif char == " ":
                cx += _SPACE_ADVANCE
            else:
                cx += self.draw_char(cx, cy, char, color) + _CHAR_GAP
        return cx

    def render_bmp(
        self, data: bytes, x: int, y: int, shader: Optional[Shader] = None
    ) -> int:
        """Draw an uncompressed bottom-up BMP image at ``(x, y)``; return its width."""
        if len(data) < _BMP_HEADER_SIZE:
            raise ValueError("BMP data too short for its header")
        (pixel_offset,) = struct.unpack_from("<I", data, 10)
        width, height = struct.unpack_from("<II", data, 18)
        (bits,) = struct.unpack_from("<H", data, 28)
        bytes_per_pixel = bits // 8
        if bytes_per_pixel < 3:
            raise ValueError(f"unsupported BMP pixel depth: {bits} bits")
        padding = (4 - (width * bytes_per_pixel) % 4) % 4
        row_size = width * bytes_per_pixel + padding
        if pixel_offset + height * row_size - padding > len(data):
            raise ValueError("BMP pixel data is truncated")

        for i in range(height):
            row = pixel_offset + (height - 1 - i) * row_size
            for j in range(width):
                start = row + j * bytes_per_pixel
                blue, green, red = data[start], data[start + 1], data[start + 2]
                if shader is None:
                    color = (red << 16) | (green << 8) | blue
                else:
                    color = shader(red, green, blue)
                self.pixel(x + j, y + i, color)
        return width

    def render_bmp_selected(self, data: bytes, x: int, y: int) -> int:
        """Draw a BMP image with black areas tinted to mark it as selected."""
        return self.render_bmp(data, x, y, blue_shade)