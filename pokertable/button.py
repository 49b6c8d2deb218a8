"""Rectangular text buttons that react to mouse clicks."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
GREY: Color = (192, 192, 192)

GLYPH_SIZE = 8


def text_size(text: str) -> tuple[int, int]:
    """Width and height in pixels of text drawn at scale 1."""
    lines = text.split("\n")
    return max(len(line) for line in lines) * GLYPH_SIZE, len(lines) * GLYPH_SIZE


@dataclass
class Button:
    """A labelled button whose size follows from its text and scale."""

    x: int
    y: int
    scale: int
    text: str
    border_color: Color = BLACK
    fill_color: Color = WHITE

    @property
    def width(self) -> int:
        return text_size(self.text)[0] * self.scale

    @property
    def height(self) -> int:
        return text_size(self.text)[1] * self.scale

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies within the button, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def is_clicked(self, x: int, y: int, pressed: bool) -> bool:
        """Whether the left mouse button was just pressed over the button."""
        return pressed and self.contains(x, y)