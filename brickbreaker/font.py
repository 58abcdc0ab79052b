"""Fixed-width bitmap font layout."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .geometry import Rect, Vec2

WHITE = (255, 255, 255)

N_COLUMNS = 32
N_ROWS = 3
FIRST_CHAR = " "
LAST_CHAR = "~"


def longest_line_length(text: str) -> int:
    """Number of characters in the longest line."""
    return max(len(line) for line in text.split("\n"))


def line_count(text: str) -> int:
    """Number of lines, one more than the number of newlines."""
    return text.count("\n") + 1


class Font:
    """A font sheet of 32 by 3 glyphs starting at the space character."""

    def __init__(
        self,
        glyph_width: int,
        glyph_height: int,
        *,
        chroma: tuple[int, int, int] = WHITE,
        surface: Any = None,
    ) -> None:
        if glyph_width <= 0 or glyph_height <= 0:
            raise ValueError("glyph dimensions must be positive")
        self.glyph_width = glyph_width
        self.glyph_height = glyph_height
        self.chroma = chroma
        self.surface = surface

    @classmethod
    def for_sheet(
        cls,
        sheet_width: int,
        sheet_height: int,
        *,
        chroma: tuple[int, int, int] = WHITE,
        surface: Any = None,
    ) -> Font:
        """Font whose glyph size is derived from the size of its sheet."""
        if sheet_width % N_COLUMNS or sheet_height % N_ROWS:
            raise ValueError(
                f"sheet size {sheet_width}x{sheet_height} is not a {N_COLUMNS}x{N_ROWS} grid"
            )
        return cls(
            sheet_width // N_COLUMNS,
            sheet_height // N_ROWS,
            chroma=chroma,
            surface=surface,
        )

    @property
    def char_width(self) -> int:
        return self.glyph_width

    @property
    def char_height(self) -> int:
        return self.glyph_height

    def glyph_rect(self, character: str) -> Rect:
        """Rectangle of the glyph for character within the sheet."""
        if len(character) != 1 or not FIRST_CHAR <= character <= LAST_CHAR:
            raise ValueError(f"character not on the font sheet: {character!r}")
        index = ord(character) - ord(FIRST_CHAR)
        row, column = divmod(index, N_COLUMNS)
        return Rect.from_pos_size(
            Vec2(column * self.glyph_width, row * self.glyph_height),
            self.glyph_width,
            self.glyph_height,
        )

    def text_rect(self, text: str, pos: Vec2 = Vec2(0, 0)) -> Rect:
        """Area covered by text drawn at pos."""
        return Rect.from_pos_size(
            pos,
            self.glyph_width * longest_line_length(text),
            self.glyph_height * line_count(text),
        )

    def layout(
        self, text: str, pos: Vec2, line_spacing: int = 0
    ) -> Iterator[tuple[Vec2, Rect]]:
        """Yield screen position and sheet rectangle for each visible glyph."""
        x, y = pos.x, pos.y
        for character in text:
            if character == "\n":
                x = pos.x
                y += self.glyph_height + line_spacing
                continue
            if FIRST_CHAR < character <= LAST_CHAR:
                yield Vec2(x, y), self.glyph_rect(character)
            x += self.glyph_width

    def layout_centered(
        self, text: str, pos: Vec2, line_spacing: int = 0
    ) -> Iterator[tuple[Vec2, Rect]]:
        """Like layout, with the text's box centred on pos."""
        box = self.text_rect(text)
        offset = Vec2(int(box.width) // 2, int(box.height) // 2)
        return self.layout(text, pos - offset, line_spacing)