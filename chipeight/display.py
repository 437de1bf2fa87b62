"""Monochrome frame buffer with sprite drawing and scrolling."""

from __future__ import annotations

from typing import Iterable, Iterator

from .config import DisplayMode

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

_SIZES = {
    DisplayMode.LORES: (SCREEN_WIDTH, SCREEN_HEIGHT),
    DisplayMode.HIRES: (128, 64),
}

_SCROLL_COLUMNS = 4


class Display:
    """A grid of on/off pixels in either low or high resolution."""

    def __init__(self) -> None:
        self._mode = DisplayMode.LORES
        self._width, self._height = _SIZES[self._mode]
        self._rows: list[list[bool]] = self._blank_rows(self._height)

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> tuple[bool, ...]:
        """All pixels in row-major order."""
        return tuple(p for row in self._rows for p in row)

    def _blank_rows(self, count: int) -> list[list[bool]]:
        return [[False] * self._width for _ in range(count)]

    def set_mode(self, mode: DisplayMode) -> None:
        """Switch resolution; the screen is cleared."""
        if mode not in _SIZES:
            raise ValueError(f"unknown display mode: {mode!r}")
        self._mode = mode
        self._width, self._height = _SIZES[mode]
        self.clear()

    def clear(self) -> None:
        """Turn every pixel off."""
        self._rows = self._blank_rows(self._height)

    def scroll_down(self, rows: int) -> None:
        """Move the picture down by ``rows``, blanking the top."""
        if rows < 0:
            raise ValueError("rows must not be negative")
        rows = min(rows, self._height)
        kept = self._rows[: self._height - rows]
        self._rows = self._blank_rows(rows) + kept

    def scroll_right(self) -> None:
        """Move the picture right by four pixels, blanking the left edge."""
        shift = min(_SCROLL_COLUMNS, self._width)
        self._rows = [
            [False] * shift + row[: self._width - shift] for row in self._rows
        ]

    def scroll_left(self) -> None:
        """Move the picture left by four pixels, blanking the right edge."""
        shift = min(_SCROLL_COLUMNS, self._width)
        self._rows = [row[shift:] + [False] * shift for row in self._rows]

    def draw_sprite(self, x: int, y: int, rows: Iterable[int], wide: bool = False) -> bool:
        """XOR a sprite onto the screen and report whether any lit pixel went off.

        ``rows`` holds one bitmap per sprite row, 8 bits wide (or 16 when
        ``wide``), most significant bit leftmost. The origin wraps around
        the screen; the sprite itself is clipped at the right and bottom.
        """
        columns = 16 if wide else 8
        origin_x = x % self._width
        origin_y = y % self._height
        collided = False
        for dy, bits in enumerate(rows):
            py = origin_y + dy
            if py >= self._height:
                break
            line = self._rows[py]
            for dx in range(columns):
                px = origin_x + dx
                if px >= self._width:
                    break
                if (bits >> (columns - 1 - dx)) & 1:
                    collided |= line[px]
                    line[px] = not line[px]
        return collided

    def pixel(self, x: int, y: int) -> bool:
        """State of the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is off the screen")
        return self._rows[y][x]

    def lit_pixels(self) -> Iterator[tuple[int, int]]:
        """Yield ``(x, y)`` for every lit pixel, row by row."""
        for y, row in enumerate(self._rows):
            for x, on in enumerate(row):
                if on:
                    yield (x, y)