"""Built-in digit sprites and where they live in memory."""

from __future__ import annotations

FONT_ADDRESS = 0x000
HIRES_FONT_ADDRESS = 0x100
GLYPH_SIZE = 5
HIRES_GLYPH_SIZE = 10

# 16 hexadecimal digits, 5 bytes each.
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

# 10 decimal digits for high resolution, 10 bytes each.
HIRES_FONTSET = bytes([
    0x3C, 0x7E, 0xE7, 0xC3, 0xC3, 0xC3, 0xC3, 0xE7, 0x7E, 0x3C,  # 0
    0x18, 0x38, 0x58, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C,  # 1
    0x3E, 0x7F, 0xC3, 0x06, 0x0C, 0x18, 0x30, 0x60, 0xFF, 0xFF,  # 2
    0x3C, 0x7E, 0xC3, 0x03, 0x0E, 0x0E, 0x03, 0xC3, 0x7E, 0x3C,  # 3
    0x06, 0x0E, 0x1E, 0x36, 0x66, 0xC6, 0xFF, 0xFF, 0x06, 0x06,  # 4
    0xFF, 0xFF, 0xC0, 0xC0, 0xFC, 0xFE, 0x03, 0xC3, 0x7E, 0x3C,  # 5
    0x3E, 0x7C, 0xC0, 0xC0, 0xFC, 0xFE, 0xC3, 0xC3, 0x7E, 0x3C,  # 6
    0xFF, 0xFF, 0x03, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x60, 0x60,  # 7
    0x3C, 0x7E, 0xC3, 0xC3, 0x7E, 0x7E, 0xC3, 0xC3, 0x7E, 0x3C,  # 8
    0x3C, 0x7E, 0xC3, 0xC3, 0x7F, 0x3F, 0x03, 0x03, 0x3E, 0x7C,  # 9
])


def install_fonts(ram: bytearray) -> None:
    """Copy both font sets into ``ram`` at their fixed addresses."""
    end = HIRES_FONT_ADDRESS + len(HIRES_FONTSET)
    if len(ram) < end:
        raise ValueError(f"memory too small for fonts: {len(ram)} < {end}")
    ram[FONT_ADDRESS:FONT_ADDRESS + len(FONTSET)] = FONTSET
    ram[HIRES_FONT_ADDRESS:end] = HIRES_FONTSET


def glyph_address(digit: int) -> int:
    """Address of the small sprite for ``digit``."""
    return FONT_ADDRESS + digit * GLYPH_SIZE


def hires_glyph_address(digit: int) -> int:
    """Address of the large sprite for decimal ``digit``."""
    return HIRES_FONT_ADDRESS + digit * HIRES_GLYPH_SIZE