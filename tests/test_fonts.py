import pytest

from chipeight.fonts import (
    FONTSET,
    HIRES_FONTSET,
    glyph_address,
    hires_glyph_address,
    install_fonts,
)


@pytest.fixture
def ram():
    memory = bytearray(4096)
    install_fonts(memory)
    return memory


def test_font_sizes(ram):
    assert bytes(ram[0:80]) == FONTSET
    assert len(bytes(ram[0:80])) == 80
    assert bytes(ram[0x100:0x100 + 100]) == HIRES_FONTSET
    assert len(bytes(ram[0x100:0x100 + 100])) == 100


def test_zero_glyph_at_start(ram):
    assert glyph_address(0) == 0
    assert ram[0:5] == bytes([0xF0, 0x90, 0x90, 0x90, 0xF0])


def test_hex_a_glyph(ram):
    addr = glyph_address(0xA)
    assert ram[addr:addr + 5] == bytes([0xF0, 0x90, 0xF0, 0x90, 0x90])


def test_hires_zero_glyph(ram):
    addr = hires_glyph_address(0)
    assert addr == 0x100
    assert ram[addr:addr + 10] == bytes(
        [0x3C, 0x7E, 0xE7, 0xC3, 0xC3, 0xC3, 0xC3, 0xE7, 0x7E, 0x3C]
    )


def test_hires_nine_glyph(ram):
    addr = hires_glyph_address(9)
    assert ram[addr:addr + 10] == bytes(
        [0x3C, 0x7E, 0xC3, 0xC3, 0x7F, 0x3F, 0x03, 0x03, 0x3E, 0x7C]
    )


def test_glyphs_are_contiguous():
    steps = {glyph_address(d + 1) - glyph_address(d) for d in range(15)}
    hires_steps = {
        hires_glyph_address(d + 1) - hires_glyph_address(d) for d in range(9)
    }
    assert steps == {5}
    assert hires_steps == {10}


def test_fonts_roundtrip(ram):
    assert bytes(ram[glyph_address(0):glyph_address(16)]) == FONTSET
    assert bytes(ram[hires_glyph_address(0):hires_glyph_address(10)]) == HIRES_FONTSET


def test_rest_of_memory_untouched(ram):
    assert bytes(ram[80:0x100]) == bytes(0x100 - 80)
    assert bytes(ram[0x100 + 100:]) == bytes(4096 - 0x100 - 100)


def test_install_overwrites_existing(ram):
    ram[0:80] = bytes(80)
    install_fonts(ram)
    assert bytes(ram[0:80]) == FONTSET


def test_memory_too_small():
    with pytest.raises(ValueError):
        install_fonts(bytearray(0x100))