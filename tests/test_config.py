import pytest

from chipeight.config import Chip8Variant, DisplayMode, Quirks, ticks_per_frame


def test_chip8_quirks():
    assert Quirks.for_variant(Chip8Variant.CHIP8) == Quirks(
        vf_reset=True, memory=True, shifting=False, jumping=False
    )


def test_superchip_quirks():
    assert Quirks.for_variant(Chip8Variant.SUPERCHIP) == Quirks(
        vf_reset=False, memory=False, shifting=True, jumping=True
    )


def test_variants_have_opposite_quirks():
    a = Quirks.for_variant(Chip8Variant.CHIP8)
    b = Quirks.for_variant(Chip8Variant.SUPERCHIP)
    assert all(
        getattr(a, name) != getattr(b, name)
        for name in ("vf_reset", "memory", "shifting", "jumping")
    )


def test_unknown_variant_rejected():
    with pytest.raises(ValueError):
        Quirks.for_variant("Chip8")


def test_quirks_are_immutable():
    quirks = Quirks.for_variant(Chip8Variant.CHIP8)
    with pytest.raises(AttributeError):
        quirks.memory = False
    assert quirks.memory is True
    assert quirks == Quirks.for_variant(Chip8Variant.CHIP8)


@pytest.mark.parametrize(
    "variant, expected",
    [(Chip8Variant.CHIP8, 8), (Chip8Variant.SUPERCHIP, 16)],
)
def test_ticks_per_frame(variant, expected):
    assert ticks_per_frame(variant) == expected


def test_variant_names_match_display():
    chip8 = Chip8Variant("Chip8")
    superchip = Chip8Variant("SuperChip")
    assert chip8 is Chip8Variant.CHIP8
    assert superchip is Chip8Variant.SUPERCHIP
    assert str(chip8) == "Chip8"
    assert str(superchip) == "SuperChip"


def test_display_modes_distinct():
    assert DisplayMode("LoRes") is DisplayMode.LORES
    assert DisplayMode("HiRes") is DisplayMode.HIRES