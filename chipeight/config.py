"""Machine variants, per-variant instruction quirks and display modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Chip8Variant(Enum):
    """The machine flavours the interpreter can emulate."""

    CHIP8 = "Chip8"
    SUPERCHIP = "SuperChip"

    def __str__(self) -> str:
        return self.value


class DisplayMode(Enum):
    """Screen resolution modes."""

    LORES = "LoRes"
    HIRES = "HiRes"


@dataclass(frozen=True)
class Quirks:
    """Behavioural differences between variants for a few instructions.

    vf_reset: 8XY1/8XY2/8XY3 clear VF.
    memory:   FX55/FX65 advance I while storing or loading.
    shifting: 8XY6/8XYE shift VX in place instead of copying VY first.
    jumping:  BNNN jumps to VX + NNN instead of V0 + NNN.
    """

    vf_reset: bool
    memory: bool
    shifting: bool
    jumping: bool

    @classmethod
    def for_variant(cls, variant: Chip8Variant) -> "Quirks":
        """Return the quirk set used by ``variant``."""
        if variant is Chip8Variant.CHIP8:
            return cls(vf_reset=True, memory=True, shifting=False, jumping=False)
        if variant is Chip8Variant.SUPERCHIP:
            return cls(vf_reset=False, memory=False, shifting=True, jumping=True)
        raise ValueError(f"unknown variant: {variant!r}")


def ticks_per_frame(variant: Chip8Variant) -> int:
    """Number of CPU cycles to run per displayed frame."""
    return 16 if variant is Chip8Variant.SUPERCHIP else 8