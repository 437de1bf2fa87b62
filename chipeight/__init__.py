"""CHIP-8 and SuperChip emulator with a pygame front end."""

__version__ = "0.1.0"
__all__ = ["app", "audio", "config", "cpu", "display", "fonts"]