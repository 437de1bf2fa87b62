"""Windowed front end: variant menu, keyboard mapping, drawing and the main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

from .config import Chip8Variant, DisplayMode, ticks_per_frame
from .cpu import Cpu, InterpreterExit
from .display import SCREEN_HEIGHT, SCREEN_WIDTH, Display

DEFAULT_SCALE = 10
WINDOW_TITLE = "Chip-8 Emulator"
FRAMES_PER_SECOND = 60

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (253, 249, 0)
GREEN = (0, 228, 48)

# Keyboard keys for CHIP-8 keys 0x0..0xF, by pygame key name.
KEY_NAMES = (
    "x", "1", "2", "3",
    "q", "w", "e", "a",
    "s", "d", "z", "c",
    "4", "r", "f", "v",
)

_VARIANTS = {
    "chip8": Chip8Variant.CHIP8,
    "superchip": Chip8Variant.SUPERCHIP,
}


def _variant_arg(text: str) -> Chip8Variant:
    try:
        return _VARIANTS[text.lower()]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"unknown variant {text!r}; choose from {', '.join(_VARIANTS)}"
        ) from None


def _scale_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError("scale must be positive")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line: a ROM path, an optional variant and a scale."""
    parser = argparse.ArgumentParser(prog="chipeight", description="Run a CHIP-8 program.")
    parser.add_argument("rom", help="path of the program to run (.ch8, .rom)")
    parser.add_argument(
        "--variant",
        type=_variant_arg,
        default=None,
        help="chip8 or superchip; asked for in a menu when omitted",
    )
    parser.add_argument(
        "--scale",
        type=_scale_arg,
        default=DEFAULT_SCALE,
        help=f"window pixels per screen pixel (default {DEFAULT_SCALE})",
    )
    return parser.parse_args(argv)


def load_rom(path: str | Path) -> bytes:
    """Read a program file whole."""
    return Path(path).read_bytes()


def pixel_rects(display: Display, scale: int) -> Iterator[tuple[int, int, int, int]]:
    """Yield ``(left, top, width, height)`` window rectangles for lit pixels."""
    for x, y in display.lit_pixels():
        yield (x * scale, y * scale, scale, scale)


def draw_screen(surface: Any, cpu: Cpu, scale: int) -> None:
    """Paint the machine's screen onto ``surface``."""
    surface.fill(BLACK)
    for rect in pixel_rects(cpu.display, scale):
        surface.fill(WHITE, rect)


def _key_codes() -> list[int]:
    import pygame

    return [pygame.key.key_code(name) for name in KEY_NAMES]


def choose_variant(screen: Any, font: Any) -> Optional[Chip8Variant]:
    """Show the variant menu until Enter confirms a choice; None if the user quits."""
    import pygame

    clock = pygame.time.Clock()
    variant: Optional[Chip8Variant] = None
    lines = (
        ("Chip-8 Emulator", (156, 30), WHITE),
        ("Press [1] for Chip-8", (189, 85), WHITE),
        ("Press [2] for SuperChip", (169, 115), WHITE),
        ("Press [Enter] to load ROM", (156, 185), YELLOW),
    )
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return None
            if event.key == pygame.K_1:
                variant = Chip8Variant.CHIP8
            elif event.key == pygame.K_2:
                variant = Chip8Variant.SUPERCHIP
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER) and variant is not None:
                return variant

        screen.fill(BLACK)
        for text, position, colour in lines:
            screen.blit(font.render(text, True, colour), position)
        if variant is not None:
            screen.blit(font.render(str(variant), True, GREEN), (40, 265))
        pygame.display.flip()
        clock.tick(FRAMES_PER_SECOND)


def run(cpu: Cpu, variant: Chip8Variant, scale: int = DEFAULT_SCALE) -> None:
    """Drive the machine frame by frame until the window closes or Escape is pressed."""
    import pygame

    display = cpu.display
    screen = pygame.display.set_mode((display.width * scale, display.height * scale))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    codes = _key_codes()
    cycles = ticks_per_frame(variant)
    previous_mode = DisplayMode.LORES

    try:
        while True:
            quit_requested = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    quit_requested = True
            if quit_requested:
                return

            pressed = pygame.key.get_pressed()
            for index, code in enumerate(codes):
                cpu.keypress(index, bool(pressed[code]))

            for _ in range(cycles):
                cpu.tick()
            cpu.tick_timers()

            display = cpu.display
            if display.mode is not previous_mode:
                screen = pygame.display.set_mode(
                    (display.width * scale, display.height * scale)
                )
                previous_mode = display.mode

            draw_screen(screen, cpu, scale)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    except InterpreterExit:
        return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = parse_args(argv)
    try:
        rom = load_rom(args.rom)
    except OSError as exc:
        print(f"chipeight: cannot read {args.rom}: {exc}", file=sys.stderr)
        return 1

    import pygame

    pygame.init()
    try:
        variant = args.variant
        if variant is None:
            screen = pygame.display.set_mode(
                (SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * args.scale)
            )
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.Font(None, 36)
            variant = choose_variant(screen, font)
            if variant is None:
                return 0

        from .audio import AudioManager

        try:
            audio: Optional[AudioManager] = AudioManager()
        except pygame.error:
            audio = None

        cpu = Cpu(variant, audio)
        try:
            cpu.load(rom)
        except ValueError as exc:
            print(f"chipeight: {exc}", file=sys.stderr)
            return 1
        run(cpu, variant, args.scale)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())