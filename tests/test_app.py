import pytest

from chipeight.app import (
    BLACK,
    DEFAULT_SCALE,
    WHITE,
    draw_screen,
    load_rom,
    main,
    parse_args,
    pixel_rects,
)
from chipeight.config import Chip8Variant
from chipeight.cpu import Cpu
from chipeight.display import Display


class _RecordingSurface:
    def __init__(self):
        self.calls = []

    def fill(self, colour, rect=None):
        self.calls.append((colour, rect))


def test_parse_args_defaults():
    args = parse_args(["game.ch8"])
    assert args.rom == "game.ch8"
    assert args.variant is None
    assert args.scale == DEFAULT_SCALE


@pytest.mark.parametrize(
    "name, expected",
    [("chip8", Chip8Variant.CHIP8), ("superchip", Chip8Variant.SUPERCHIP), ("SuperChip", Chip8Variant.SUPERCHIP)],
)
def test_parse_args_variant(name, expected):
    assert parse_args(["game.ch8", "--variant", name]).variant is expected


def test_parse_args_scale():
    assert parse_args(["game.ch8", "--scale", "4"]).scale == 4


@pytest.mark.parametrize("bad", [["game.ch8", "--scale", "0"], ["game.ch8", "--scale", "x"], ["game.ch8", "--variant", "xo"], []])
def test_parse_args_rejects_bad_input(bad):
    with pytest.raises(SystemExit):
        parse_args(bad)


def test_load_rom_round_trip(tmp_path):
    data = bytes([0x00, 0xE0, 0x12, 0x00, 0xFF])
    path = tmp_path / "prog.ch8"
    path.write_bytes(data)
    assert load_rom(path) == data
    assert load_rom(str(path)) == data


def test_load_rom_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rom(tmp_path / "absent.ch8")


def test_pixel_rects_empty_screen():
    assert list(pixel_rects(Display(), 10)) == []


def test_pixel_rects_single_pixel():
    display = Display()
    display.draw_sprite(2, 3, [0x80])
    assert list(pixel_rects(display, 10)) == [(20, 30, 10, 10)]


def test_pixel_rects_match_lit_pixels():
    display = Display()
    display.draw_sprite(5, 7, [0xF0, 0x90, 0xF0])
    scale = 3
    rects = list(pixel_rects(display, scale))
    assert len(rects) == len(list(display.lit_pixels()))
    assert all(w == scale and h == scale for _, _, w, h in rects)
    assert all(left % scale == 0 and top % scale == 0 for left, top, _, _ in rects)


def test_draw_screen_clears_then_paints_lit_pixels():
    cpu = Cpu()
    cpu.display.draw_sprite(0, 0, [0xC0])
    surface = _RecordingSurface()
    draw_screen(surface, cpu, 10)
    assert surface.calls[0] == (BLACK, None)
    painted = surface.calls[1:]
    assert all(colour == WHITE for colour, _ in painted)
    assert [rect for _, rect in painted] == list(pixel_rects(cpu.display, 10))
    assert len(painted) == 2


def test_draw_screen_blank_only_clears():
    surface = _RecordingSurface()
    draw_screen(surface, Cpu(), 5)
    assert surface.calls == [(BLACK, None)]


def test_main_reports_unreadable_rom(tmp_path, capsys):
    status = main([str(tmp_path / "missing.ch8")])
    assert status == 1
    assert "cannot read" in capsys.readouterr().err