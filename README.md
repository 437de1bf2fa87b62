# chipeight

An emulator for CHIP-8 and SuperChip (SCHIP) programs. It draws the screen and
plays sound through pygame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a program

```
chipeight path/to/game.ch8
```

Options:

- `--variant chip8|superchip` selects the machine. The name is not
  case-sensitive. If you leave it out, a menu opens in the window. Press **1**
  for CHIP-8 or **2** for SuperChip, then press **Enter** to start.
- `--scale N` sets the number of window pixels per screen pixel. The default
  is 10, and the value must be a positive whole number.

Press **Escape** or close the window to quit. The command exits with status 1
in two cases: the program file cannot be read, or the program is too large to
fit in memory. If no audio device is available, the emulator runs without
sound.

The program file must be given on the command line. There is no file picker
for it.

## Variants

| Behaviour                              | CHIP-8 | SuperChip |
|----------------------------------------|--------|-----------|
| `8XY1`/`8XY2`/`8XY3` reset VF          | yes    | no        |
| `FX55`/`FX65` advance I                | yes    | no        |
| `8XY6`/`8XYE` shift VX in place        | no     | yes       |
| `BNNN` jumps to VX + NNN               | no     | yes       |
| Instructions per frame                 | 8      | 16        |
| Hi-res 128×64 mode (`00FE`/`00FF`)     | no     | yes       |
| Scrolling (`00CN`, `00FB`, `00FC`)     | no     | yes       |
| Large digit sprites (`FX30`)           | no     | yes       |

In hi-res mode, `DXY0` draws a 16×16 sprite. Both variants accept the flag
register instructions `FX75` and `FX85`, which act only when X is 7 or less.
Both variants treat `00FD` as exit.

## Keypad

The 16-key hex keypad maps to the left side of a QWERTY keyboard:

```
1 2 3 C        1 2 3 4
4 5 6 D   ->   Q W E R
7 8 9 E        A S D F
A 0 B F        Z X C V
```

## Using the core from Python

The interpreter in `chipeight.cpu` does not need a window:

```python
from chipeight.config import Chip8Variant
from chipeight.cpu import Cpu

cpu = Cpu(Chip8Variant.CHIP8)
cpu.load(bytes([0x60, 0x2A, 0x12, 0x02]))  # V0 = 0x2A, then loop
cpu.tick()
cpu.tick_timers()
print(cpu.v[0], list(cpu.display.lit_pixels()))
```

- `Cpu(variant, audio)` accepts any object with `start_beep()` and
  `stop_beep()` as `audio`. Without one, it runs silently.
- `chipeight.audio.AudioManager` is such an object. It loops a square-wave
  tone built by `make_beep_wav()`.
- `Cpu.keypress(index, pressed)` sets the state of a key. `Cpu.reset()`
  returns the machine to its power-on state.
- `chipeight.display.Display` holds the frame buffer. It provides `pixel(x, y)`,
  `lit_pixels()`, `buffer`, `width`, `height` and `mode`.

An instruction that the current variant does not know raises
`chipeight.cpu.InvalidOpcode`. The exit instruction `00FD` raises
`chipeight.cpu.InterpreterExit`.