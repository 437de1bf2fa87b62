"""The interpreter core: memory, registers, timers and instruction execution."""

from __future__ import annotations

import operator
import random
from typing import Any, Iterable, Optional

from .config import Chip8Variant, DisplayMode, Quirks
from .display import Display
from .fonts import glyph_address, hires_glyph_address, install_fonts

START_ADDRESS = 0x200
RAM_SIZE = 4096
NUM_REGISTERS = 16
NUM_FLAG_REGISTERS = 8
STACK_SIZE = 16
NUM_KEYS = 16

_LOGIC_OPS = {0x1: operator.or_, 0x2: operator.and_, 0x3: operator.xor}


class InvalidOpcode(Exception):
    """Raised when an instruction is not understood by the current variant."""

    def __init__(self, op: int) -> None:
        super().__init__(f"invalid opcode: {op:#06x}")
        self.op = op


class InterpreterExit(Exception):
    """Raised when the program executes the exit instruction (00FD)."""


class Cpu:
    """A CHIP-8 / SUPER-CHIP machine.

    ``audio`` is any object with ``start_beep()`` and ``stop_beep()``;
    when omitted the machine runs silently.
    """

    def __init__(
        self,
        variant: Chip8Variant = Chip8Variant.CHIP8,
        audio: Optional[Any] = None,
    ) -> None:
        self.variant = variant
        self.quirks = Quirks.for_variant(variant)
        self._audio = audio
        self._initialise()

    def _initialise(self) -> None:
        self.pc = START_ADDRESS
        self.ram = bytearray(RAM_SIZE)
        install_fonts(self.ram)
        self.display = Display()
        self.v = bytearray(NUM_REGISTERS)
        self.i = 0
        self.flags = bytearray(NUM_FLAG_REGISTERS)
        self.stack: list[int] = []
        self._keys = [False] * NUM_KEYS
        self._prev_keys = [False] * NUM_KEYS
        self.delay_timer = 0
        self.sound_timer = 0

    @property
    def keys(self) -> tuple[bool, ...]:
        """Current state of the sixteen keys."""
        return tuple(self._keys)

    def reset(self) -> None:
        """Return the machine to its power-on state and silence the beep."""
        self._initialise()
        if self._audio is not None:
            self._audio.stop_beep()

    def tick(self) -> None:
        """Fetch and execute one instruction."""
        self.execute(self._fetch())

    def tick_timers(self) -> None:
        """Count both timers down once; beep while the sound timer runs."""
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            if self._audio is not None:
                self._audio.start_beep()
            self.sound_timer -= 1
        elif self._audio is not None:
            self._audio.stop_beep()

    def keypress(self, index: int, pressed: bool) -> None:
        """Record the state of key ``index``, remembering its previous state."""
        if not 0 <= index < NUM_KEYS:
            raise IndexError(f"key index out of range: {index}")
        self._prev_keys[index] = self._keys[index]
        self._keys[index] = bool(pressed)

    def load(self, data: bytes) -> None:
        """Copy a program into memory at the start address."""
        room = RAM_SIZE - START_ADDRESS
        if len(data) > room:
            raise ValueError(f"program too large: {len(data)} > {room} bytes")
        self.ram[START_ADDRESS:START_ADDRESS + len(data)] = data

    def _fetch(self) -> int:
        op = (self.ram[self.pc] << 8) | self.ram[self.pc + 1]
        self.pc += 2
        return op

    def _push(self, value: int) -> None:
        if len(self.stack) >= STACK_SIZE:
            raise IndexError("call stack overflow")
        self.stack.append(value)

    def _pop(self) -> int:
        if not self.stack:
            raise IndexError("return with an empty call stack")
        return self.stack.pop()

    def _memory_span(self, start: int, count: int) -> slice:
        if start < 0 or start + count > RAM_SIZE:
            raise IndexError(f"memory access out of range: {start:#x}+{count}")
        return slice(start, start + count)

    def _require_superchip(self, op: int) -> None:
        if self.variant is not Chip8Variant.SUPERCHIP:
            raise InvalidOpcode(op)

    def _sprite_rows(self, rows: int, wide: bool) -> Iterable[int]:
        for row in range(rows):
            if wide:
                addr = self.i + row * 2
                yield (self.ram[addr] << 8) | self.ram[addr + 1]
            else:
                yield self.ram[self.i + row]

    def execute(self, op: int) -> None:
        """Decode and carry out a single instruction."""
        kind = (op >> 12) & 0xF
        x = (op >> 8) & 0xF
        y = (op >> 4) & 0xF
        n = op & 0xF
        nn = op & 0xFF
        nnn = op & 0xFFF
        v = self.v

        match (kind, x, y, n):
            case (0x0, 0x0, 0xC, _):
                self._require_superchip(op)
                self.display.scroll_down(n)
            case (0x0, 0x0, 0xE, 0x0):
                self.display.clear()
            case (0x0, 0x0, 0xE, 0xE):
                self.pc = self._pop()
            case (0x0, 0x0, 0xF, 0xB):
                self._require_superchip(op)
                self.display.scroll_right()
            case (0x0, 0x0, 0xF, 0xC):
                self._require_superchip(op)
                self.display.scroll_left()
            case (0x0, 0x0, 0xF, 0xD):
                raise InterpreterExit()
            case (0x0, 0x0, 0xF, 0xE):
                self._require_superchip(op)
                self.display.set_mode(DisplayMode.LORES)
            case (0x0, 0x0, 0xF, 0xF):
                self._require_superchip(op)
                self.display.set_mode(DisplayMode.HIRES)
            case (0x1, _, _, _):
                self.pc = nnn
            case (0x2, _, _, _):
                self._push(self.pc)
                self.pc = nnn
            case (0x3, _, _, _):
                if v[x] == nn:
                    self.pc += 2
            case (0x4, _, _, _):
                if v[x] != nn:
                    self.pc += 2
            case (0x5, _, _, 0x0):
                if v[x] == v[y]:
                    self.pc += 2
            case (0x6, _, _, _):
                v[x] = nn
            case (0x7, _, _, _):
                v[x] = (v[x] + nn) & 0xFF
            case (0x8, _, _, 0x0):
                v[x] = v[y]
            case (0x8, _, _, 0x1 | 0x2 | 0x3):
                v[x] = _LOGIC_OPS[n](v[x], v[y])
                if self.quirks.vf_reset:
                    v[0xF] = 0
            case (0x8, _, _, 0x4):
                total = v[x] + v[y]
                v[x] = total & 0xFF
                v[0xF] = 1 if total > 0xFF else 0
            case (0x8, _, _, 0x5):
                borrow = v[x] < v[y]
                v[x] = (v[x] - v[y]) & 0xFF
                v[0xF] = 0 if borrow else 1
            case (0x8, _, _, 0x6):
                if not self.quirks.shifting:
                    v[x] = v[y]
                lsb = v[x] & 1
                v[x] >>= 1
                v[0xF] = lsb
            case (0x8, _, _, 0x7):
                borrow = v[y] < v[x]
                v[x] = (v[y] - v[x]) & 0xFF
                v[0xF] = 0 if borrow else 1
            case (0x8, _, _, 0xE):
                if not self.quirks.shifting:
                    v[x] = v[y]
                msb = (v[x] >> 7) & 1
                v[x] = (v[x] << 1) & 0xFF
                v[0xF] = msb
            case (0x9, _, _, 0x0):
                if v[x] != v[y]:
                    self.pc += 2
            case (0xA, _, _, _):
                self.i = nnn
            case (0xB, _, _, _):
                base = v[x] if self.quirks.jumping else v[0]
                self.pc = base + nnn
            case (0xC, _, _, _):
                v[x] = random.randrange(256) & nn
            case (0xD, _, _, _):
                wide = self.display.mode is DisplayMode.HIRES and n == 0
                rows = self._sprite_rows(16 if wide else n, wide)
                v[0xF] = int(self.display.draw_sprite(v[x], v[y], rows, wide))
            case (0xE, _, 0x9, 0xE):
                if self._keys[v[x]]:
                    self.pc += 2
            case (0xE, _, 0xA, 0x1):
                if not self._keys[v[x]]:
                    self.pc += 2
            case (0xF, _, 0x0, 0x7):
                v[x] = self.delay_timer
            case (0xF, _, 0x0, 0xA):
                released = next(
                    (
                        key
                        for key, (now, before) in enumerate(zip(self._keys, self._prev_keys))
                        if before and not now
                    ),
                    None,
                )
                if released is None:
                    self.pc -= 2
                else:
                    v[x] = released
            case (0xF, _, 0x1, 0x5):
                self.delay_timer = v[x]
            case (0xF, _, 0x1, 0x8):
                self.sound_timer = v[x]
            case (0xF, _, 0x1, 0xE):
                self.i = (self.i + v[x]) & 0xFFFF
            case (0xF, _, 0x2, 0x9):
                self.i = glyph_address(v[x])
            case (0xF, _, 0x3, 0x0):
                self._require_superchip(op)
                self.i = hires_glyph_address(v[x])
            case (0xF, _, 0x3, 0x3):
                value = v[x]
                self.ram[self._memory_span(self.i, 3)] = bytes(
                    (value // 100, (value // 10) % 10, value % 10)
                )
            case (0xF, _, 0x5, 0x5):
                self.ram[self._memory_span(self.i, x + 1)] = v[: x + 1]
                if self.quirks.memory:
                    self.i += x + 1
            case (0xF, _, 0x6, 0x5):
                v[: x + 1] = self.ram[self._memory_span(self.i, x + 1)]
                if self.quirks.memory:
                    self.i += x + 1
            case (0xF, _, 0x7, 0x5):
                if x < NUM_FLAG_REGISTERS:
                    self.flags[: x + 1] = v[: x + 1]
            case (0xF, _, 0x8, 0x5):
                if x < NUM_FLAG_REGISTERS:
                    v[: x + 1] = self.flags[: x + 1]
            case _:
                raise InvalidOpcode(op)