# chipate

A small CHIP-8 interpreter core. It keeps the machine state (4 KiB of
memory, sixteen 8-bit registers, an index register, a program counter,
timer and sound values, a stack pointer and sixteen keys), decodes a
handful of CHIP-8 instructions and shows the 64×32 frame buffer in a
pygame window.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
chipate
```

This opens an 8× scaled window titled "Chip-8 Emulator", clears the
screen and draws an "E"-shaped sprite with the `DXYN` draw instruction.
Close the window or hold Escape to quit. To stop on its own after a
number of frames:

```
chipate --frames 120
```

## Using the library

```python
from chipate.chip8 import Chip8
from chipate.instruction import Instruction

machine = Chip8()
machine.decode(Instruction.from_bytes(bytes([0x60, 0x2A]), 0))  # V0 = 0x2A
print(machine.register[0])  # 42
```

Instructions can be read from memory through the program counter:

```python
machine.write_byte(0x200, 0xA1)
machine.write_byte(0x201, 0x23)
machine.program_counter = 0x200
instruction = machine.fetch_instruction()  # program counter now 0x202
machine.decode(instruction)                # index register = 0x123
```

Supported instructions:

- `00E0` clears the screen (every pixel set to `pixel_off`);
- `00EE` is accepted and leaves the machine unchanged;
- other `0NNN` instructions log a warning and do nothing;
- `1NNN` jumps (sets the program counter);
- `6XNN` sets VX;
- `7XNN` adds NN to VX, wrapping at 256;
- `ANNN` sets the index register;
- `DXYN` draws an N-row sprite from memory at the index register, at
  (VX, VY), XOR-ing it onto the frame with wrap-around and setting VF to 1
  if any lit pixel was turned off.

Decoding any other instruction raises `chipate.chip8.UnsupportedInstruction`.

Other pieces:

- `chipate.instruction.Instruction` splits two bytes into nibbles and gives
  `category()`, `x()`, `y()`, `n()`, `nn()` and `nnn()`.
- `chipate.address.Address` converts between a 16-bit address and its two
  big-endian bytes; `Chip8.read_address` and `Chip8.write_address` store
  such addresses in memory.
- `chipate.screen.Screen` holds the frame (a list of `0xRRGGBB` values) and
  can fill it with `blackout()`, `color()`, `default_pattern()` or
  `dev_pattern()`. Given a window, `is_running()` and `update()` drive it;
  `chipate.screen.PygameWindow` is the pygame window used by the command.
- `chipate.cli.build_demo(screen)` returns a machine that has drawn the demo
  sprite on the given screen.

## What it does not do

This is not yet a program runner. There is no way to load a ROM file and no
fetch–decode loop that runs one. Subroutine calls and returns, skips,
arithmetic and logic between registers, random numbers, key input
instructions and the `FX__` timer, memory and font instructions are not
supported, and the timer and sound values are never counted down. Keys are
stored but never read from the keyboard.