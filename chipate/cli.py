"""Command that draws a demo sprite and shows it in a window."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from chipate.chip8 import Chip8
from chipate.instruction import Instruction
from chipate.screen import PygameWindow, Screen

DEMO_SPRITE = bytes([0b11111000, 0b10000000, 0b11000000, 0b10000000, 0b11111000])


def build_demo(screen: Screen) -> Chip8:
    """Return a machine that has drawn the demo sprite on ``screen``."""
    chip8 = Chip8(screen=screen)
    chip8.memory[: len(DEMO_SPRITE)] = DEMO_SPRITE
    chip8.register[0] = 7
    chip8.screen.blackout()
    chip8.decode(Instruction.from_bytes([0xD0, 0x15], 0))
    return chip8


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chipate", description="Draw a sprite on a CHIP-8 screen."
    )
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)

    window = PygameWindow()
    try:
        chip8 = build_demo(Screen(window=window))
        frames = 0
        while chip8.screen.is_running() and (args.frames is None or frames < args.frames):
            chip8.screen.update()
            frames += 1
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())