"""A small CHIP-8 interpreter core: machine state, instruction decoding and a pygame display."""

__version__ = "0.1.0"