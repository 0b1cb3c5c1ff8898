"""A decoded two-byte CHIP-8 instruction."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Instruction:
    """An instruction split into its four nibbles, with the address it came from."""

    nibble_a: int = 0
    nibble_b: int = 0
    nibble_c: int = 0
    nibble_d: int = 0
    opcode: int = 0
    address: int = 0

    @classmethod
    def from_bytes(cls, data: Sequence[int], address: int) -> Instruction:
        """Decode two big-endian bytes read from ``address``."""
        if len(data) != 2:
            raise ValueError(f"an instruction needs exactly 2 bytes, got {len(data)}")
        first, second = data
        for value in (first, second):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"instruction bytes must be in range 0..255, got {value}")
        if not 0 <= address <= 0xFFFF:
            raise ValueError(f"address must be in range 0..0xFFFF, got {address}")
        return cls(
            nibble_a=first >> 4,
            nibble_b=first & 0x0F,
            nibble_c=second >> 4,
            nibble_d=second & 0x0F,
            opcode=(first << 8) | second,
            address=address,
        )

    def category(self) -> int:
        """The first nibble, which selects the kind of instruction."""
        return self.nibble_a

    def x(self) -> int:
        """The second nibble, naming a register."""
        return self.nibble_b

    def y(self) -> int:
        """The third nibble, naming a register."""
        return self.nibble_c

    def n(self) -> int:
        """The fourth nibble, a 4-bit number."""
        return self.nibble_d

    def nn(self) -> int:
        """The second byte, an 8-bit immediate."""
        return (self.nibble_c << 4) | self.nibble_d

    def nnn(self) -> int:
        """The last three nibbles, a 12-bit memory address."""
        return (self.nibble_b << 8) | self.nn()