"""Sixteen-bit addresses stored as a big-endian pair of bytes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in range 0..255, got {value}")


@dataclass(frozen=True)
class Address:
    """A 16-bit address split into a high and a low byte."""

    high_byte: int
    low_byte: int

    def __post_init__(self) -> None:
        _check_byte("high_byte", self.high_byte)
        _check_byte("low_byte", self.low_byte)

    @classmethod
    def from_bytes(cls, addresses: Sequence[int]) -> Address:
        """Build an address from a ``(high, low)`` pair of bytes."""
        if len(addresses) != 2:
            raise ValueError(f"an address needs exactly 2 bytes, got {len(addresses)}")
        high_byte, low_byte = addresses
        return cls(high_byte, low_byte)

    @classmethod
    def from_integer(cls, address: int) -> Address:
        """Build an address from an integer in range 0..0xFFFF."""
        if not 0 <= address <= 0xFFFF:
            raise ValueError(f"address must be in range 0..0xFFFF, got {address}")
        high_byte, low_byte = address.to_bytes(2, "big")
        return cls(high_byte, low_byte)

    def as_bytes(self) -> bytes:
        """Return the address as two big-endian bytes."""
        return bytes((self.high_byte, self.low_byte))

    def as_integer(self) -> int:
        """Return the address as an integer."""
        return int.from_bytes(self.as_bytes(), "big")