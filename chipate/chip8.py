"""The CHIP-8 machine state and its instruction decoder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chipate.address import Address
from chipate.instruction import Instruction
from chipate.screen import HEIGHT, WIDTH, Screen

logger = logging.getLogger(__name__)

MEMORY_SIZE = 4096
REGISTER_COUNT = 16
KEY_COUNT = 16
FLAG = 0xF


class UnsupportedInstruction(Exception):
    """Raised when an instruction the machine does not carry out is decoded."""

    def __init__(self, instruction: Instruction) -> None:
        super().__init__(
            f"instruction {instruction.opcode:04X} at {instruction.address:03X} "
            "is not supported"
        )
        self.instruction = instruction


@dataclass
class Chip8:
    """Registers, memory, timers and screen of a CHIP-8 machine."""

    index_register: int = 0
    program_counter: int = 0
    register: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT))
    memory: bytearray = field(default_factory=lambda: bytearray(MEMORY_SIZE))
    screen: Screen = field(default_factory=Screen)
    timer: int = 0
    sound: int = 0
    stack_pointer: int = 0x1FF
    keys: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT)

    # Decoding

    def decode(self, instruction: Instruction) -> None:
        """Carry out one instruction."""
        match instruction.category():
            case 0x0:
                self._system(instruction)
            case 0x1:
                self.program_counter = instruction.nnn()
            case 0x6:
                self.register[instruction.x()] = instruction.nn()
            case 0x7:
                x = instruction.x()
                self.register[x] = (self.register[x] + instruction.nn()) & 0xFF
            case 0xA:
                self.index_register = instruction.nnn()
            case 0xD:
                self._draw(instruction)
            case _:
                raise UnsupportedInstruction(instruction)

    def _system(self, instruction: Instruction) -> None:
        if instruction.nibble_c != 0xE:
            logger.warning(
                "Instruction: SysAddress 0NNN is not implemented on modern interpreters."
            )
        elif instruction.nibble_d != 0xE:
            self.screen.blackout()
        # 00EE (return from subroutine) leaves the machine unchanged.

    def _draw(self, instruction: Instruction) -> None:
        x = self.register[instruction.x()]
        y = self.register[instruction.y()]
        height = instruction.n()
        screen = self.screen

        self.reset_flag_register()
        for row in range(height):
            sprite = self.memory[self.index_register + row]
            pixel_y = (y + row) % HEIGHT
            for bit in range(8):
                pixel_x = (x + bit) % WIDTH
                idx = pixel_x + pixel_y * WIDTH
                sprite_pixel = (sprite >> (7 - bit)) & 1
                old_pixel = 1 if screen.frame[idx] == screen.pixel_on else 0
                new_pixel = old_pixel ^ sprite_pixel
                if old_pixel == 1 and new_pixel == 0:
                    self.set_flag_register()
                screen.frame[idx] = screen.pixel_on if new_pixel else screen.pixel_off

    # Flag register

    def flag_register(self) -> int:
        """The value of VF."""
        return self.register[FLAG]

    def set_flag_register(self) -> None:
        self.register[FLAG] = 1

    def reset_flag_register(self) -> None:
        self.register[FLAG] = 0

    # Memory

    def read_byte(self, address: int) -> int:
        return self.memory[address]

    def write_byte(self, address: int, value: int) -> None:
        self.memory[address] = value

    def read_address(self, destination: int) -> Address:
        """Read a big-endian address stored at ``destination``."""
        return Address.from_bytes(self.memory[destination : destination + 2])

    def write_address(self, destination: int, address: Address) -> None:
        """Store ``address`` big-endian at ``destination``."""
        self.memory[destination] = address.high_byte
        self.memory[destination + 1] = address.low_byte

    # Program counter

    def read_instruction_bytes(self) -> bytes:
        """The two bytes at the program counter."""
        first = self.program_counter
        second = (self.program_counter + 1) & 0xFFFF
        return bytes((self.memory[first], self.memory[second]))

    def increment_program_counter(self) -> None:
        self.program_counter = (self.program_counter + 2) & 0xFFFF

    def fetch_instruction(self) -> Instruction:
        """Read the instruction at the program counter and move past it."""
        data = self.read_instruction_bytes()
        address = self.program_counter
        self.increment_program_counter()
        return Instruction.from_bytes(data, address)