import pytest

from chipate.address import Address
from chipate.chip8 import Chip8, UnsupportedInstruction
from chipate.instruction import Instruction
from chipate.screen import HEIGHT, WIDTH


def op(first, second):
    return Instruction.from_bytes([first, second], 0)


def test_new_machine_state():
    chip8 = Chip8()
    assert chip8.stack_pointer == 0x1FF
    assert chip8.program_counter == 0
    assert chip8.index_register == 0
    assert len(chip8.memory) == 4096
    assert list(chip8.register) == [0] * 16
    assert chip8.keys == [False] * 16


def test_jump_sets_program_counter():
    chip8 = Chip8()
    chip8.decode(op(0x1A, 0xBC))
    assert chip8.program_counter == 0xABC


def test_set_register():
    chip8 = Chip8()
    chip8.decode(op(0x63, 0x42))
    assert chip8.register[3] == 0x42


def test_add_to_register_wraps():
    chip8 = Chip8()
    chip8.register[2] = 0xFF
    chip8.decode(op(0x72, 0x02))
    assert chip8.register[2] == 1
    assert chip8.flag_register() == 0


def test_set_index_register():
    chip8 = Chip8()
    chip8.decode(op(0xA1, 0x23))
    assert chip8.index_register == 0x123


def test_clear_screen():
    chip8 = Chip8()
    chip8.screen.color(0)
    chip8.decode(op(0x00, 0xE0))
    assert set(chip8.screen.frame) == {chip8.screen.pixel_off}


def test_return_leaves_screen_alone():
    chip8 = Chip8()
    chip8.screen.default_pattern()
    before = list(chip8.screen.frame)
    chip8.decode(op(0x00, 0xEE))
    assert chip8.screen.frame == before


def test_sys_address_changes_nothing():
    chip8 = Chip8()
    chip8.screen.default_pattern()
    before = list(chip8.screen.frame)
    chip8.decode(op(0x01, 0x23))
    assert chip8.screen.frame == before
    assert chip8.program_counter == 0


@pytest.mark.parametrize("category", [0x2, 0x3, 0x4, 0x5, 0x8, 0x9, 0xB, 0xC, 0xE, 0xF])
def test_unsupported_categories_raise(category):
    chip8 = Chip8()
    instruction = op(category << 4, 0x00)
    with pytest.raises(UnsupportedInstruction) as info:
        chip8.decode(instruction)
    assert info.value.instruction == instruction


def test_draw_twice_erases_and_sets_flag():
    chip8 = Chip8()
    chip8.memory[0:5] = bytes([0b11111000, 0b10000000, 0b11000000, 0b10000000, 0b11111000])
    chip8.register[0] = 7
    chip8.screen.blackout()
    chip8.decode(op(0xD0, 0x15))
    assert chip8.flag_register() == 0
    assert chip8.screen.frame[7] == chip8.screen.pixel_on
    chip8.decode(op(0xD0, 0x15))
    assert chip8.flag_register() == 1
    assert set(chip8.screen.frame) == {chip8.screen.pixel_off}


def test_draw_wraps_around_edges():
    chip8 = Chip8()
    chip8.screen.blackout()
    chip8.memory[0] = 0b11000000
    chip8.register[0] = WIDTH - 1
    chip8.register[1] = HEIGHT - 1
    chip8.decode(op(0xD0, 0x11))
    on = chip8.screen.pixel_on
    assert chip8.screen.frame[(WIDTH - 1) + (HEIGHT - 1) * WIDTH] == on
    assert chip8.screen.frame[(HEIGHT - 1) * WIDTH] == on
    assert chip8.screen.frame.count(on) == 2


def test_flag_register_set_and_reset():
    chip8 = Chip8()
    chip8.set_flag_register()
    assert chip8.flag_register() == 1
    assert chip8.register[15] == 1
    chip8.reset_flag_register()
    assert chip8.flag_register() == 0


def test_byte_round_trip():
    chip8 = Chip8()
    chip8.write_byte(0x300, 0xAB)
    assert chip8.read_byte(0x300) == 0xAB


def test_write_byte_rejects_large_value():
    with pytest.raises(ValueError):
        Chip8().write_byte(0, 256)


def test_address_round_trip():
    chip8 = Chip8()
    address = Address.from_integer(0x0ABC)
    chip8.write_address(0x400, address)
    assert chip8.read_address(0x400) == address
    assert chip8.memory[0x400:0x402] == address.as_bytes()


def test_read_address_past_end_raises():
    with pytest.raises(ValueError):
        Chip8().read_address(4095)


def test_fetch_instruction_advances():
    chip8 = Chip8()
    chip8.memory[0x200] = 0x12
    chip8.memory[0x201] = 0x34
    chip8.program_counter = 0x200
    instruction = chip8.fetch_instruction()
    assert instruction.opcode == 0x1234
    assert instruction.address == 0x200
    assert chip8.program_counter == 0x202


def test_read_instruction_bytes():
    chip8 = Chip8()
    chip8.memory[10:12] = b"\xd0\x15"
    chip8.program_counter = 10
    assert chip8.read_instruction_bytes() == b"\xd0\x15"
    assert chip8.program_counter == 10


def test_increment_wraps_sixteen_bits():
    chip8 = Chip8()
    chip8.program_counter = 0xFFFE
    chip8.increment_program_counter()
    assert chip8.program_counter == 0


def test_read_instruction_past_memory_raises():
    chip8 = Chip8()
    chip8.program_counter = 4095
    with pytest.raises(IndexError):
        chip8.read_instruction_bytes()