import pytest

from adventkit.day17 import (
    Device,
    Opcode,
    Operation,
    find_initial_register_a,
    parse_device,
)

EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""


def _device_text(a, b, c, program):
    return f"Register A: {a}\nRegister B: {b}\nRegister C: {c}\n\nProgram: {program}\n"


def _run(a, b, c, program):
    device = parse_device(_device_text(a, b, c, program))
    device.execute_program()
    return device


def test_reads_the_input():
    expected = Device(
        program=[
            Operation(Opcode.ADV, 1),
            Operation(Opcode.OUT, 4),
            Operation(Opcode.JNZ, 0),
        ],
        register_a=729,
        register_b=0,
        register_c=0,
        instruction_pointer=0,
        listing=[0, 1, 5, 4, 3, 0],
        output=[],
    )
    assert parse_device(EXAMPLE) == expected


def test_solves_the_example():
    device = parse_device(EXAMPLE)
    device.execute_program()
    assert device.format_output() == "4,6,3,5,6,3,5,2,1,0"


def test_bst_sets_b_from_c():
    assert _run(0, 0, 9, "2,6").register_b == 1


def test_outputs_small_values():
    assert _run(10, 0, 0, "5,0,5,1,5,4").output == [0, 1, 2]


def test_loops_until_a_is_zero():
    device = _run(2024, 0, 0, "0,1,5,4,3,0")
    assert device.format_output() == "4,2,5,6,7,7,7,7,3,1,0"
    assert device.register_a == 0


def test_bxl_xors_b_with_literal():
    assert _run(0, 29, 0, "1,7").register_b == 26


def test_bxc_xors_b_with_c():
    assert _run(0, 2024, 43690, "4,0").register_b == 44354


def test_invalid_combo_operand_raises():
    device = parse_device(_device_text(1, 0, 0, "5,7"))
    with pytest.raises(ValueError):
        device.execute_program()


def test_invalid_opcode_raises():
    with pytest.raises(ValueError):
        Opcode.from_str("8")


def test_odd_program_raises():
    with pytest.raises(ValueError):
        parse_device(_device_text(1, 0, 0, "0,1,5"))


def test_check_output_compares_trailing_digits():
    device = parse_device(_device_text(0, 0, 0, "0,3,5,4,3,0"))
    device.output = [9, 3, 0]
    assert device.check_output(2)
    assert not device.check_output(3)
    assert not device.check_output(4)


def test_finds_the_self_reproducing_register():
    device = parse_device(_device_text(2024, 0, 0, "0,3,5,4,3,0"))
    register_a = find_initial_register_a(device)
    assert register_a == 117440
    check = parse_device(_device_text(register_a, 0, 0, "0,3,5,4,3,0"))
    check.execute_program()
    assert check.output == check.listing