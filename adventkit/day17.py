"""Chronospatial computer: a three-bit machine and the register value that quines it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field, replace
from enum import IntEnum
from pathlib import Path
from typing import List, Optional, Sequence


class Opcode(IntEnum):
    """The eight instructions of the machine, valued by their numeric code."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7

    @classmethod
    def from_str(cls, text: str) -> Opcode:
        """Read an opcode from its single-digit code."""
        try:
            return cls(int(text))
        except ValueError as error:
            raise ValueError(f"invalid opcode {text!r}") from error


@dataclass(frozen=True)
class Operation:
    """An opcode with its operand."""

    opcode: Opcode
    operand: int

    def _combo(self, device: Device) -> int:
        if 0 <= self.operand <= 3:
            return self.operand
        if self.operand == 4:
            return device.register_a
        if self.operand == 5:
            return device.register_b
        if self.operand == 6:
            return device.register_c
        raise ValueError(f"invalid combo operand {self.operand}")

    def apply(self, device: Device) -> None:
        """Execute this instruction on ``device`` and advance its instruction pointer."""
        match self.opcode:
            case Opcode.ADV:
                device.register_a = device.register_a >> self._combo(device)
            case Opcode.BXL:
                device.register_b ^= self.operand
            case Opcode.BST:
                device.register_b = self._combo(device) % 8
            case Opcode.JNZ:
                if device.register_a != 0:
                    device.instruction_pointer = self.operand
                    return
            case Opcode.BXC:
                device.register_b ^= device.register_c
            case Opcode.OUT:
                device.output.append(self._combo(device) % 8)
            case Opcode.BDV:
                device.register_b = device.register_a >> self._combo(device)
            case Opcode.CDV:
                device.register_c = device.register_a >> self._combo(device)
        device.instruction_pointer += 1


@dataclass
class Device:
    """Registers, a program, the raw program digits and everything output so far."""

    program: List[Operation]
    register_a: int
    register_b: int
    register_c: int
    instruction_pointer: int = 0
    listing: List[int] = field(default_factory=list)
    output: List[int] = field(default_factory=list)

    def execute_program(self) -> None:
        """Run until the instruction pointer leaves the program."""
        while 0 <= self.instruction_pointer < len(self.program):
            self.program[self.instruction_pointer].apply(self)

    def format_output(self) -> str:
        """The output values joined by commas."""
        return ",".join(str(value) for value in self.output)

    def check_output(self, solved: int) -> bool:
        """Whether the last ``solved`` output values equal the last program digits."""
        if solved == 0:
            return True
        if solved > len(self.output) or solved > len(self.listing):
            return False
        return self.output[-solved:] == self.listing[-solved:]


def parse_device(text: str) -> Device:
    """Read three register lines, a blank line and a comma-separated program."""
    lines = text.splitlines()
    if len(lines) < 5:
        raise ValueError("incomplete device description")
    register_a, register_b, register_c = (int(line[12:]) for line in lines[:3])

    digits = lines[4][9:].split(",")
    if len(digits) % 2 != 0:
        raise ValueError("the program has an opcode without an operand")
    program = [
        Operation(Opcode.from_str(opcode), int(operand))
        for opcode, operand in zip(digits[::2], digits[1::2])
    ]
    listing = [int(digit) for digit in digits]
    return Device(program, register_a, register_b, register_c, listing=listing)


def _run_with(device: Device, register_a: int) -> Device:
    trial = replace(device, register_a=register_a, instruction_pointer=0, output=[])
    trial.execute_program()
    return trial


def find_initial_register_a(device: Device) -> int:
    """Smallest register A found digit by digit that makes the program output itself."""
    start_a = 0
    solved = 1
    while True:
        trial = _run_with(device, start_a)
        if trial.check_output(solved):
            if solved == len(trial.listing):
                return start_a
            solved += 1
            start_a *= 8
        else:
            start_a += 1


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the three-bit computer.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    device = parse_device(args.input.read_text())
    run = replace(device, output=[])
    run.execute_program()
    print(f"The device output is: {run.format_output()}")
    print(f"Initial a: {find_initial_register_a(device)}")


if __name__ == "__main__":
    main()