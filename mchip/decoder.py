#!/usr/bin/env python3

"""
Instruction Decoder

Turns a raw 16-bit opcode into an operation value carrying only the operands
that operation needs.  Operations are immutable and can describe themselves in
assembler form for the debugger.

Operand fields are always in the same opcode position throughout the
instruction set, so they are all extracted up front whether or not the matched
instruction uses them:

    nnn = address (lowest 12 bits)
    kk  = byte (lowest 8 bits)
    x   = register (bits 8 - 11)
    y   = register (bits 4 - 7)
    n   = nibble (lowest 4 bits)

Decoding never raises.  An opcode outside the supported set comes back as an
UnsupportedInstruction, and the CPU decides what to do about it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple


class Operation:
    # Mixed in ahead of each namedtuple, so two operations with the same operands but a different kind never match
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), tuple(self)))


class Clear(Operation, namedtuple("Clear", [])):  # 00E0
    __slots__ = ()

    def mnemonic(self):
        return "CLS"


class SetIndex(Operation, namedtuple("SetIndex", ["addr"])):  # Annn
    __slots__ = ()

    def mnemonic(self):
        return "LD I, 0x{:03x}".format(self.addr)


class SetRegister(Operation, namedtuple("SetRegister", ["vx", "byte"])):  # 6xkk
    __slots__ = ()

    def mnemonic(self):
        return "LD V{:01x}, 0x{:02x}".format(self.vx, self.byte)


class AddImmediate(Operation, namedtuple("AddImmediate", ["vx", "byte"])):  # 7xkk
    __slots__ = ()

    def mnemonic(self):
        return "ADD V{:01x}, 0x{:02x}".format(self.vx, self.byte)


class Draw(Operation, namedtuple("Draw", ["vx", "vy", "nibble"])):  # Dxyn
    __slots__ = ()

    def mnemonic(self):
        return "DRW V{:01x}, V{:01x}, 0x{:01x}".format(self.vx, self.vy, self.nibble)


# Decode results
Decoded = namedtuple("Decoded", ["operation"])
UnsupportedInstruction = namedtuple("UnsupportedInstruction", ["opcode"])


def _0nnn(opcode, addr, byte, vx, vy, nibble):  # pylint: disable=unused-argument
    # Only CLS is needed.  RET, SYS and the rest are outside the supported set.
    if opcode == 0x00E0:
        return Clear()

    return None


def _6xkk(opcode, addr, byte, vx, vy, nibble):  # pylint: disable=unused-argument
    return SetRegister(vx, byte)


def _7xkk(opcode, addr, byte, vx, vy, nibble):  # pylint: disable=unused-argument
    return AddImmediate(vx, byte)


def _Annn(opcode, addr, byte, vx, vy, nibble):  # pylint: disable=unused-argument
    return SetIndex(addr)


def _Dxyn(opcode, addr, byte, vx, vy, nibble):  # pylint: disable=unused-argument
    return Draw(vx, vy, nibble)


# Lookup for instructions' first nibble
INSTRUCTIONS = {
    0x0: _0nnn,  # Exact match on the whole opcode
    0x6: _6xkk,
    0x7: _7xkk,
    0xA: _Annn,
    0xD: _Dxyn
}


def decode(opcode):
    addr = opcode & 0xFFF
    byte = opcode & 0xFF
    vx = (opcode & 0xF00) >> 8
    vy = (opcode & 0xF0) >> 4
    nibble = opcode & 0xF

    instruction = INSTRUCTIONS.get((opcode & 0xF000) >> 12)
    operation = None if instruction is None else instruction(opcode, addr, byte, vx, vy, nibble)

    if operation is None:
        return UnsupportedInstruction(opcode)

    return Decoded(operation)
