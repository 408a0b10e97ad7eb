#!/usr/bin/env python3

"""
Register File

Sixteen 8-bit general purpose registers (V0 - Vf) and the 16-bit index
register (I).  Register numbers always come from a 4-bit field of an opcode,
so an out-of-range number means something upstream is broken.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

NUM_REGISTERS = 0x10


class RegisterError(Exception):
    pass


class Registers:
    def __init__(self):
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Bytearrays are mutable, so updating a register is fast
        self.i = 0  # Index register

    def _check_register(self, vx):
        if not 0 <= vx < NUM_REGISTERS:
            raise RegisterError("Register V{} does not exist".format(vx))

    def read(self, vx):
        self._check_register(vx)
        return self.v[vx]

    def write(self, vx, byte):
        self._check_register(vx)

        if not 0 <= byte <= 0xFF:
            raise RegisterError("Value 0x{:x} does not fit in register V{:01x}".format(byte, vx))

        self.v[vx] = byte

    def set_index(self, addr):
        self.i = addr & 0xFFFF

    def get_items(self):
        # For debugging
        return list(self.v)
