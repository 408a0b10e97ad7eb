#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes.

Reads are policed by the memory map.  The system font would normally live at
the very bottom of memory, and the original interpreter between the font and
the program origin.  Neither is emulated, so any read from those regions is an
error.  Writes are passed straight through, as the program loader is the only
thing that writes here.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEMORY_SIZE, FONT_TOP, PROGRAM_ORIGIN


class RAMError(Exception):
    pass


class FontUnimplementedError(RAMError):
    pass


class ReservedMemoryError(RAMError):
    pass


class RAM:
    def __init__(self, mem_size=MEMORY_SIZE):
        self.resize(mem_size)

    def resize(self, mem_size):
        self.mem = memoryview(bytearray(b"\x00" * mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        if location < FONT_TOP:
            raise FontUnimplementedError("System font is not available (read at 0x{:03x})".format(location))

        if location < PROGRAM_ORIGIN:
            raise ReservedMemoryError("Invalid memory access (read at 0x{:03x})".format(location))

        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        # Each byte goes through the memory map, so this is only for small reads
        return bytes(self.read(i) for i in range(location, location + size))

    def write(self, location, byte):
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location > self.mem_top:
            raise RAMError("Memory overflow")
