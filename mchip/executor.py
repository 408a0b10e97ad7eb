#!/usr/bin/env python3

"""
Instruction Executor

Applies a decoded operation to RAM, the register file and the framebuffer, and
works out where the program counter goes next.  None of the supported
instructions jump, call or skip, so the counter always moves on by one opcode.

Nothing here is global: everything an operation touches is handed in, so the
same Executor can drive any number of machines.

Errors raised by the hardware while an operation runs are not allowed to
escape.  They come back as a Fault naming what went wrong, and the program
counter is left where it was.

Extensions
----------

The default behaviour draws exactly one frame correctly and nothing more:

- CLS does nothing, because the framebuffer starts empty and is only drawn once.
- Sprites drawn off the edge of the screen are an error, rather than wrapping.
- Collisions are not reported in Vf.

Each of these can be switched to the general-purpose behaviour.  Wrapping is
a property of the Framebuffer itself.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .constants import FAULT_RESERVED_MEMORY, FAULT_MEMORY_OVERFLOW, FAULT_REGISTER_RANGE, FAULT_DRAW_BOUNDS
from .decoder import Clear, SetIndex, SetRegister, AddImmediate, Draw
from .framebuffer import FramebufferError
from .ram import RAMError, FontUnimplementedError, ReservedMemoryError
from .registers import RegisterError

OPCODE_SIZE = 2

# Execute results
Executed = namedtuple("Executed", ["pc"])
Fault = namedtuple("Fault", ["kind", "message"])


def fault_from_error(error):
    if isinstance(error, (FontUnimplementedError, ReservedMemoryError)):
        kind = FAULT_RESERVED_MEMORY
    elif isinstance(error, RAMError):
        kind = FAULT_MEMORY_OVERFLOW
    elif isinstance(error, RegisterError):
        kind = FAULT_REGISTER_RANGE
    else:
        kind = FAULT_DRAW_BOUNDS

    return Fault(kind, str(error))


class Executor:
    def __init__(self, collision_flag=False, full_clear=False):
        self.collision_flag = collision_flag
        self.full_clear = full_clear

        self.operations = {
            Clear:        self._clear,
            SetIndex:     self._set_index,
            SetRegister:  self._set_register,
            AddImmediate: self._add_immediate,
            Draw:         self._draw
        }

    def execute(self, operation, ram, registers, framebuffer, pc):
        try:
            self.operations[type(operation)](operation, ram, registers, framebuffer)
        except (RAMError, RegisterError, FramebufferError) as e:
            return fault_from_error(e)

        return Executed((pc + OPCODE_SIZE) & 0xFFFF)

    def _clear(self, operation, ram, registers, framebuffer):  # CLS
        # The screen starts blank and a single frame is drawn, so there is normally nothing to clear
        if self.full_clear:
            framebuffer.clear()

    def _set_index(self, operation, ram, registers, framebuffer):  # LD I, addr
        registers.set_index(operation.addr)

    def _set_register(self, operation, ram, registers, framebuffer):  # LD Vx, byte
        registers.write(operation.vx, operation.byte)

    def _add_immediate(self, operation, ram, registers, framebuffer):  # ADD Vx, byte
        # Wraps around.  No carry is reported for this instruction.
        byte = registers.read(operation.vx) + operation.byte
        registers.write(operation.vx, byte & 0xFF)

    def _draw(self, operation, ram, registers, framebuffer):  # DRW Vx, Vy, nibble
        vx_pos = registers.read(operation.vx)
        vy_pos = registers.read(operation.vy)
        collided = False
        i = registers.i

        for y in range(operation.nibble):
            spr_data = ram.read(i + y)
            scr_y = y + vy_pos

            for x in range(8):
                if spr_data & (0x80 >> x):
                    if framebuffer.xor_pixel(x + vx_pos, scr_y):
                        # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                        collided = True

        if self.collision_flag:
            registers.write(0xF, int(collided))
