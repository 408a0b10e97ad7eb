#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will output information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be included in the error, with the
addition of the fault kind and the number of instructions executed so far.

Output goes to stderr, as stdout may be carrying the rendered image.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys


class Debugger:
    def __init__(self, stream=None):
        self.live = False
        self.stream = stream

    def debug(self, cpu, instruction, verbose=False, fault=None):
        v = cpu.registers.get_items()

        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[v[reg_num] for reg_num in range(15, -1, -1)] +
            [cpu.registers.i, cpu.debug_pc, cpu.opcode, instruction]
        )

        if verbose:
            debug_str += "\nOps executed: {}".format(cpu.ops_executed)

            if fault is not None:
                debug_str += "\nFault: {}".format(fault)

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, cpu, instruction):
        print(self.debug(cpu, instruction), file=self.stream or sys.stderr)
