#!/usr/bin/env python3

"""
CPU Emulator (fetch/decode/execute driver)

Like a real computer, this is where the processing is driven from.  Each cycle
fetches a big-endian opcode from RAM at the program counter, decodes it, and
hands it to the Executor along with the RAM, registers and framebuffer.

The CPU does not know when a program has finished.  Whoever runs it supplies a
stop condition, which is checked after every instruction executed.

If anything goes wrong (an unsupported opcode, a reserved memory read, or a
pixel drawn off the screen), the default is to halt immediately with a full
debug report.  A host that wants to look at faults itself, such as a debugger,
can turn halting off and inspect the result of each step instead.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, PROGRAM_ORIGIN
from .decoder import decode, UnsupportedInstruction
from .executor import Executor, Executed, fault_from_error
from .ram import RAMError

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class CPUError(Exception):
    pass


def at_address(address):
    # Stop condition for programs that are known to be finished once they reach a given address
    def stop_condition(cpu):
        return cpu.pc == address

    return stop_condition


class CPU:
    def __init__(self, ram, registers, framebuffer, debugger, executor=None, halt_on_fault=True):
        self.ram = ram
        self.registers = registers
        self.framebuffer = framebuffer
        self.debugger = debugger
        self.executor = Executor() if executor is None else executor
        self.halt_on_fault = halt_on_fault
        self.live_debug = self.debugger.is_live()

        # Initialise program counter and current opcode
        self.pc = PROGRAM_ORIGIN
        self.debug_pc = PROGRAM_ORIGIN
        self.opcode = 0
        self.ops_executed = 0

    def run(self, start_location, stop_condition=None):
        self.pc = start_location
        self.ops_executed = 0

        while True:
            if not isinstance(self.step(), Executed):
                # Only reachable when not halting on faults.  The host inspects the result via step() instead.
                return self.ops_executed

            if stop_condition is not None and stop_condition(self):
                return self.ops_executed

    def step(self):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc

        try:
            self.opcode = self.fetch()
        except RAMError as e:
            fault = fault_from_error(e)

            if self.halt_on_fault:
                self._fault("???", fault)

            return fault

        decode_result = decode(self.opcode)

        if isinstance(decode_result, UnsupportedInstruction):
            if self.halt_on_fault:
                self._opcode_unsupported()

            return decode_result

        operation = decode_result.operation

        if self.live_debug:
            self.debug(operation.mnemonic())

        result = self.executor.execute(operation, self.ram, self.registers, self.framebuffer, self.pc)

        if isinstance(result, Executed):
            self.pc = result.pc
            self.ops_executed += 1
        elif self.halt_on_fault:
            self._fault(operation.mnemonic(), result)

        return result

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def refresh_framebuffer(self):
        # Render the final screen.  Should be called once the run has stopped.
        self.framebuffer.refresh_display()

    def _opcode_unsupported(self):
        raise CPUError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} is not emulated."
            ).format(
                APP_INTRO, self.debugger.debug(self, "???", verbose=True), self.opcode, self.debug_pc
            )
        ) from None

    def _fault(self, instruction, fault):
        raise CPUError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} failed: {}"
            ).format(
                APP_INTRO, self.debugger.debug(self, instruction, verbose=True, fault=fault.kind),
                self.opcode, self.debug_pc, fault.message
            )
        ) from None

    def debug(self, instruction):
        self.debugger.output(self, instruction)
