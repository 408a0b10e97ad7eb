#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.constants import FAULT_RESERVED_MEMORY, FAULT_MEMORY_OVERFLOW, FAULT_REGISTER_RANGE, FAULT_DRAW_BOUNDS
from mchip.decoder import Clear, SetIndex, SetRegister, AddImmediate, Draw
from mchip.executor import Executor, Executed, Fault
from mchip.framebuffer import Framebuffer
from mchip.ram import RAM
from mchip.registers import Registers
from mchip.renderers.r_null import Renderer


class TestExecutor(unittest.TestCase):
    def setUp(self):
        self.ram = RAM()
        self.registers = Registers()
        self.framebuffer = Framebuffer(Renderer())
        self.executor = Executor()

    def _execute(self, operation, executor=None, pc=0x200):
        return (executor or self.executor).execute(operation, self.ram, self.registers, self.framebuffer, pc)

    def _check_executed(self, operation, executor=None, pc=0x200):
        result = self._execute(operation, executor, pc)
        self.assertIsInstance(result, Executed)
        self.assertEqual((pc + 2) & 0xFFFF, result.pc)

    def _check_fault(self, operation, kind):
        result = self._execute(operation)
        self.assertIsInstance(result, Fault)
        self.assertEqual(kind, result.kind)

    def _lit_pixels(self):
        width, height = self.framebuffer.get_vid_size()
        return [(x, y) for y in range(height) for x in range(width) if self.framebuffer.get_pixel(x, y)]

    def test_execute_advances_pc(self):
        self._check_executed(Clear(), pc=0x200)
        self._check_executed(Clear(), pc=0x226)
        self._check_executed(Clear(), pc=0xFFFE)

    def test_execute_set_register(self):  # LD Vx, byte
        for vx in range(16):
            for byte in 0x00, 0x0C, 0xFF:
                self._check_executed(SetRegister(vx, byte))
                self.assertEqual(byte, self.registers.read(vx))

    def test_execute_add_immediate(self):  # ADD Vx, byte
        self.registers.write(0x2, 250)
        self._check_executed(AddImmediate(0x2, 10))
        self.assertEqual(4, self.registers.read(0x2))

        for a, b in (0x00, 0x00), (0x01, 0xFE), (0xFF, 0x01), (0x80, 0x80), (0x0C, 0x09):
            self.registers.write(0x5, a)
            self._check_executed(AddImmediate(0x5, b))
            self.assertEqual((a + b) % 256, self.registers.read(0x5))

    def test_execute_add_immediate_no_flag(self):
        self.registers.write(0x0, 0xFF)
        self._check_executed(AddImmediate(0x0, 0x01))
        self.assertEqual(0, self.registers.read(0xF))

    def test_execute_set_index(self):  # LD I, addr
        for addr in 0x000, 0x22A, 0x0FFF:
            self._check_executed(SetIndex(addr))
            self.assertEqual(addr, self.registers.i)

    def test_execute_clear_blank(self):  # CLS
        self._check_executed(Clear())
        self.assertEqual([False] * 64 * 32, self.framebuffer.get_pixels())

    def test_execute_clear_is_noop(self):
        # A drawn screen is deliberately left alone
        self.framebuffer.xor_pixel(5, 5)
        self._check_executed(Clear())
        self.assertEqual([(5, 5)], self._lit_pixels())

    def test_execute_clear_full(self):
        self.framebuffer.xor_pixel(5, 5)
        self._check_executed(Clear(), executor=Executor(full_clear=True))
        self.assertEqual([], self._lit_pixels())

    def test_execute_draw(self):  # DRW Vx, Vy, nibble
        self.ram.write_block(0x300, bytearray(b"\x81\x3C"))
        self.registers.set_index(0x300)
        self.registers.write(0x0, 10)
        self.registers.write(0x1, 20)
        self._check_executed(Draw(0x0, 0x1, 2))
        self.assertEqual([(10, 20), (17, 20), (12, 21), (13, 21), (14, 21), (15, 21)], self._lit_pixels())

        # Drawing again XORs everything back off, leaving Vf untouched
        self._check_executed(Draw(0x0, 0x1, 2))
        self.assertEqual([], self._lit_pixels())
        self.assertEqual(0, self.registers.read(0xF))

    def test_execute_draw_zero_rows(self):
        self.registers.set_index(0x300)
        self._check_executed(Draw(0x0, 0x1, 0))
        self.assertEqual([], self._lit_pixels())

    def test_execute_draw_collision_flag(self):
        executor = Executor(collision_flag=True)
        self.ram.write_block(0x300, bytearray(b"\xC0"))
        self.registers.set_index(0x300)
        self._check_executed(Draw(0x0, 0x1, 1), executor=executor)
        self.assertEqual(0, self.registers.read(0xF))
        self._check_executed(Draw(0x0, 0x1, 1), executor=executor)
        self.assertEqual(1, self.registers.read(0xF))

    def test_execute_draw_out_of_bounds(self):
        self.ram.write_block(0x300, bytearray(b"\xFF"))
        self.registers.set_index(0x300)
        self.registers.write(0x0, 60)
        self._check_fault(Draw(0x0, 0x1, 1), FAULT_DRAW_BOUNDS)

    def test_execute_draw_wrapping(self):
        self.framebuffer = Framebuffer(Renderer(), allow_wrapping=True)
        self.ram.write_block(0x300, bytearray(b"\x81"))
        self.registers.set_index(0x300)
        self.registers.write(0x0, 60)
        self.registers.write(0x1, 31)
        self._check_executed(Draw(0x0, 0x1, 1))
        self.assertEqual([(3, 31), (60, 31)], self._lit_pixels())

    def test_execute_draw_reserved_memory(self):
        self.registers.set_index(0x050)
        self._check_fault(Draw(0x0, 0x1, 1), FAULT_RESERVED_MEMORY)
        self.registers.set_index(0x000)
        self._check_fault(Draw(0x0, 0x1, 1), FAULT_RESERVED_MEMORY)

    def test_execute_draw_memory_overflow(self):
        self.registers.set_index(0xFFE)
        self._check_fault(Draw(0x0, 0x1, 2), FAULT_MEMORY_OVERFLOW)

    def test_execute_register_range(self):
        self._check_fault(SetRegister(0x10, 0x00), FAULT_REGISTER_RANGE)

    def test_execute_register_value_range(self):
        self._check_fault(SetRegister(0x0, 0x100), FAULT_REGISTER_RANGE)
        self.assertEqual(0, self.registers.read(0x0))
