#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "MonoChip Core"
APP_VERSION = "0.1.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory map.  Only the program area can be read; the two regions below it are reserved.
MEMORY_SIZE = 0xFFF
FONT_TOP = 0x50        # System font region (0x000 - 0x04F), unimplemented
PROGRAM_ORIGIN = 0x200  # Interpreter region (0x050 - 0x1FF) sits below this

# Pixel buffer
VID_WIDTH = 64
VID_HEIGHT = 32

# Startup
DEFAULT_ROM = "ibm_logo"
DEFAULT_STOP_ADDRESS = PROGRAM_ORIGIN + 0x28  # The IBM logo image jumps to itself here once drawn

# Optional general-purpose behaviours.  All are off by default, which keeps the narrow single-frame semantics.
CORE_EXTENSIONS = ["screen_wrap", "collision", "full_clear"]

# Fault kinds reported by the executor
FAULT_RESERVED_MEMORY = "reserved_memory"
FAULT_MEMORY_OVERFLOW = "memory_overflow"
FAULT_REGISTER_RANGE = "register_range"
FAULT_DRAW_BOUNDS = "draw_bounds"
