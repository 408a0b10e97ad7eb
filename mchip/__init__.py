#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the core, replacing args with a dictionary of
options.  This can be done via the Terminal or another program.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys
from .constants import (
    APP_INTRO, APP_COPYRIGHT, CORE_EXTENSIONS, DEFAULT_ROM, DEFAULT_STOP_ADDRESS, PROGRAM_ORIGIN
)
from .cpu import CPU, at_address
from .debugger import Debugger
from .executor import Executor
from .framebuffer import Framebuffer
from .hostio import Loader
from .ram import RAM
from .registers import Registers


class StartupError(Exception):
    pass


def parse_address(value):
    # Accepts "0x228", "552", or "none" to run until the program faults
    if value is None:
        return DEFAULT_STOP_ADDRESS

    if isinstance(value, int):
        return value

    if value.lower() == "none":
        return None

    try:
        return int(value, 0)
    except ValueError:
        raise StartupError("Invalid stop address '{}'.".format(value)) from None


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)), file=sys.stderr)
    extensions = {}

    for core_extension in CORE_EXTENSIONS:
        extension_label = "{}_ext".format(core_extension)
        extensions[core_extension] = bool(args[extension_label])

    opt_renderer = args["renderer"] or "pbm"

    if opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            raise StartupError(
                "PyGame does not appear to be installed."
            )
        else:
            from .renderers.r_pygame import Renderer
    elif opt_renderer == "pbm":
        # pylint: disable=import-outside-toplevel
        from .renderers.r_pbm import Renderer
    elif opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .renderers.r_null import Renderer
    else:
        raise StartupError("Unknown renderer '{}'.".format(opt_renderer))

    loader = Loader()
    ram = RAM()

    # Read the program image and write it into RAM
    filename = args["filename"]
    ram.write_block(PROGRAM_ORIGIN, loader.load_rom(DEFAULT_ROM) if filename is None else loader.load_binary(filename))

    # Set up a new rendering system, and attach the framebuffer to it
    renderer = Renderer(scale=args["scale"], output=args["output"], pygame_palette=args["pygame_palette"])
    framebuffer = Framebuffer(renderer, allow_wrapping=extensions["screen_wrap"])

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    executor = Executor(collision_flag=extensions["collision"], full_clear=extensions["full_clear"])
    cpu = CPU(ram, Registers(), framebuffer, debugger, executor=executor)
    stop_address = parse_address(args["stop_address"])

    try:
        cpu.run(PROGRAM_ORIGIN, None if stop_address is None else at_address(stop_address))
        cpu.refresh_framebuffer()
        renderer.hold()
    finally:
        # The CPU has stopped, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        renderer.shutdown()

    return framebuffer
