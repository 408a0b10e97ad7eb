#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading program images from the host, either from a file or from the
images bundled with the package, ready for writing into RAM.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from os import path
from .constants import MEMORY_SIZE, PROGRAM_ORIGIN


class LoaderError(Exception):
    pass


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            data = f.read()

        if len(data) > MEMORY_SIZE - PROGRAM_ORIGIN:
            raise LoaderError("Program image is too large ({} bytes) to fit in memory".format(len(data)))

        return data

    def load_rom(self, name):
        return self.load_binary(path.join(path.abspath(path.dirname(__file__)), "roms", "{}.ch8".format(name)))
