#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from hashlib import sha256
from mchip.hostio import Loader, LoaderError


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()

    def test_loader_load_rom_present(self):
        # Test the loader works, and verify the bundled image is okay
        rom = self.loader.load_rom("ibm_logo")
        self.assertEqual(132, len(rom))
        self.assertEqual(b"\x00\xE0\xA2\x2A", rom[:4])
        self.assertEqual(
            "8bf3b46d8a64c2074e7538200f684a2eaced258404d3c7d3bd7a917c3d0143e5",
            sha256(rom).hexdigest()
        )

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_binary, "NoFile.ch8")

    def test_loader_load_file_too_large(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, "large.ch8")

            with open(filename, "wb") as f:
                f.write(b"\x00" * 0xE00)

            self.assertRaises(LoaderError, self.loader.load_binary, filename)

    def test_loader_load_file_fits(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, "fits.ch8")

            with open(filename, "wb") as f:
                f.write(b"\xAB" * 0xDFF)

            self.assertEqual(0xDFF, len(self.loader.load_binary(filename)))
