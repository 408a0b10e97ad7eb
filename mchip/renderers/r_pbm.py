#!/usr/bin/env python3

"""
PBM Renderer Plugin

Used by a Framebuffer object to draw the screen.  Rather than drawing to a
window, this writes the screen out as a Netpbm plain bitmap ("P1") once the
display is refreshed, to stdout or to a file.

Each screen row is written on its own line.  The format does not require this,
but it keeps the output readable in a text editor.

https://en.wikipedia.org/wiki/Netpbm#PBM_example
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys
from .r_null import RendererError, Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, output=None, **kwargs):
        self.output = output
        self.stream = None
        self.pixels = bytearray()
        super().__init__(scale, **kwargs)

    def set_resolution(self, width, height):
        self.pixels = bytearray(width * height)
        super().set_resolution(width, height)

    def set_pixel(self, x, y, colour):
        self.pixels[y * self.width + x] = 1 if colour else 0

    def refresh_display(self, content_changed=False):
        if not content_changed:
            return

        if self.stream is None:
            if self.output is None:
                self.stream = sys.stdout
            else:
                try:
                    self.stream = open(self.output, "w")
                except OSError as e:
                    raise RendererError("Cannot write image to '{}': {}".format(self.output, e)) from None

        self.stream.write(self.to_pbm())
        self.stream.flush()

    def to_pbm(self):
        lines = ["P1", "{} {}".format(self.width, self.height)]

        for y in range(self.height):
            row = self.pixels[y * self.width:(y + 1) * self.width]
            lines.append("".join("1 " if pixel else "0 " for pixel in row))

        return "\n".join(lines) + "\n"

    def shutdown(self):
        if self.stream is not None and self.stream is not sys.stdout:
            self.stream.close()

        self.stream = None
        super().shutdown()
