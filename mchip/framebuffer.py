#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are passed on to the host rendering system as
they change.  Once the run has stopped, the renderer is asked to refresh the
display, which is when most renderers actually output anything.

Programs cannot write directly into video memory.  Instead, sprites are drawn
to the screen using an XOR method against a single monochrome plane, so drawing
the same sprite twice in the same place erases it again.

Collisions (where a pixel was set, but was unset by an XOR) are reported back
to the caller, which decides whether to pass them on to the running program.

Pixels outside the screen are an error unless wrapping is allowed, in which
case they reappear on the opposite side.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_NAME, VID_WIDTH, VID_HEIGHT


class FramebufferError(Exception):
    pass


class Framebuffer():
    def __init__(self, renderer, allow_wrapping=False):
        self.renderer = renderer
        self.allow_wrapping = allow_wrapping
        self.vid_width = 0
        self.vid_height = 0
        self.vid_size = 0
        self.vram = memoryview(bytearray())
        self.renderer.set_title(APP_NAME)
        self.resize_vid(VID_WIDTH, VID_HEIGHT)

    def resize_vid(self, vid_width, vid_height):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = self.vid_width * self.vid_height
        self.vram = memoryview(bytearray(self.vid_size))
        self.renderer.set_resolution(vid_width, vid_height)  # Update screen resolution

    def clear(self):
        for y in range(self.vid_height):
            for x in range(self.vid_width):
                vram_loc = y * self.vid_width + x

                if self.vram[vram_loc]:
                    self.vram[vram_loc] = 0
                    self.renderer.set_pixel(x, y, 0)

    def xor_pixel(self, x, y):
        # Returns flagging any collision

        if self.allow_wrapping:
            x %= self.vid_width
            y %= self.vid_height
        elif not (0 <= x < self.vid_width and 0 <= y < self.vid_height):
            raise FramebufferError(
                "Pixel ({}, {}) is outside the {}x{} display".format(x, y, self.vid_width, self.vid_height)
            )

        vram_loc = y * self.vid_width + x
        pixel = self.vram[vram_loc]
        collision = (pixel != 0)
        new_pixel = pixel ^ 1
        self.vram[vram_loc] = new_pixel
        self.renderer.set_pixel(x, y, new_pixel)

        return collision

    def get_pixel(self, x, y):
        return bool(self.vram[y * self.vid_width + x])

    def get_pixels(self):
        # Row-major copy of the whole screen, one boolean per pixel
        return [bool(pixel) for pixel in self.vram]

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def refresh_display(self):
        self.renderer.refresh_display(content_changed=True)
