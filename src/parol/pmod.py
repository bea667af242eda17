# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Bit-packing for a 2-bit-per-channel VGA PMOD.

Output word, most significant bit first::

    {hsync, B[0], G[0], R[0], vsync, B[1], G[1], R[1]}

That is, the low bit of each channel and hsync occupy the upper nibble,
and the high bit of each channel and vsync occupy the lower nibble.
"""

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

from .types import Color


def pack(color, hsync, vsync):
    """Reference model of :class:`VGAPmod`."""
    r, g, b = color
    return ((hsync & 1)    << 7 |
            (b & 1)        << 6 |
            (g & 1)        << 5 |
            (r & 1)        << 4 |
            (vsync & 1)    << 3 |
            ((b >> 1) & 1) << 2 |
            ((g >> 1) & 1) << 1 |
            ((r >> 1) & 1))


def unpack(word):
    """Inverse of :func:`pack`, returns ``(color, hsync, vsync)``."""
    def channel(lo, hi):
        return ((word >> lo) & 1) | (((word >> hi) & 1) << 1)
    color = (channel(4, 0), channel(5, 1), channel(6, 2))
    return color, (word >> 7) & 1, (word >> 3) & 1


class VGAPmod(wiring.Component):

    """
    Pack a color and (physical polarity) sync signals into one PMOD word.
    """

    color:  In(Color)
    hsync:  In(1)
    vsync:  In(1)
    uo_out: Out(8)

    def elaborate(self, platform):
        m = Module()

        # Cat() is LSB first.
        m.d.comb += self.uo_out.eq(Cat(
            self.color.r[1], self.color.g[1], self.color.b[1], self.vsync,
            self.color.r[0], self.color.g[0], self.color.b[0], self.hsync,
        ))

        return m
