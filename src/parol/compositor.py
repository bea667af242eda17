# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

from . import palette
from .types import Color, ShapeFlags


def compose(flags, font_bit, blink_phase, active, x):
    """Reference model of :class:`ColorCompositor`. First match wins."""
    if not active:
        return palette.BLACK
    if flags.star:
        return palette.STAR_COLORS[blink_phase]
    if font_bit:
        return palette.WHITE
    if flags.tree_body:
        if flags.light_stripe:
            return palette.LIGHT_COLORS[(x >> 3) & 1]
        return palette.GREEN
    if flags.trunk:
        return palette.BROWN
    return palette.BLACK


class ColorCompositor(wiring.Component):

    """
    Merge shape flags, the text overlay and the blink phase into a single
    color, with a fixed priority:

        star > text > tree body (string lights override) > trunk > background

    There is no blending between layers. Outside the active region of the
    display, the output is always black.
    """

    flags:    In(ShapeFlags)
    font_bit: In(1)
    phase:    In(2)
    active:   In(1)
    x:        In(10)
    o:        Out(Color)

    def elaborate(self, platform):
        m = Module()

        def drive(color):
            r, g, b = color
            m.d.comb += [
                self.o.r.eq(r),
                self.o.g.eq(g),
                self.o.b.eq(b),
            ]

        with m.If(~self.active):
            drive(palette.BLACK)
        with m.Elif(self.flags.star):
            with m.Switch(self.phase):
                for phase, color in enumerate(palette.STAR_COLORS):
                    with m.Case(phase):
                        drive(color)
        with m.Elif(self.font_bit):
            drive(palette.WHITE)
        with m.Elif(self.flags.tree_body):
            with m.If(self.flags.light_stripe):
                with m.If(self.x[3]):
                    drive(palette.LIGHT_COLORS[1])
                with m.Else():
                    drive(palette.LIGHT_COLORS[0])
            with m.Else():
                drive(palette.GREEN)
        with m.Elif(self.flags.trunk):
            drive(palette.BROWN)
        with m.Else():
            drive(palette.BLACK)

        return m
