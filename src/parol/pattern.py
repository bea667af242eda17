# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
The complete per-pixel test pattern: shapes and text are classified in
parallel from the pixel coordinate, then merged by the compositor.
"""

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

from . import animation, compositor, font, shapes
from .types import Color


def pixel(x, y, counter, active=True):
    """Reference model of :class:`XmasPattern`, for one pixel."""
    return compositor.compose(
        flags=shapes.classify(x, y),
        font_bit=font.font_bit(x, y),
        blink_phase=animation.blink_phase(counter),
        active=active,
        x=x)


class PatternInputs(wiring.Signature):
    def __init__(self):
        super().__init__({
            # Video timing inputs. Syncs are logical (active-high).
            "hsync": Out(1),
            "vsync": Out(1),
            "de":    Out(1),
            "x":     Out(10),
            "y":     Out(10),
        })


class XmasPattern(wiring.Component):

    """
    Tree, trunk, blinking star and two lines of text.

    Everything is combinational from ``i`` to ``o``, except for the
    animation counter which advances once per frame on ``i.vsync``.
    """

    i: In(PatternInputs())
    o: Out(Color)

    def __init__(self):
        self.clock = animation.AnimationClock()
        super().__init__()

    def elaborate(self, platform):
        m = Module()

        m.submodules.clock = clock = self.clock
        m.submodules.shapes = classifier = shapes.ShapeClassifier()
        m.submodules.text = text = font.TextLayout()
        m.submodules.compositor = comp = compositor.ColorCompositor()

        m.d.comb += [
            clock.vsync.eq(self.i.vsync),
            classifier.x.eq(self.i.x),
            classifier.y.eq(self.i.y),
            text.x.eq(self.i.x),
            text.y.eq(self.i.y),
            comp.flags.eq(classifier.flags),
            comp.font_bit.eq(text.font_bit),
            comp.phase.eq(clock.phase),
            comp.active.eq(self.i.de),
            comp.x.eq(self.i.x),
            self.o.eq(comp.o),
        ]

        return m
