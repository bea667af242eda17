# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Geometric predicates for the tree, trunk, star and string lights.

All geometry is a fixed table of literal bounds, for a 640x480 raster.
"""

from dataclasses import dataclass

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

from .types import ShapeFlags

CENTER_X    = 320

# Tree: triangle with its apex at TREE_TOP, widening by 1px every 2 lines.
TREE_TOP    = 100
TREE_BOTTOM = 400

# Trunk: rectangle directly below the tree.
TRUNK_TOP   = 400
TRUNK_BOTTOM = 450
TRUNK_HALF_WIDTH = 20

# Star: small square on the tree apex. Both Y bounds are exclusive.
STAR_ABOVE  = 85
STAR_BELOW  = 115
STAR_HALF_WIDTH = 10


@dataclass(frozen=True)
class Shapes:
    """Python mirror of :class:`ShapeFlags`."""
    tree_body:    bool
    trunk:        bool
    star:         bool
    light_stripe: bool


def classify(x, y):
    """Reference model of :class:`ShapeClassifier`."""
    rel_x = abs(x - CENTER_X)
    return Shapes(
        tree_body=(TREE_TOP <= y < TREE_BOTTOM) and rel_x < (y - TREE_TOP) // 2,
        trunk=(TRUNK_TOP <= y < TRUNK_BOTTOM) and rel_x < TRUNK_HALF_WIDTH,
        star=(STAR_ABOVE < y < STAR_BELOW) and rel_x < STAR_HALF_WIDTH,
        light_stripe=bool(((y >> 3) ^ (y >> 5)) & 1),
    )


class ShapeClassifier(wiring.Component):

    """
    Combinationally classify a pixel coordinate into :class:`ShapeFlags`.

    Every flag is computed independently of the others, a star pixel
    that also lies inside the tree has both flags set.
    """

    x:     In(10)
    y:     In(10)
    flags: Out(ShapeFlags)

    def elaborate(self, platform):
        m = Module()

        # Distance from the vertical centerline.
        rel_x = Signal(10)
        m.d.comb += rel_x.eq(Mux(self.x >= CENTER_X,
                                 self.x - CENTER_X,
                                 CENTER_X - self.x))

        # Depth below the tree apex. Only meaningful inside the tree rows.
        depth = Signal(10)
        m.d.comb += depth.eq(self.y - TREE_TOP)

        y = self.y
        m.d.comb += [
            self.flags.tree_body.eq(
                (y >= TREE_TOP) & (y < TREE_BOTTOM) & (rel_x < (depth >> 1))),
            self.flags.trunk.eq(
                (y >= TRUNK_TOP) & (y < TRUNK_BOTTOM) & (rel_x < TRUNK_HALF_WIDTH)),
            self.flags.star.eq(
                (y > STAR_ABOVE) & (y < STAR_BELOW) & (rel_x < STAR_HALF_WIDTH)),
            self.flags.light_stripe.eq(y[3] ^ y[5]),
        ]

        return m
