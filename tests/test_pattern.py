# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

import unittest

from amaranth import *
from amaranth.sim import *

from parol import font, palette, pattern

def set_pixel(ctx, dut, x, y, de=1):
    ctx.set(dut.i.x, x)
    ctx.set(dut.i.y, y)
    ctx.set(dut.i.de, de)

def get_color(ctx, dut):
    o = ctx.get(dut.o)
    return (o.r, o.g, o.b)

async def frames(ctx, dut, n):
    for _ in range(n):
        ctx.set(dut.i.vsync, 1)
        await ctx.tick()
        ctx.set(dut.i.vsync, 0)
        await ctx.tick()

class XmasPatternTests(unittest.TestCase):

    def test_reference_scenarios(self):
        # Star at its 'yellow' phase.
        self.assertEqual(pattern.pixel(320, 90, counter=512), palette.YELLOW)
        # Inactive region is always black, even on the star.
        self.assertEqual(pattern.pixel(320, 90, counter=512, active=False), palette.BLACK)
        self.assertEqual(pattern.pixel(320, 300, counter=0), palette.GREEN)
        self.assertEqual(pattern.pixel(320, 420, counter=0), palette.BROWN)
        self.assertEqual(pattern.pixel(10, 10, counter=0), palette.BLACK)
        # First pixel of 'MERRY XMAS'
        self.assertEqual(pattern.pixel(220, 475, counter=0), palette.WHITE)

    def test_star_blink(self):

        dut = pattern.XmasPattern()

        async def testbench(ctx):
            set_pixel(ctx, dut, 320, 90)
            for color in palette.STAR_COLORS:
                self.assertEqual(get_color(ctx, dut), color)
                await frames(ctx, dut, 256)
            # Wrapped back to the first phase.
            self.assertEqual(get_color(ctx, dut), palette.DARK_RED)
            # Blanking always wins
            set_pixel(ctx, dut, 320, 90, de=0)
            self.assertEqual(get_color(ctx, dut), palette.BLACK)

        sim = Simulator(dut)
        sim.add_clock(1e-6)
        sim.add_testbench(testbench)
        sim.run()

    def test_scenario_yellow_star(self):

        dut = pattern.XmasPattern()

        async def testbench(ctx):
            await frames(ctx, dut, 512)
            set_pixel(ctx, dut, 320, 90)
            self.assertEqual(get_color(ctx, dut), (3, 3, 0))

        sim = Simulator(dut)
        sim.add_clock(1e-6)
        sim.add_testbench(testbench)
        sim.run()

    def test_gateware_matches_reference(self):

        dut = pattern.XmasPattern()

        x0, y0, width = font.line_geometry(0)
        points = ([(x, y) for y in range(80, 480, 11) for x in range(140, 500, 17)] +
                  [(x, y) for y in range(y0, 480) for x in range(x0, x0 + width, 3)])

        async def testbench(ctx):
            for counter in [0, 300]:
                for x, y in points:
                    set_pixel(ctx, dut, x, y)
                    self.assertEqual(get_color(ctx, dut), pattern.pixel(x, y, counter),
                                     f"mismatch at ({x}, {y}), counter={counter}")
                await frames(ctx, dut, 300)
            # Nothing is drawn outside the active region.
            for x, y in points[::7]:
                set_pixel(ctx, dut, x, y, de=0)
                self.assertEqual(get_color(ctx, dut), palette.BLACK)

        sim = Simulator(dut)
        sim.add_clock(1e-6)
        sim.add_testbench(testbench)
        sim.run()
