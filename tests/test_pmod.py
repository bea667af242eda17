# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

import unittest
from parameterized import parameterized

from amaranth import *
from amaranth.sim import *

from parol import pmod

class VGAPmodTests(unittest.TestCase):

    @parameterized.expand([
        # name,       color,     hsync, vsync, word
        ["black",     (0, 0, 0), 0,     0,     0b00000000],
        ["hsync",     (0, 0, 0), 1,     0,     0b10000000],
        ["vsync",     (0, 0, 0), 0,     1,     0b00001000],
        ["red",       (3, 0, 0), 1,     0,     0b10010001],
        ["blue",      (0, 0, 3), 0,     1,     0b01001100],
        ["green_lsb", (0, 1, 0), 0,     0,     0b00100000],
        ["green_msb", (0, 2, 0), 0,     0,     0b00000010],
        ["brown",     (2, 1, 0), 0,     0,     0b00100001],
        ["white",     (3, 3, 3), 1,     1,     0b11111111],
    ])
    def test_pack(self, name, color, hsync, vsync, word):
        self.assertEqual(pmod.pack(color, hsync, vsync), word)
        self.assertEqual(pmod.unpack(word), (color, hsync, vsync))

    def test_gateware_matches_reference(self):

        dut = pmod.VGAPmod()

        async def testbench(ctx):
            for r in range(4):
                for g in range(4):
                    for b in range(4):
                        for hsync, vsync in [(0, 0), (0, 1), (1, 0), (1, 1)]:
                            ctx.set(dut.color, {"r": r, "g": g, "b": b})
                            ctx.set(dut.hsync, hsync)
                            ctx.set(dut.vsync, vsync)
                            self.assertEqual(ctx.get(dut.uo_out),
                                             pmod.pack((r, g, b), hsync, vsync))

        sim = Simulator(dut)
        sim.add_testbench(testbench)
        sim.run()
