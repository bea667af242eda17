# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

import unittest

from amaranth import *
from amaranth.sim import *

from parol.video.modeline import VGAModeline
from parol.video.timing import VGATimingGen

class TimingTests(unittest.TestCase):

    # Tiny mode so a few whole frames simulate quickly.
    MODELINE = VGAModeline(
        h_active      = 4,
        h_sync_start  = 5,
        h_sync_end    = 6,
        h_total       = 8,
        h_sync_invert = True,
        v_active      = 3,
        v_sync_start  = 4,
        v_sync_end    = 5,
        v_total       = 6,
        v_sync_invert = False,
        pixel_clk_mhz = 1,
    )

    def test_modelines(self):
        m = VGAModeline.get("640x480p59.94")
        self.assertEqual(m.active_pixels, 640*480)
        self.assertAlmostEqual(m.refresh_rate, 59.94, places=2)
        self.assertEqual(VGAModeline.get("640x480p60").h_total, 800)
        with self.assertRaises(ValueError):
            VGAModeline.get("1280x720p60")

    def test_timing_gen(self):

        t = self.MODELINE
        dut = VGATimingGen(t)

        async def testbench(ctx):
            for _ in range(2):
                for y in range(t.v_total):
                    for x in range(t.h_total):
                        self.assertEqual(ctx.get(dut.x), x)
                        self.assertEqual(ctx.get(dut.y), y)
                        de = int(x < t.h_active and y < t.v_active)
                        hsync = int(t.h_sync_start <= x < t.h_sync_end)
                        vsync = int(t.v_sync_start <= y < t.v_sync_end)
                        self.assertEqual(ctx.get(dut.ctrl.de), de)
                        self.assertEqual(ctx.get(dut.ctrl.hsync), hsync)
                        self.assertEqual(ctx.get(dut.ctrl.vsync), vsync)
                        self.assertEqual(ctx.get(dut.ctrl_phy.de), de)
                        # -HSync, +VSync
                        self.assertEqual(ctx.get(dut.ctrl_phy.hsync), hsync ^ 1)
                        self.assertEqual(ctx.get(dut.ctrl_phy.vsync), vsync)
                        await ctx.tick()

        sim = Simulator(dut)
        sim.add_clock(1e-6)
        sim.add_testbench(testbench)
        with sim.write_vcd(vcd_file=open("test_timing_gen.vcd", "w")):
            sim.run()
