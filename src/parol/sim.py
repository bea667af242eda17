# Copyright (c) 2024 S. Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0
#

"""Utilities for simulating and exporting the design."""

import logging
import os

import numpy as np

from amaranth              import *
from amaranth.back         import verilog
from amaranth.sim          import Simulator

from .pmod import unpack


def write_verilog(fragment, dst, name="parol"):
    """Elaborate ``fragment`` and write it to ``dst`` as verilog."""
    print(f"write verilog implementation of '{name}' to '{dst}'...")
    os.makedirs(os.path.dirname(dst) or ".", exist_ok=True)
    with open(dst, "w") as f:
        f.write(verilog.convert(fragment, name=name))


def capture_frames(top, n_frames=1, vcd_path=None):
    """
    Simulate ``top`` (an :class:`XmasTop`) for ``n_frames`` whole frames,
    decoding the packed PMOD output back into pixels.

    Returns a list of ``(v_active, h_active, 3)`` arrays of 2-bit channel
    values, one per frame.
    """

    t = top.modeline
    frames = []

    async def testbench(ctx):
        for n in range(n_frames):
            logging.info(f"simulate frame {n+1}/{n_frames} "
                         f"({t.h_total*t.v_total} cycles)...")
            frame = np.zeros((t.v_active, t.h_active, 3), dtype=np.uint8)
            for _ in range(t.h_total * t.v_total):
                if ctx.get(top.tgen.ctrl.de):
                    color, _, _ = unpack(ctx.get(top.uo_out))
                    frame[ctx.get(top.tgen.y), ctx.get(top.tgen.x), :] = color
                await ctx.tick()
            frames.append(frame)

    sim = Simulator(top)
    sim.add_clock(1e-6/t.pixel_clk_mhz)
    sim.add_testbench(testbench)
    if vcd_path is not None:
        with open(vcd_path, "w") as f, sim.write_vcd(vcd_file=f):
            sim.run()
    else:
        sim.run()

    return frames
