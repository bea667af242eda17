# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Top-level design: timing generator, test pattern and PMOD bit-packing,
with an active-low synchronous reset. Clocked from the pixel clock
(the 'sync' domain).

.. code-block:: bash

    # write verilog to build/
    $ parol verilog
    # simulate a couple of frames and save them as images
    $ parol sim --frames 2

"""

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

from .pattern import XmasPattern
from .pmod import VGAPmod
from .video.modeline import VGAModeline
from .video.timing import VGATimingGen

# Geometry of the pattern is fixed to this raster.
H_ACTIVE = 640
V_ACTIVE = 480


class XmasTop(wiring.Component):

    rst_n:  In(1, init=1)
    uo_out: Out(8)

    def __init__(self, *, modeline=None):
        if modeline is None:
            modeline = VGAModeline.get("640x480p59.94")
        if (modeline.h_active, modeline.v_active) != (H_ACTIVE, V_ACTIVE):
            raise ValueError(
                f"Pattern is drawn for {H_ACTIVE}x{V_ACTIVE}, modeline is "
                f"{modeline.h_active}x{modeline.v_active}")
        self.modeline = modeline

        self.tgen = VGATimingGen(modeline)
        self.pattern = XmasPattern()
        self.pmod = VGAPmod()

        super().__init__()

    def elaborate(self, platform):
        m = Module()

        rst = Signal()
        m.d.comb += rst.eq(~self.rst_n)

        m.submodules.tgen = ResetInserter(rst)(self.tgen)
        m.submodules.pattern = ResetInserter(rst)(self.pattern)
        m.submodules.pmod = pmod = self.pmod

        m.d.comb += [
            self.pattern.i.hsync.eq(self.tgen.ctrl.hsync),
            self.pattern.i.vsync.eq(self.tgen.ctrl.vsync),
            self.pattern.i.de.eq(self.tgen.ctrl.de),
            self.pattern.i.x.eq(self.tgen.x),
            self.pattern.i.y.eq(self.tgen.y),
            pmod.color.eq(self.pattern.o),
            pmod.hsync.eq(self.tgen.ctrl_phy.hsync),
            pmod.vsync.eq(self.tgen.ctrl_phy.vsync),
            self.uo_out.eq(pmod.uo_out),
        ]

        return m
