# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""Fixed-modeline VGA timing generator."""

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out


class VGATimingGen(wiring.Component):

    """
    Generate beam position and sync signals for a fixed :class:`VGAModeline`.

    ``x`` and ``y`` count over the whole frame, including blanking. The
    active region is the top-left ``h_active`` x ``v_active`` corner of it.

    ``ctrl`` carries logical (active-high) syncs, which is what downstream
    logic should use for edge detection. ``ctrl_phy`` carries the same
    syncs with the polarity required by the modeline, for the pins.
    """

    class ControlSignature(wiring.Signature):
        def __init__(self):
            super().__init__({
                "hsync": Out(1),
                "vsync": Out(1),
                "de":    Out(1),
            })

    def __init__(self, modeline):
        self.modeline = modeline
        super().__init__({
            "x":        Out(range(modeline.h_total)),
            "y":        Out(range(modeline.v_total)),
            "ctrl":     Out(self.ControlSignature()),
            "ctrl_phy": Out(self.ControlSignature()),
        })

    def elaborate(self, platform):
        m = Module()

        t = self.modeline

        x = Signal(range(t.h_total))
        y = Signal(range(t.v_total))

        with m.If(x == t.h_total - 1):
            m.d.sync += x.eq(0)
            with m.If(y == t.v_total - 1):
                m.d.sync += y.eq(0)
            with m.Else():
                m.d.sync += y.eq(y + 1)
        with m.Else():
            m.d.sync += x.eq(x + 1)

        m.d.comb += [
            self.x.eq(x),
            self.y.eq(y),
            self.ctrl.hsync.eq((x >= t.h_sync_start) & (x < t.h_sync_end)),
            self.ctrl.vsync.eq((y >= t.v_sync_start) & (y < t.v_sync_end)),
            self.ctrl.de.eq((x < t.h_active) & (y < t.v_active)),
            self.ctrl_phy.hsync.eq(self.ctrl.hsync ^ int(t.h_sync_invert)),
            self.ctrl_phy.vsync.eq(self.ctrl.vsync ^ int(t.v_sync_invert)),
            self.ctrl_phy.de.eq(self.ctrl.de),
        ]

        return m
