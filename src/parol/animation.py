# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Frame-synchronized animation counter.

The counter advances once per frame, so the top bits change slowly
enough to be seen as a blink. Only the top 2 bits (the 'blink phase')
are used by the rest of the design.
"""

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

COUNTER_BITS = 10
PHASE_BITS   = 2


def advance(counter):
    """Counter value after one more frame boundary."""
    return (counter + 1) % (1 << COUNTER_BITS)


def blink_phase(counter):
    """Blink phase (top 2 bits) of a counter value."""
    return counter >> (COUNTER_BITS - PHASE_BITS)


class AnimationClock(wiring.Component):

    """
    Advance a counter on every rising edge of ``vsync``.

    ``vsync`` is the logical (active-high) vertical sync, i.e. independent
    of the sync polarity of the display mode. Synchronous reset returns
    the counter to zero.
    """

    vsync:   In(1)
    counter: Out(COUNTER_BITS)
    phase:   Out(PHASE_BITS)

    def elaborate(self, platform):
        m = Module()

        counter = Signal(COUNTER_BITS)
        l_vsync = Signal()

        m.d.sync += l_vsync.eq(self.vsync)
        with m.If(self.vsync & ~l_vsync):
            m.d.sync += counter.eq(counter + 1)

        m.d.comb += [
            self.counter.eq(counter),
            self.phase.eq(counter[COUNTER_BITS-PHASE_BITS:]),
        ]

        return m
