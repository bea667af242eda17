# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""Classes for representing VGA timings."""

from dataclasses import dataclass

@dataclass
class VGAModeline:
    """
    Raster timing driven out of the VGA PMOD.

    Counters run from 0 to ``*_total - 1``. Pixels are visible below
    ``*_active``, and the sync pulse covers ``*_sync_start`` up to (not
    including) ``*_sync_end``. The ``*_sync_invert`` flags give the pin
    polarity: the standard 640x480 mode has both syncs active-low.
    """

    h_active:      int  # visible pixels per line
    h_sync_start:  int  # hsync asserted from here
    h_sync_end:    int  # ... until here
    h_total:       int  # counter wraps here
    h_sync_invert: bool # hsync pin active-low
    v_active:      int  # visible lines
    v_sync_start:  int  # vsync asserted from here
    v_sync_end:    int  # ... until here
    v_total:       int  # counter wraps here
    v_sync_invert: bool # vsync pin active-low
    pixel_clk_mhz: float

    @property
    def active_pixels(self):
        return self.h_active * self.v_active

    @property
    def refresh_rate(self):
        return (self.pixel_clk_mhz*1e6)/(self.h_total * self.v_total)

    @staticmethod
    def all_timings():
        return {
            # CVT 640x480p59.94
            "640x480p59.94": VGAModeline(
                h_active      = 640,
                h_sync_start  = 656,
                h_sync_end    = 752,
                h_total       = 800,
                h_sync_invert = True,
                v_active      = 480,
                v_sync_start  = 490,
                v_sync_end    = 492,
                v_total       = 525,
                v_sync_invert = True,
                pixel_clk_mhz = 25.175,
            ),

            # Same timings on a rounded 25.2MHz clock, as is common on small
            # FPGA boards that cannot synthesize 25.175MHz exactly.
            "640x480p60": VGAModeline(
                h_active      = 640,
                h_sync_start  = 656,
                h_sync_end    = 752,
                h_total       = 800,
                h_sync_invert = True,
                v_active      = 480,
                v_sync_start  = 490,
                v_sync_end    = 492,
                v_total       = 525,
                v_sync_invert = True,
                pixel_clk_mhz = 25.2,
            ),
        }

    @staticmethod
    def get(name):
        modelines = VGAModeline.all_timings()
        if name not in modelines:
            raise ValueError(f"Modeline '{name}' not one of {list(modelines)}")
        return modelines[name]
