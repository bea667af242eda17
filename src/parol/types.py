# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

from amaranth import *
from amaranth.lib import data


class Color(data.Struct):
    """
    Output pixel format: 2 bits per channel, as driven onto a VGA PMOD.
    """

    r: unsigned(2)
    g: unsigned(2)
    b: unsigned(2)


class ShapeFlags(data.Struct):
    """
    Which regions of the test pattern a pixel falls inside. These are
    independent - a pixel may be in more than one region, and it is
    up to the compositor to decide which one wins.
    """

    tree_body:    unsigned(1)
    trunk:        unsigned(1)
    star:         unsigned(1)
    light_stripe: unsigned(1)
