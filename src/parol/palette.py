# Fixed colors used by the test pattern.
#
# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

# All colors are (R, G, B) with 2 bits per channel.
BLACK    = (0, 0, 0)
WHITE    = (3, 3, 3)
GREEN    = (0, 3, 0)
BROWN    = (2, 1, 0)
DARK_RED = (2, 0, 0)
RED      = (3, 0, 0)
YELLOW   = (3, 3, 0)
ORANGE   = (3, 1, 0)
BLUE     = (0, 0, 3)

# Star color, indexed by blink phase.
STAR_COLORS = [DARK_RED, RED, YELLOW, ORANGE]

# String lights on the tree, indexed by bit 3 of the pixel X coordinate.
LIGHT_COLORS = [RED, BLUE]


def to_rgb888(color):
    """Expand a 2-bit per channel color to 8 bits per channel (0..3 -> 0..255)."""
    return tuple(c * 0x55 for c in color)

