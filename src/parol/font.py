# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Bitmap font and fixed two-line text layout.

Each character occupies a 20x16 cell: a 16x16 block (an 8x8 glyph drawn
with 2x2 pixels) followed by a 4 pixel gap. Both lines are centered on
the screen, and share a single glyph table.

In hardware the layout is 2 ROMs: one holding the glyph index of every
character of both lines, and one holding the rows of every glyph.
"""

from amaranth import *
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out
from amaranth.lib.memory import Memory

LINES = [
    "MERRY XMAS",
    "MALIGAYANG PASKO!",
]

CENTER_X    = 320
FIRST_LINE_Y = 475
LINE_HEIGHT = 16
LINE_GAP    = 5
CELL_WIDTH  = 20
BLOCK_WIDTH = 16

# 8 rows per glyph, most significant bit is the leftmost pixel.
GLYPHS = {
    "M": [0b10000001,
          0b11000011,
          0b10100101,
          0b10011001,
          0b10000001,
          0b10000001,
          0b10000001,
          0b00000000],
    "E": [0b11111111,
          0b10000000,
          0b10000000,
          0b11111110,
          0b10000000,
          0b10000000,
          0b11111111,
          0b00000000],
    "R": [0b11111100,
          0b10000010,
          0b10000010,
          0b11111100,
          0b10010000,
          0b10001000,
          0b10000110,
          0b00000000],
    "Y": [0b10000001,
          0b01000010,
          0b00100100,
          0b00011000,
          0b00011000,
          0b00011000,
          0b00011000,
          0b00000000],
    "X": [0b10000001,
          0b01000010,
          0b00100100,
          0b00011000,
          0b00100100,
          0b01000010,
          0b10000001,
          0b00000000],
    "A": [0b00011000,
          0b00100100,
          0b01000010,
          0b10000001,
          0b11111111,
          0b10000001,
          0b10000001,
          0b00000000],
    "S": [0b01111110,
          0b10000000,
          0b10000000,
          0b01111110,
          0b00000001,
          0b00000001,
          0b01111110,
          0b00000000],
    "L": [0b10000000,
          0b10000000,
          0b10000000,
          0b10000000,
          0b10000000,
          0b10000000,
          0b11111111,
          0b00000000],
    "I": [0b11111111,
          0b00011000,
          0b00011000,
          0b00011000,
          0b00011000,
          0b11111111,
          0b00000000,
          0b00000000],
    "G": [0b01111110,
          0b10000000,
          0b10000000,
          0b10001111,
          0b10000001,
          0b10000001,
          0b01111110,
          0b00000000],
    "N": [0b10000001,
          0b11000001,
          0b10100001,
          0b10010001,
          0b10001001,
          0b10000101,
          0b10000011,
          0b00000000],
    "P": [0b11111100,
          0b10000010,
          0b10000010,
          0b11111100,
          0b10000000,
          0b10000000,
          0b10000000,
          0b00000000],
    "K": [0b10000100,
          0b10001000,
          0b10010000,
          0b11100000,
          0b10010000,
          0b10001000,
          0b10000100,
          0b00000000],
    "O": [0b01111110,
          0b10000001,
          0b10000001,
          0b10000001,
          0b10000001,
          0b10000001,
          0b01111110,
          0b00000000],
    "!": [0b00011000,
          0b00011000,
          0b00011000,
          0b00011000,
          0b00000000,
          0b00011000,
          0b00000000,
          0b00000000],
}

BLANK = [0] * 8


def glyph(char):
    """All 8 rows of the glyph for ``char``, blank if it has none (e.g. space)."""
    return GLYPHS.get(char, BLANK)


def glyph_index(char):
    """Position of ``char`` in the glyph ROM, where 0 is the blank glyph."""
    if char not in GLYPHS:
        return 0
    return list(GLYPHS).index(char) + 1


def line_geometry(n):
    """(x0, y0, width) of text line ``n``, in pixels."""
    width = len(LINES[n]) * CELL_WIDTH
    x0 = CENTER_X - width // 2
    y0 = FIRST_LINE_Y + n * (LINE_HEIGHT + LINE_GAP)
    return x0, y0, width


def font_bit(x, y):
    """Reference model of :class:`TextLayout`."""
    for n, text in enumerate(LINES):
        x0, y0, width = line_geometry(n)
        if x0 <= x < x0 + width and y0 <= y < y0 + LINE_HEIGHT:
            rel_x, rel_y = x - x0, y - y0
            char_index, block_x = divmod(rel_x, CELL_WIDTH)
            if block_x >= BLOCK_WIDTH:
                return False
            row = glyph(text[char_index])[rel_y // 2]
            return bool((row >> (7 - block_x // 2)) & 1)
    return False


class TextLayout(wiring.Component):

    """
    Combinationally decide whether a pixel is lit by the text overlay.

    Members
    -------
    x, y : :py:`unsigned(10)`
        Pixel coordinate. 10 bits for ``y`` as the text bands extend
        beyond the last visible line of a 640x480 raster.
    font_bit : :py:`unsigned(1)`
        Pixel is part of a glyph.
    in_text : :py:`unsigned(1)`
        Pixel lies inside the extents of either line (lit or not).
    """

    x:        In(10)
    y:        In(10)
    font_bit: Out(1)
    in_text:  Out(1)

    def elaborate(self, platform):
        m = Module()

        # Glyph index of every character of every line, stored back-to-back.
        chars = [glyph_index(c) for line in LINES for c in line]
        n_glyphs = len(GLYPHS) + 1
        m.submodules.text_rom = text_rom = Memory(
            shape=range(n_glyphs), depth=len(chars), init=chars)
        m.submodules.glyph_rom = glyph_rom = Memory(
            shape=unsigned(8), depth=n_glyphs*8,
            init=[row for c in [None] + list(GLYPHS) for row in glyph(c)])
        rd_text = text_rom.read_port(domain="comb")
        rd_glyph = glyph_rom.read_port(domain="comb")

        rel_x      = Signal(10)
        rel_y      = Signal(4)
        line_base  = Signal(range(len(chars)))

        # Bands never overlap, so at most one line matches.
        in_line = []
        offset = 0
        for n, text in enumerate(LINES):
            x0, y0, width = line_geometry(n)
            hit = Signal(name=f"in_line{n}")
            m.d.comb += hit.eq((self.x >= x0) & (self.x < x0 + width) &
                               (self.y >= y0) & (self.y < y0 + LINE_HEIGHT))
            with m.If(hit):
                m.d.comb += [
                    rel_x.eq(self.x - x0),
                    rel_y.eq(self.y - y0),
                    line_base.eq(offset),
                ]
            in_line.append(hit)
            offset += len(text)

        char_index = Signal(range(len(chars)))
        block_x    = Signal(range(CELL_WIDTH))
        char_x     = Signal(3)
        char_y     = Signal(3)
        m.d.comb += [
            char_index.eq(rel_x // CELL_WIDTH),
            block_x.eq(rel_x % CELL_WIDTH),
            # Each glyph pixel is drawn as a 2x2 block.
            char_x.eq(block_x[1:4]),
            char_y.eq(rel_y[1:]),
            rd_text.addr.eq(line_base + char_index),
            rd_glyph.addr.eq(Cat(char_y, rd_text.data)),
        ]

        in_text = Signal()
        m.d.comb += in_text.eq(Cat(*in_line).any())

        m.d.comb += [
            self.in_text.eq(in_text),
            self.font_bit.eq(in_text & (block_x < BLOCK_WIDTH) &
                             rd_glyph.data.bit_select(~char_x, 1)),
        ]

        return m
