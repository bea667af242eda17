# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Render frames of the test pattern on the host, straight from the
reference model (no simulation). Useful for quickly tweaking it.

Frames are ``(height, width, 3)`` arrays of 2-bit channel values, the
same format :func:`parol.sim.capture_frames` produces.
"""

import numpy as np

from . import palette
from .pattern import pixel
from .top import H_ACTIVE, V_ACTIVE


def render(counter, width=H_ACTIVE, height=V_ACTIVE):
    """Whole active frame for an animation counter value."""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            frame[y, x, :] = pixel(x, y, counter)
    return frame


def to_image(frame):
    """Expand 2-bit channels to 8-bit RGB."""
    lut = np.array([palette.to_rgb888((v,))[0] for v in range(4)], dtype=np.uint8)
    return lut[frame]


def save_png(frame, path):
    import matplotlib.pyplot as plt
    print(f'save frame render to {path}')
    plt.imsave(path, to_image(frame))
