"""Basic drawing primitives on numpy frame buffers."""

from typing import Tuple
import math

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int, color: Color = (0, 0, 0)) -> Buffer:
    """Allocate a (height, width, 3) RGB buffer filled with ``color``."""
    buffer = np.zeros((height, width, 3), dtype=np.uint8)
    buffer[:, :] = color
    return buffer


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _blend(region: NDArray, color: Color, alpha: float) -> None:
    if alpha >= 1.0:
        region[...] = color
    elif alpha > 0.0:
        src = np.asarray(color, dtype=np.float32)
        region[...] = (src * alpha + region.astype(np.float32) * (1 - alpha)).astype(np.uint8)


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Draw a filled rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        alpha: Opacity (0.0 to 1.0)
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(int(x), w))
    y1 = max(0, min(int(y), h))
    x2 = max(0, min(int(x + width), w))
    y2 = max(0, min(int(y + height), h))

    if x2 <= x1 or y2 <= y1:
        return
    _blend(buffer[y1:y2, x1:x2], color, alpha)


def draw_ellipse(
    buffer: Buffer,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    color: Color,
    alpha: float = 1.0,
    angle: float = 0.0,
) -> None:
    """Draw a filled ellipse centred on (cx, cy), rotated by ``angle`` radians."""
    if rx <= 0 or ry <= 0:
        return
    h, w = buffer.shape[:2]

    # Work on the bounding box only
    ex, ey = (max(rx, ry),) * 2 if angle else (rx, ry)
    x1 = max(0, int(cx - ex))
    x2 = min(w, int(cx + ex) + 1)
    y1 = max(0, int(cy - ey))
    y2 = min(h, int(cy + ey) + 1)
    if x2 <= x1 or y2 <= y1:
        return

    ys, xs = np.ogrid[y1:y2, x1:x2]
    dx = xs - cx
    dy = ys - cy
    if angle:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        dx, dy = dx * cos_a + dy * sin_a, dy * cos_a - dx * sin_a
    mask = (dx / rx) ** 2 + (dy / ry) ** 2 <= 1.0
    region = buffer[y1:y2, x1:x2]
    if alpha >= 1.0:
        region[mask] = color
    else:
        src = np.asarray(color, dtype=np.float32)
        region[mask] = (src * alpha + region[mask].astype(np.float32) * (1 - alpha)).astype(np.uint8)


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Draw a filled circle."""
    draw_ellipse(buffer, cx, cy, radius, radius, color, alpha)
