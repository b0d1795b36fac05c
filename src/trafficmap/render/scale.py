"""Logarithmic stroke width and grey level for traversal counts."""

from __future__ import annotations

import math

from trafficmap.render.constants import (
    DARKNESS_SPREAD,
    MIN_COUNT,
    WIDTH_LOG_FACTOR,
    WIDTH_OFFSET,
)


def segment_width(count: float) -> float:
    """Stroke width in pixels: ``2 * log10(count) - 1``.

    Counts below 1 (including zero and negatives) are treated as 1.
    """
    return WIDTH_LOG_FACTOR * math.log10(max(count, MIN_COUNT)) + WIDTH_OFFSET


def darkness(width: float, max_width: float) -> float:
    """Grey level in [0, 1] for a stroke; 0 is black.

    The widest stroke is black and a zero-width stroke is 2/3 grey. A
    non-positive ``max_width`` leaves nothing to scale against and gives black.
    """
    if max_width <= 0:
        return 0.0
    value = (max_width - width) / (DARKNESS_SPREAD * max_width)
    return min(1.0, max(0.0, value))


def grey_hex(level: float) -> str:
    """``#rrggbb`` with equal channels for a grey level in [0, 1]."""
    channel = round(min(1.0, max(0.0, level)) * 255)
    return f"#{channel:02x}{channel:02x}{channel:02x}"
