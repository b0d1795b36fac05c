"""Projected-metre to pixel transform."""

from __future__ import annotations

from trafficmap.windows.window import MapWindow


def pixel_size(window: MapWindow, meters_per_pixel: float) -> tuple[int, int]:
    """Canvas (width, height) in whole pixels."""
    return (
        int(window.width / meters_per_pixel),
        int(window.height / meters_per_pixel),
    )


def project(
    x: float, y: float, window: MapWindow, meters_per_pixel: float,
) -> tuple[float, float]:
    """Map a projected point to canvas pixels.

    Pixel rows grow downward, so north (increasing y) maps to smaller rows.
    """
    px = (x - window.xmin) / meters_per_pixel
    py = (window.ymax - y) / meters_per_pixel
    return px, py
