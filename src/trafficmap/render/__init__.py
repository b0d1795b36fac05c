"""Density map rendering."""

from trafficmap.render.config import RenderConfig
from trafficmap.render.raster import RenderResult, render_png, render_svg, write_png
from trafficmap.render.strokes import Stroke, plan_strokes

__all__ = [
    "RenderConfig",
    "RenderResult",
    "Stroke",
    "plan_strokes",
    "render_png",
    "render_svg",
    "write_png",
]
