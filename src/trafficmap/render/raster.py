"""Raster generation for density maps using drawsvg and cairosvg."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable

import cairosvg
import drawsvg as draw
from PIL import Image

from trafficmap.dump.model import Segment
from trafficmap.render.config import RenderConfig
from trafficmap.render.constants import BACKGROUND_COLOR, LINE_CAP
from trafficmap.render.scale import grey_hex
from trafficmap.render.strokes import Stroke, plan_strokes

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Summary of a finished rendering pass."""

    output: Path
    width: int
    height: int
    drawn: int
    skipped: int


def _build_drawing(strokes: list[Stroke], config: RenderConfig) -> draw.Drawing:
    width, height = config.canvas_size
    d = draw.Drawing(width, height)
    d.append(draw.Rectangle(0, 0, width, height, fill=BACKGROUND_COLOR))
    for stroke in strokes:
        d.append(draw.Line(
            stroke.x1, stroke.y1, stroke.x2, stroke.y2,
            fill="none",
            stroke=grey_hex(stroke.darkness),
            stroke_width=stroke.width,
            stroke_linecap=LINE_CAP,
        ))
    return d


def render_svg(segments: Iterable[Segment], config: RenderConfig) -> str:
    """Render segments to an SVG string covering the configured window."""
    strokes = plan_strokes(segments, config)
    return _build_drawing(strokes, config).as_svg()


def _encode_png(strokes: list[Stroke], config: RenderConfig, out: BinaryIO) -> None:
    """Rasterize strokes and write an RGB PNG to ``out``.

    The SVG text is dropped once cairosvg has parsed it, and cairosvg writes
    into a buffer that Pillow decodes in place.
    """
    rgba = io.BytesIO()
    cairosvg.svg2png(
        bytestring=_build_drawing(strokes, config).as_svg().encode(),
        write_to=rgba,
    )
    rgba.seek(0)
    with Image.open(rgba) as image:
        image.convert("RGB").save(out, format="PNG")


def render_png(segments: Iterable[Segment], config: RenderConfig) -> bytes:
    """Render segments to RGB PNG bytes."""
    out = io.BytesIO()
    _encode_png(plan_strokes(segments, config), config, out)
    return out.getvalue()


def write_png(
    segments: Iterable[Segment],
    config: RenderConfig,
    output: Path | None = None,
) -> RenderResult:
    """Render segments and write the PNG to ``output`` or ``config.output_path``.

    The output file is opened before rasterizing, so an unwritable path fails
    without drawing anything.
    """
    segments = list(segments)
    output = Path(output) if output is not None else config.output_path
    strokes = plan_strokes(segments, config)
    width, height = config.canvas_size

    with output.open("wb") as f:
        logger.info("Rasterizing %dx%d canvas", width, height)
        _encode_png(strokes, config, f)
        size = f.tell()
    logger.info("Wrote %s (%d bytes)", output, size)

    return RenderResult(
        output=output,
        width=width,
        height=height,
        drawn=len(strokes),
        skipped=len(segments) - len(strokes),
    )
