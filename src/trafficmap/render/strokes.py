"""Turn segments into an ordered list of strokes in pixel space."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable

from trafficmap.dump.model import Segment
from trafficmap.render.config import RenderConfig
from trafficmap.render.projection import project
from trafficmap.render.scale import darkness, segment_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stroke:
    """One straight, round-capped line to draw on the canvas."""

    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    darkness: float
    count: float


def max_width(segments: list[Segment], drawn: list[Segment], basis: str) -> float:
    """Width the darkest stroke is scaled against."""
    if basis == "size":
        return segment_width(len(segments))
    if not drawn:
        return 0.0
    return segment_width(max(s.count for s in drawn))


def plan_strokes(segments: Iterable[Segment], config: RenderConfig) -> list[Stroke]:
    """Filter, order and project segments into strokes.

    Segments with ``count <= config.cutoff`` are dropped. The rest are
    returned in ascending count order so that busier segments are painted
    over quieter ones. The input is not modified.
    """
    segments = list(segments)
    drawn = sorted(
        (s for s in segments if s.count > config.cutoff),
        key=attrgetter("count"),
    )
    widest = max_width(segments, drawn, config.max_width_basis)

    strokes: list[Stroke] = []
    for seg in drawn:
        width = segment_width(seg.count)
        # Only reachable with a cutoff below sqrt(10)
        if width <= 0:
            continue
        x1, y1 = project(seg.x1, seg.y1, config.window, config.meters_per_pixel)
        x2, y2 = project(seg.x2, seg.y2, config.window, config.meters_per_pixel)
        strokes.append(Stroke(
            x1=x1, y1=y1, x2=x2, y2=y2,
            width=width,
            darkness=darkness(width, widest),
            count=seg.count,
        ))

    logger.info(
        "Planned %d strokes from %d segments (cutoff %g, max width %.3f)",
        len(strokes), len(segments), config.cutoff, widest,
    )
    return strokes
