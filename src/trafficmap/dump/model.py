"""Data model for weighted segment dumps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

HEADER_DTYPE = np.dtype("<u8")
"""Leading segment count."""

RECORD_DTYPE = np.dtype([
    ("x1", "<f4"),
    ("y1", "<f4"),
    ("x2", "<f4"),
    ("y2", "<f4"),
    ("count", "<f4"),
])
"""One packed segment record (20 bytes, no padding)."""


@dataclass(frozen=True)
class Segment:
    """A line segment in projected metres with its traversal count."""

    x1: float
    y1: float
    x2: float
    y2: float
    count: float


@dataclass(frozen=True)
class SegmentCollection:
    """All segments of a dump, in stored order."""

    declared_count: int
    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def max_count(self) -> float:
        return max((s.count for s in self.segments), default=0.0)

    @property
    def min_count(self) -> float:
        return min((s.count for s in self.segments), default=0.0)

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Return (xmin, ymin, xmax, ymax) over all endpoints, or None if empty."""
        if not self.segments:
            return None
        xs = [x for s in self.segments for x in (s.x1, s.x2)]
        ys = [y for s in self.segments for y in (s.y1, s.y2)]
        return min(xs), min(ys), max(xs), max(ys)
