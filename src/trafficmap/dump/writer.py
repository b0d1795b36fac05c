"""Writer for flat binary segment dumps."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from trafficmap.dump.model import HEADER_DTYPE, RECORD_DTYPE, Segment

logger = logging.getLogger(__name__)


def write_dump(path: str | Path, segments: Iterable[Segment]) -> int:
    """Write segments in dump format and return how many were written.

    Values are stored as 32-bit floats, so coordinates and counts lose
    precision beyond float32.
    """
    rows = [(s.x1, s.y1, s.x2, s.y2, s.count) for s in segments]
    records = np.array(rows, dtype=RECORD_DTYPE)
    path = Path(path)
    with path.open("wb") as f:
        f.write(np.array(len(rows), dtype=HEADER_DTYPE).tobytes())
        f.write(records.tobytes())
    logger.info("Wrote %d segments to %s", len(rows), path)
    return len(rows)
