"""Reader for flat binary segment dumps.

A dump is an unsigned 64-bit segment count followed by that many packed
records of five 32-bit floats (``x1, y1, x2, y2, count``). There is no magic
number, version or checksum, so the only integrity check available is that
the payload size agrees with the declared count.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import numpy as np

from trafficmap.dump.model import HEADER_DTYPE, RECORD_DTYPE, Segment, SegmentCollection

logger = logging.getLogger(__name__)

CSV_FIELDS = ("x1", "y1", "x2", "y2", "count")


class DumpFormatError(ValueError):
    """The dump file does not match its declared layout."""


def _decode_header(data: bytes, path: Path) -> int:
    if len(data) < HEADER_DTYPE.itemsize:
        raise DumpFormatError(
            f"{path}: file is {len(data)} bytes, shorter than the "
            f"{HEADER_DTYPE.itemsize}-byte segment count header"
        )
    return int(np.frombuffer(data, dtype=HEADER_DTYPE, count=1)[0])


def read_header(path: str | Path) -> int:
    """Return the segment count declared at the start of a dump."""
    path = Path(path)
    with path.open("rb") as f:
        return _decode_header(f.read(HEADER_DTYPE.itemsize), path)


def load_dump(path: str | Path) -> SegmentCollection:
    """Load every segment of a dump, in stored order.

    Raises DumpFormatError when the file is shorter than its header or when
    the payload is not exactly ``count`` records long.
    """
    path = Path(path)
    with path.open("rb") as f:
        declared = _decode_header(f.read(HEADER_DTYPE.itemsize), path)
        payload = f.read()

    expected = declared * RECORD_DTYPE.itemsize
    if len(payload) < expected:
        raise DumpFormatError(
            f"{path}: truncated dump, header declares {declared} segments "
            f"({expected} bytes) but only {len(payload)} bytes follow"
        )
    if len(payload) > expected:
        raise DumpFormatError(
            f"{path}: header declares {declared} segments ({expected} bytes) "
            f"but {len(payload) - expected} extra bytes follow"
        )

    segments: tuple[Segment, ...] = ()
    if declared:
        records = np.frombuffer(payload, dtype=RECORD_DTYPE, count=declared)
        segments = tuple(Segment(*row) for row in records.tolist())
    logger.info("Loaded %d segments from %s", len(segments), path)
    return SegmentCollection(declared_count=declared, segments=segments)


def _parse_csv_row(path: Path, lineno: int, row: list[str]) -> Segment | None:
    if not row or all(not cell.strip() for cell in row):
        return None
    if lineno == 1 and tuple(c.strip().lower() for c in row) == CSV_FIELDS:
        return None
    if len(row) != len(CSV_FIELDS):
        raise DumpFormatError(
            f"{path}:{lineno}: expected {len(CSV_FIELDS)} fields, got {len(row)}"
        )
    try:
        values = [float(cell) for cell in row]
    except ValueError:
        raise DumpFormatError(
            f"{path}:{lineno}: non-numeric field in {row!r}"
        ) from None
    return Segment(*values)


def read_csv_segments(path: str | Path) -> list[Segment]:
    """Read ``x1,y1,x2,y2,count`` rows from a UTF-8 CSV file.

    A first row whose fields are the column names is treated as a header.
    """
    path = Path(path)
    segments: list[Segment] = []
    try:
        with path.open(newline="", encoding="utf-8") as f:
            for lineno, row in enumerate(csv.reader(f), start=1):
                segment = _parse_csv_row(path, lineno, row)
                if segment is not None:
                    segments.append(segment)
    except UnicodeDecodeError as e:
        raise DumpFormatError(f"{path}: not UTF-8 text ({e.reason})") from None
    logger.debug("Read %d segments from %s", len(segments), path)
    return segments
