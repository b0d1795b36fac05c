"""Reading and writing of flat binary segment dumps."""

from trafficmap.dump.model import Segment, SegmentCollection
from trafficmap.dump.reader import DumpFormatError, load_dump, read_csv_segments, read_header
from trafficmap.dump.writer import write_dump

__all__ = [
    "DumpFormatError",
    "Segment",
    "SegmentCollection",
    "load_dump",
    "read_csv_segments",
    "read_header",
    "write_dump",
]
