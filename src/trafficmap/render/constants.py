"""Render constants and configuration defaults."""

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_METERS_PER_PIXEL: float = 100.0
"""Metres per output pixel. 100 gives a 12000 x 12000 canvas over France."""

DEFAULT_CUTOFF: float = 10.0
"""Segments with count <= cutoff are not drawn."""

DEFAULT_INPUT = "edges_dump"
DEFAULT_OUTPUT = "routes_from_nd.png"

# ---------------------------------------------------------------------------
# Weight and darkness
# ---------------------------------------------------------------------------
WIDTH_LOG_FACTOR: float = 2.0
"""Pixels of stroke width per decade of traversal count."""

WIDTH_OFFSET: float = -1.0
"""Constant added to the scaled logarithm."""

MIN_COUNT: float = 1.0
"""Counts below this are clamped before taking the logarithm."""

DARKNESS_SPREAD: float = 1.5
"""Darkness denominator as a multiple of the maximum width."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
BACKGROUND_COLOR = "#ffffff"
LINE_CAP = "round"

MAX_WIDTH_BASES = ("count", "size")
"""``count``: widest surviving segment. ``size``: number of loaded segments."""
