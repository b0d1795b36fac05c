"""Render configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from trafficmap.render.constants import (
    DEFAULT_CUTOFF,
    DEFAULT_INPUT,
    DEFAULT_METERS_PER_PIXEL,
    DEFAULT_OUTPUT,
    MAX_WIDTH_BASES,
)
from trafficmap.render.projection import pixel_size
from trafficmap.windows import FRANCE_WINDOW, MapWindow


@dataclass
class RenderConfig:
    """Everything that controls one rendering pass.

    ``max_width_basis`` selects what the darkest stroke is scaled against:
    ``"count"`` uses the width of the busiest segment that is drawn, ``"size"``
    uses the width a segment would get if its count equalled the number of
    loaded segments.
    """

    window: MapWindow = FRANCE_WINDOW
    meters_per_pixel: float = DEFAULT_METERS_PER_PIXEL
    cutoff: float = DEFAULT_CUTOFF
    input_path: Path = field(default_factory=lambda: Path(DEFAULT_INPUT))
    output_path: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT))
    max_width_basis: str = "count"

    def __post_init__(self) -> None:
        if self.meters_per_pixel <= 0:
            raise ValueError(
                f"meters_per_pixel must be positive, got {self.meters_per_pixel}"
            )
        if self.window.xmax <= self.window.xmin or self.window.ymax <= self.window.ymin:
            raise ValueError(
                f"Empty map window {self.window.name!r}: "
                f"x {self.window.xmin}..{self.window.xmax}, "
                f"y {self.window.ymin}..{self.window.ymax}"
            )
        if self.max_width_basis not in MAX_WIDTH_BASES:
            raise ValueError(
                f"max_width_basis must be one of {', '.join(MAX_WIDTH_BASES)}, "
                f"got {self.max_width_basis!r}"
            )
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)

    @property
    def canvas_size(self) -> tuple[int, int]:
        return pixel_size(self.window, self.meters_per_pixel)
