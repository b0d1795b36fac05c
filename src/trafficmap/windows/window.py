"""Geographic map window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MapWindow:
    """Rectangular map extent in projected metres."""

    name: str
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def with_bounds(
        self,
        xmin: float | None = None,
        xmax: float | None = None,
        ymin: float | None = None,
        ymax: float | None = None,
    ) -> MapWindow:
        """Return a copy with any given bound replaced."""
        return MapWindow(
            name=self.name,
            xmin=self.xmin if xmin is None else xmin,
            xmax=self.xmax if xmax is None else xmax,
            ymin=self.ymin if ymin is None else ymin,
            ymax=self.ymax if ymax is None else ymax,
        )
