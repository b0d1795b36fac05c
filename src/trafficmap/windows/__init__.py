"""Named map windows."""

from trafficmap.windows.france import FRANCE_WINDOW
from trafficmap.windows.window import MapWindow

WINDOWS = {
    "france": FRANCE_WINDOW,
}

__all__ = ["WINDOWS", "FRANCE_WINDOW", "MapWindow"]
