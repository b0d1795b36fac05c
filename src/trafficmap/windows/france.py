"""Metropolitan France in Lambert-93 (EPSG:2154)."""

from trafficmap.windows.window import MapWindow

# The projection origin lies south of the window, in Algeria.
FRANCE_WINDOW = MapWindow(
    name="france",
    xmin=100_000.0,
    xmax=1_300_000.0,
    ymin=6_000_000.0,
    ymax=7_200_000.0,
)
