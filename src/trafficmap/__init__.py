"""trafficmap: render weighted line segments as a traffic density map."""

__version__ = "0.1.0"
