"""Cluster crash records into intersections, build their proximity graph, rank and plot it."""

__version__ = "0.1.0"

__all__ = ["__version__"]