"""A terminal snake game with gates, items, missions and timed walls."""

__version__ = "0.1.0"