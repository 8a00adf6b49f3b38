"""A tile-based puzzle game played on .ber maps, with map checks, game rules, a pygame front end and small string and I/O helpers."""

__version__ = "0.1.0"