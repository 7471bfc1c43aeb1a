"""A tile-based game: collect every item on a walled map, then reach the exit."""

__version__ = "1.0.0"