"""A tile-based maze chase arcade game with pathfinding monsters and a map tool."""

__version__ = "0.1.0"