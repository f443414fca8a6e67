"""A tile-based dungeon game built on a small entity-component system."""

__version__ = "0.1.0"