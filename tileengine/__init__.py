"""A small tile-based game engine with actors, components and text-file levels."""

__version__ = "0.1.0"