"""A turn-based dungeon crawler: map generation, entity systems and a curses front end."""

__version__ = "0.1.0"