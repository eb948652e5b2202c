"""A two-player chess game: rules, a pygame window and a console move list."""

__version__ = "0.1.0"