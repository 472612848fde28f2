"""Rules and state for a top-down cyberpunk role-playing game, without rendering."""

__version__ = "0.1.0"