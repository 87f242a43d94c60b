"""Frame-by-frame game logic for a 2D arcade shooter, with no rendering attached."""

__version__ = "0.1.0"