"""A tile-based puzzle game: collect every item, then reach the exit.

Maps are read from .ber files, checked for playability, and played in a
pygame window.
"""

__version__ = "0.1.0"