"""A small top-down role-playing game on tile maps, with its logic usable without a window."""

__version__ = "0.1.0"
__all__ = ["__version__"]