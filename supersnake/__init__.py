"""A terminal snake game with power fruit, wall wrapping and emoji themes."""

__version__ = "1.0.0"
__all__ = ["__version__"]