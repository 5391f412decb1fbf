"""A tile-based collect-and-escape adventure game with map checking, XPM sprite loading and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]