"""Simple example pseudo-random number generator source."""

from .SimpleSource import SimpleSource

__all__ = ["SimpleSource"]
