"""Random number generator source contract."""

from .abstract.ISource import ISource

__all__ = ["ISource"]
