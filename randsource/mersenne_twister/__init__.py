"""Mersenne Twister pseudo-random number generator sources."""

from .MT32Source import MT32Source
from .MT64Source import MT64Source

__all__ = ["MT32Source", "MT64Source"]
