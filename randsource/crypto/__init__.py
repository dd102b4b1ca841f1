"""Cryptographically secure random number generator source."""

from .CryptoSource import CryptoSource
from .EntropyReader import EntropyReader
from .abstract.IEntropyReader import IEntropyReader

__all__ = ["CryptoSource", "EntropyReader", "IEntropyReader"]
