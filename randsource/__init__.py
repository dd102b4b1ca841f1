"""Interchangeable random number generator sources behind one contract."""

from .crypto import CryptoSource
from .deterministic import DeterministicSource
from .errors import NotAvailableError
from .mersenne_twister import MT32Source, MT64Source
from .rand import Rand, RandFactory, SourceKind
from .simple import SimpleSource
from .source import ISource

__all__ = [
    "ISource",
    "CryptoSource",
    "DeterministicSource",
    "MT32Source",
    "MT64Source",
    "SimpleSource",
    "NotAvailableError",
    "Rand",
    "RandFactory",
    "SourceKind",
]
