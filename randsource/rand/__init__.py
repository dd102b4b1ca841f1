"""Random number generators on top of the sources."""

from .Rand import Rand
from .RandFactory import RandFactory
from .SourceKind import SourceKind
from .abstract.IRandFactory import IRandFactory

__all__ = ["Rand", "RandFactory", "SourceKind", "IRandFactory"]
