from abc import ABC, abstractmethod
from typing import Optional

from ...crypto import CryptoSource
from ...source import ISource
from ..Rand import Rand
from ..SourceKind import SourceKind


class IRandFactory(ABC):
    """Abstract base class defining the interface for creating ready-to-use random number generators."""

    @staticmethod
    @abstractmethod
    def new(source: ISource) -> Rand:
        """Create a random number generator using source.

        The availability of the source is asserted first; a generator is only
        returned for an available source.

        Args:
            source (ISource): The random number generator source

        Returns:
            Rand: A random number generator drawing from source

        Raises:
            NotAvailableError: If the source is not available on the platform
        """

    @staticmethod
    @abstractmethod
    def new_crypto_rand(source: Optional[CryptoSource] = None) -> Rand:
        """Create a cryptographically secure random number generator.

        Args:
            source (Optional[CryptoSource]): Shared crypto source, a new one is created if omitted

        Returns:
            Rand: A random number generator drawing from the OS entropy source
        """

    @staticmethod
    @abstractmethod
    def new_pseudo_random_rand() -> Rand:
        """Create a pseudo-random number generator seeded from the current time.

        Returns:
            Rand: A random number generator with a time-dependent sequence
        """

    @staticmethod
    @abstractmethod
    def new_deterministic_rand() -> Rand:
        """Create a pseudo-random number generator seeded with the default seed.

        Returns:
            Rand: A random number generator with a fixed sequence
        """

    @staticmethod
    @abstractmethod
    def new_source(kind: SourceKind) -> ISource:
        """Create a fresh source of the given kind.

        Args:
            kind (SourceKind): Kind of source to create

        Returns:
            ISource: The new source
        """
