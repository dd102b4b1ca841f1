from abc import ABC, abstractmethod
from typing import Optional

from ...errors import NotAvailableError
from ...protocol_constants import MASK63


class ISource(ABC):
    """Abstract base class defining the interface for a random number generator source.

    A source produces a stream of 64-bit values. Before handing a source to a caller,
    assert_available() should be called; a subsequent call of err() returns an error
    if the source is not available on the platform.
    """

    @abstractmethod
    def uint64(self) -> int:
        """Get the next random 64-bit value.

        Returns:
            int: A value in [0, 2^64)
        """

    def int63(self) -> int:
        """Get the next random non-negative 63-bit integer.

        The default implementation clears the top bit of uint64().

        Returns:
            int: A value in [0, 2^63)
        """
        return self.uint64() & MASK63

    @abstractmethod
    def seed(self, s: int) -> None:
        """Initialize the source to a deterministic state defined by s.

        Sources that cannot be seeded ignore the call.

        Args:
            s (int): Seed, reduced to a signed 64-bit integer
        """

    @abstractmethod
    def assert_available(self) -> None:
        """Check the availability of the source.

        The result is observable through err().
        """

    @abstractmethod
    def err(self) -> Optional[NotAvailableError]:
        """Get the last occurring error of the source.

        Returns:
            Optional[NotAvailableError]: The last error, or None if no error occurred
        """
