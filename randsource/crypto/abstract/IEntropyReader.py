from abc import ABC, abstractmethod


class IEntropyReader(ABC):
    """Abstract base class defining the interface for reading raw entropy."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read raw entropy bytes.

        Args:
            size (int): Number of bytes to read

        Returns:
            bytes: The entropy read, possibly shorter than size on a failing platform

        Raises:
            OSError: If the entropy source cannot be read
        """
