from abc import ABC, abstractmethod
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Abstract base class defining the interface for the multi-precision random primitives."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            MPZ: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a seeded random state.

        The same seed always yields a state producing the same sequence.

        Args:
            seed (int): Non-negative seed value

        Returns:
            RandomState: Random state object
        """

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> int:
        """Draw a uniformly distributed integer in [0, 2^bit_count) from state.

        Args:
            state (RandomState): Random state to advance
            bit_count (int): Number of bits in result

        Returns:
            int: Random integer
        """
