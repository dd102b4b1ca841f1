import threading
from typing import Optional

from ..errors import NotAvailableError
from ..mpc import MPC
from ..mpc.types import RandomState
from ..protocol_constants import DEFAULT_SEED, MASK64, to_int64
from ..source import ISource


class DeterministicSource(ISource):
    """Deterministic pseudo-random number generator source backed by the GMP random state.

    Two sources created with the same seed produce identical sequences; an
    unseeded source uses DEFAULT_SEED. The source is safe for concurrent use.
    The output is easily predictable and unsuitable for security-sensitive services.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        """Initialize the source.

        Args:
            seed (int): Initial seed, defaults to DEFAULT_SEED
        """
        self._lock = threading.Lock()
        self._state: RandomState = DeterministicSource._new_state(seed)

    def seed(self, s: int) -> None:
        state = DeterministicSource._new_state(s)
        with self._lock:
            self._state = state

    def uint64(self) -> int:
        with self._lock:
            return MPC.mpz_urandomb(self._state, 64)

    def int63(self) -> int:
        with self._lock:
            return MPC.mpz_urandomb(self._state, 63)

    def assert_available(self) -> None:
        """The pseudo-random calculation is always available."""

    def err(self) -> Optional[NotAvailableError]:
        return None

    # Private Methods
    # --------------

    @staticmethod
    def _new_state(s: int) -> RandomState:
        """Create a random state from the two's complement bit pattern of a 64-bit seed."""
        return MPC.random_state(to_int64(s) & MASK64)
