import math
import threading
from typing import Optional

from ..errors import NotAvailableError
from ..protocol_constants import DEFAULT_SEED, MASK64, to_int64
from ..source import ISource

P1 = 15485863     # 1000000th prime number
P2 = 2038074743   # 100000000th prime number


class SimpleSource(ISource):
    """A very simple example of a pseudo-random number generator source.

    The seed doubles as a counter: every int63() draw is a deterministic function
    of the current seed, which is then incremented. It is safe for concurrent use,
    but the output is easily predictable and unsuitable for anything beyond
    demonstrating and testing the source contract.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._s = DEFAULT_SEED

    def seed(self, s: int) -> None:
        with self._lock:
            self._s = to_int64(s)

    def uint64(self) -> int:
        with self._lock:
            first = self._next_unlocked()
            second = self._next_unlocked()
        return (first >> 31 | second << 32) & MASK64

    def int63(self) -> int:
        with self._lock:
            return self._next_unlocked()

    def assert_available(self) -> None:
        """The pseudo-random calculation is always available."""

    def err(self) -> Optional[NotAvailableError]:
        return None

    # Private Methods
    # --------------

    def _next_unlocked(self) -> int:
        s = self._s
        sign = -1.0 if s < 0 else 1.0
        # Products wrap around like unsigned 64-bit arithmetic
        a = (abs(s) * P1) & MASK64
        cube = (a * a * a) & MASK64
        # Float in [0, 1) carrying the sign of the seed, scaled to the range of uint64
        fraction = sign * float(cube % P2) / float(P2)
        scaled = _round_half_away_from_zero(fraction * float(MASK64))
        self._s = to_int64(s + 1)
        return (scaled & MASK64) >> 1


def _round_half_away_from_zero(value: float) -> int:
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += 1 if value > 0 else -1
    return truncated
