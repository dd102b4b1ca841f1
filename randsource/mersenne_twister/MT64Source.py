import threading
from typing import List, Optional, Sequence

from ..errors import NotAvailableError
from ..protocol_constants import MASK64, MT_ARRAY_SEED, MT_DEFAULT_SEED
from ..source import ISource
from .constants import (
    MT64_ARRAY_MULTIPLIER_1,
    MT64_ARRAY_MULTIPLIER_2,
    MT64_INIT_MULTIPLIER,
    MT64_INIT_SHIFT,
    MT64_LOWER_MASK,
    MT64_M,
    MT64_MATRIX_A,
    MT64_N,
    MT64_UPPER_MASK,
)


class MT64Source(ISource):
    """Pseudo-random number generator source based on the reference 64-bit Mersenne Twister (mt19937-64.c).

    Safe for concurrent use; seeded with MT_DEFAULT_SEED on construction.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._mt: List[int] = [0] * MT64_N
        self._mti = MT64_N
        self._seed_unlocked(MT_DEFAULT_SEED)

    def seed(self, s: int) -> None:
        with self._lock:
            self._seed_unlocked(s)

    def seed_by_array(self, key: Sequence[int]) -> None:
        """Initialize the state vector with an array of 64-bit words (init_by_array64).

        Args:
            key (Sequence[int]): Non-empty seed key, each word truncated to 64 bits

        Raises:
            ValueError: If key is empty
        """
        if len(key) == 0:
            raise ValueError("Seed key must not be empty")
        with self._lock:
            self._seed_by_array_unlocked(key)

    def uint64(self) -> int:
        with self._lock:
            x = self._next_unlocked()
        # Tempering
        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x ^= x >> 43
        return x

    def int63(self) -> int:
        return self.uint64() >> 1

    def assert_available(self) -> None:
        """The pseudo-random calculation is always available."""

    def err(self) -> Optional[NotAvailableError]:
        return None

    # Private Methods
    # These expect self._lock to be held by the caller.
    # --------------

    def _seed_unlocked(self, s: int) -> None:
        mt = self._mt
        mt[0] = s & MASK64
        for i in range(1, MT64_N):
            prev = mt[i - 1]
            mt[i] = (MT64_INIT_MULTIPLIER * (prev ^ (prev >> MT64_INIT_SHIFT)) + i) & MASK64
        self._mti = MT64_N

    def _seed_by_array_unlocked(self, key: Sequence[int]) -> None:
        self._seed_unlocked(MT_ARRAY_SEED)
        mt = self._mt
        key_length = len(key)
        i, j = 1, 0
        for _ in range(max(MT64_N, key_length)):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> MT64_INIT_SHIFT)) * MT64_ARRAY_MULTIPLIER_1)) + (key[j] & MASK64) + j) & MASK64
            i += 1
            j += 1
            if i >= MT64_N:
                mt[0] = mt[MT64_N - 1]
                i = 1
            if j >= key_length:
                j = 0
        for _ in range(MT64_N - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> MT64_INIT_SHIFT)) * MT64_ARRAY_MULTIPLIER_2)) - i) & MASK64
            i += 1
            if i >= MT64_N:
                mt[0] = mt[MT64_N - 1]
                i = 1
        mt[0] = 1 << 63
        self._mti = MT64_N

    def _twist_unlocked(self) -> None:
        """Regenerate all N words of the state vector and reset the cursor."""
        mt = self._mt
        for i in range(MT64_N - MT64_M):
            x = (mt[i] & MT64_UPPER_MASK) | (mt[i + 1] & MT64_LOWER_MASK)
            mt[i] = mt[i + MT64_M] ^ (x >> 1) ^ (MT64_MATRIX_A if x & 1 else 0)
        for i in range(MT64_N - MT64_M, MT64_N - 1):
            x = (mt[i] & MT64_UPPER_MASK) | (mt[i + 1] & MT64_LOWER_MASK)
            mt[i] = mt[i + (MT64_M - MT64_N)] ^ (x >> 1) ^ (MT64_MATRIX_A if x & 1 else 0)
        x = (mt[MT64_N - 1] & MT64_UPPER_MASK) | (mt[0] & MT64_LOWER_MASK)
        mt[MT64_N - 1] = mt[MT64_M - 1] ^ (x >> 1) ^ (MT64_MATRIX_A if x & 1 else 0)
        self._mti = 0

    def _next_unlocked(self) -> int:
        if self._mti >= MT64_N:
            self._twist_unlocked()
        x = self._mt[self._mti]
        self._mti += 1
        return x
