import threading
from typing import List, Optional, Sequence

from ..errors import NotAvailableError
from ..protocol_constants import MASK32, MASK63, MT_ARRAY_SEED, MT_DEFAULT_SEED
from ..source import ISource
from .constants import (
    MT32_ARRAY_MULTIPLIER_1,
    MT32_ARRAY_MULTIPLIER_2,
    MT32_INIT_MULTIPLIER,
    MT32_INIT_SHIFT,
    MT32_LOWER_MASK,
    MT32_M,
    MT32_MATRIX_A,
    MT32_N,
    MT32_UPPER_MASK,
)


class MT32Source(ISource):
    """Pseudo-random number generator source based on the reference 32-bit Mersenne Twister (mt19937ar.c).

    The source holds the state vector and its cursor and is safe for concurrent use.
    It is seeded with MT_DEFAULT_SEED on construction. The output is easily
    predictable and unsuitable for security-sensitive services.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._mt: List[int] = [0] * MT32_N
        self._mti = MT32_N
        self._seed_unlocked(MT_DEFAULT_SEED)

    def seed(self, s: int) -> None:
        with self._lock:
            self._seed_unlocked(s)

    def seed_by_array(self, key: Sequence[int]) -> None:
        """Initialize the state vector with an array of 32-bit words (init_by_array).

        Args:
            key (Sequence[int]): Non-empty seed key, each word truncated to 32 bits

        Raises:
            ValueError: If key is empty
        """
        if len(key) == 0:
            raise ValueError("Seed key must not be empty")
        with self._lock:
            self._seed_by_array_unlocked(key)

    def uint32(self) -> int:
        """Get the next tempered 32-bit word.

        Returns:
            int: A value in [0, 2^32)
        """
        with self._lock:
            return self._next_unlocked()

    def uint64(self) -> int:
        # Both halves are drawn under one lock so concurrent callers never split a pair
        with self._lock:
            low = self._next_unlocked()
            high = self._next_unlocked()
        return low | high << 32

    def int63(self) -> int:
        return self.uint64() & MASK63

    def assert_available(self) -> None:
        """The pseudo-random calculation is always available."""

    def err(self) -> Optional[NotAvailableError]:
        return None

    # Private Methods
    # These expect self._lock to be held by the caller.
    # --------------

    def _seed_unlocked(self, s: int) -> None:
        mt = self._mt
        mt[0] = s & MASK32
        for i in range(1, MT32_N):
            prev = mt[i - 1]
            mt[i] = (MT32_INIT_MULTIPLIER * (prev ^ (prev >> MT32_INIT_SHIFT)) + i) & MASK32
        self._mti = MT32_N

    def _seed_by_array_unlocked(self, key: Sequence[int]) -> None:
        self._seed_unlocked(MT_ARRAY_SEED)
        mt = self._mt
        key_length = len(key)
        i, j = 1, 0
        for _ in range(max(MT32_N, key_length)):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> MT32_INIT_SHIFT)) * MT32_ARRAY_MULTIPLIER_1)) + (key[j] & MASK32) + j) & MASK32
            i += 1
            j += 1
            if i >= MT32_N:
                mt[0] = mt[MT32_N - 1]
                i = 1
            if j >= key_length:
                j = 0
        for _ in range(MT32_N - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> MT32_INIT_SHIFT)) * MT32_ARRAY_MULTIPLIER_2)) - i) & MASK32
            i += 1
            if i >= MT32_N:
                mt[0] = mt[MT32_N - 1]
                i = 1
        # MSB is 1, assuring a non-zero initial array
        mt[0] = 0x80000000
        self._mti = MT32_N

    def _twist_unlocked(self) -> None:
        """Regenerate all N words of the state vector and reset the cursor."""
        mt = self._mt
        for kk in range(MT32_N - MT32_M):
            y = (mt[kk] & MT32_UPPER_MASK) | (mt[kk + 1] & MT32_LOWER_MASK)
            mt[kk] = mt[kk + MT32_M] ^ (y >> 1) ^ (MT32_MATRIX_A if y & 1 else 0)
        for kk in range(MT32_N - MT32_M, MT32_N - 1):
            y = (mt[kk] & MT32_UPPER_MASK) | (mt[kk + 1] & MT32_LOWER_MASK)
            mt[kk] = mt[kk + (MT32_M - MT32_N)] ^ (y >> 1) ^ (MT32_MATRIX_A if y & 1 else 0)
        y = (mt[MT32_N - 1] & MT32_UPPER_MASK) | (mt[0] & MT32_LOWER_MASK)
        mt[MT32_N - 1] = mt[MT32_M - 1] ^ (y >> 1) ^ (MT32_MATRIX_A if y & 1 else 0)
        self._mti = 0

    def _next_unlocked(self) -> int:
        if self._mti >= MT32_N:
            self._twist_unlocked()
        y = self._mt[self._mti]
        self._mti += 1
        # Tempering
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y
