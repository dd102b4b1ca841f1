import random

from ..source import ISource

RECIP_BPF = 2.0 ** -53  # 1 / 2**53, scales a 53-bit integer into [0, 1)


class Rand(random.Random):
    """random.Random drawing all of its randomness from an ISource.

    random() and getrandbits() are served by the source, so every distribution
    method of random.Random (randrange, uniform, gauss, shuffle, ...) works on top of
    any source. The source is responsible for being safe for concurrent use.
    """

    def __init__(self, source: ISource) -> None:
        if source is None:
            raise ValueError("Source must not be None")
        self._source = source
        super().__init__()

    @property
    def source(self) -> ISource:
        return self._source

    def seed(self, a=None, version=2) -> None:
        """Seed the underlying source; None keeps its current state."""
        self.gauss_next = None
        if a is None:
            return
        if not isinstance(a, int):
            raise TypeError(f"Seed must be an integer, not {type(a).__name__}")
        self._source.seed(a)

    def random(self) -> float:
        return (self._source.int63() >> 10) * RECIP_BPF

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        words, remainder = divmod(k, 64)
        x = 0
        for _ in range(words):
            x = x << 64 | self._source.uint64()
        if remainder:
            x = x << remainder | self._source.uint64() >> (64 - remainder)
        return x

    def uint64(self) -> int:
        return self._source.uint64()

    def int63(self) -> int:
        return self._source.int63()

    def _notimplemented(self, *args, **kwds):
        raise NotImplementedError("Source state is not exposed by Rand")

    getstate = setstate = _notimplemented
