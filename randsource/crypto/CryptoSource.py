import threading
from typing import Optional

from ..errors import NotAvailableError
from ..protocol_constants import UINT64_SIZE
from ..source import ISource
from .EntropyReader import EntropyReader
from .abstract.IEntropyReader import IEntropyReader

SUBJECT = "crypto source"


class CryptoSource(ISource):
    """Cryptographically secure random number generator source.

    Every draw reads fresh entropy from the operating system, so the source cannot
    be seeded. To check if it is available on the platform, assert_available()
    should be called before use; err() then returns None if it is available.
    The source holds the last occurring error and serializes all reads on one lock,
    so a single instance can be shared by all callers that should draw from one
    entropy channel.
    """

    def __init__(self, reader: Optional[IEntropyReader] = None) -> None:
        """Initialize the source.

        Args:
            reader (Optional[IEntropyReader]): Entropy reader, defaults to the OS secure random source
        """
        self._lock = threading.Lock()
        self._reader = reader if reader is not None else EntropyReader()
        self._err: Optional[NotAvailableError] = None

    def seed(self, s: int) -> None:
        """The source cannot be seeded, the call is ignored."""

    def uint64(self) -> int:
        """Get a random 64-bit value read big-endian from the entropy source.

        Returns:
            int: A value in [0, 2^64)

        Raises:
            NotAvailableError: If the entropy read fails; the error is also kept for err()
        """
        with self._lock:
            data = self._read_unlocked(UINT64_SIZE)
            error = self._err
        if data is None:
            raise error from error.cause
        return int.from_bytes(data, "big")

    def assert_available(self) -> None:
        with self._lock:
            self._read_unlocked(1)

    def err(self) -> Optional[NotAvailableError]:
        with self._lock:
            return self._err

    # Private Methods
    # --------------

    def _read_unlocked(self, size: int) -> Optional[bytes]:
        """Read size bytes and record the outcome as the last error."""
        try:
            data = self._reader.read(size)
        except (OSError, NotImplementedError) as e:
            return self._fail_unlocked(e)
        if len(data) != size:
            return self._fail_unlocked(EOFError(f"short read of {len(data)} out of {size} bytes"))
        self._err = None
        return data

    def _fail_unlocked(self, cause: BaseException) -> None:
        self._err = NotAvailableError(SUBJECT, cause)
        return None
