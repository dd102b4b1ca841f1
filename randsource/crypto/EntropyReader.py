import secrets
from .abstract.IEntropyReader import IEntropyReader


class EntropyReader(IEntropyReader):
    """Implementation of entropy reading from the operating system's secure random source."""

    def read(self, size: int) -> bytes:
        return secrets.token_bytes(size)
