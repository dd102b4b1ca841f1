from typing import Optional


class NotAvailableError(Exception):
    """Raised when a random number generator source is not available on the platform.

    Args:
        subject (str): What is not available, e.g. ``"crypto source"``
        cause (Optional[BaseException]): The underlying platform error, if any
    """

    def __init__(self, subject: str, cause: Optional[BaseException] = None) -> None:
        self.subject = subject
        self.cause = cause
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.cause is None:
            return f"{self.subject} is not available"
        return f"{self.subject} is not available: {self.cause}"
