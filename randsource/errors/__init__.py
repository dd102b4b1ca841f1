"""Error types raised by random number generator sources."""

from .NotAvailableError import NotAvailableError

__all__ = ["NotAvailableError"]
