"""Deterministic pseudo-random number generator source."""

from .DeterministicSource import DeterministicSource

__all__ = ["DeterministicSource"]
