# errors.py - exception types raised by the island generator
from __future__ import annotations


class IslandGenError(Exception):
    """Base class for all generator errors."""


class ConfigurationError(IslandGenError, ValueError):
    """Invalid noise range, missing Base part, degenerate cell size, etc."""


class EmptyVariantListError(IslandGenError, ValueError):
    """Raised when a generator is given zero tile variants."""
