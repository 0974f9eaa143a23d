"""Exception hierarchy for the spell checker.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class SpellCheckerError(Exception):
    """Base exception for all spell checker errors."""
    pass


class FormatError(SpellCheckerError):
    """Raised when a filter file is not a valid CCBF stream."""
    pass


class ConfigurationError(SpellCheckerError, ValueError):
    """Raised when filter parameters are out of range."""
    pass


class DegenerateInputError(ConfigurationError):
    """Raised when sizing math is asked to size for zero items."""
    pass


class HashError(SpellCheckerError):
    """Raised when hashing an item fails under the strict policy."""
    pass


class DictionaryError(SpellCheckerError):
    """Raised when a dictionary file cannot be decoded."""
    pass
