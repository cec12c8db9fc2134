"""Exception classes for strrand.

This module defines custom exception types used throughout the strrand library.
"""


class StrRandError(Exception):
    """Base exception class for all strrand errors."""

    pass


class EntropyUnavailableError(StrRandError):
    """Exception raised when the secure random source cannot be read."""

    pass


class InvalidCharsetError(StrRandError, ValueError):
    """Exception raised when a charset cannot be sampled from."""

    pass
