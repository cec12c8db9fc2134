"""Strrand interfaces package.

This package provides protocol definitions for pluggable entropy sources.
"""

from .entropy import IEntropySource

__all__ = [
    "IEntropySource",
]
