"""Entropy test implementation package.

This package provides deterministic and failing entropy sources for tests.
"""

from .entropy import FailingEntropy, ScriptedEntropy, ShortEntropy

__all__ = [
    "FailingEntropy",
    "ScriptedEntropy",
    "ShortEntropy",
]
