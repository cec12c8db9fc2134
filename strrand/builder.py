"""Random string building."""

from __future__ import annotations

import operator

from strrand.exceptions import InvalidCharsetError
from strrand.sampler import IndexSampler


def build(length: int, charset: str, sampler: IndexSampler | None = None) -> str:
    """Build a random string from a charset.

    Args:
        length: Number of characters to generate. Zero or negative yields "".
        charset: Characters to sample from. Duplicates weight the draw.
        sampler: Index sampler to use. Defaults to one over system entropy.

    Returns:
        A string of exactly ``length`` code points drawn from ``charset``.

    Raises:
        InvalidCharsetError: If ``charset`` is empty and ``length`` is positive.
        EntropyUnavailableError: If the secure random source fails.
    """
    length = operator.index(length)
    if length <= 0:
        return ""
    if not charset:
        raise InvalidCharsetError("charset must not be empty")

    if sampler is None:
        sampler = IndexSampler()

    size = len(charset)
    return "".join(charset[sampler.index(size)] for _ in range(length))
