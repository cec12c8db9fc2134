"""Tests for random index sampling."""

from __future__ import annotations

import pytest

from implementation import FailingEntropy, ScriptedEntropy, ShortEntropy
from strrand.exceptions import EntropyUnavailableError, InvalidCharsetError
from strrand.sampler import DRAW_RANGE, IndexSampler


def test_draw_is_big_endian() -> None:
    """Test that 4 bytes are read as an unsigned big-endian integer."""
    sampler = IndexSampler(ScriptedEntropy([256]))

    assert sampler.index(1000) == 256


def test_index_reduces_modulo() -> None:
    """Test that accepted draws are reduced into range."""
    sampler = IndexSampler(ScriptedEntropy([0, 7, 10, 63]))

    assert [sampler.index(10) for _ in range(4)] == [0, 7, 0, 3]


def test_rejection_discards_biased_draws() -> None:
    """Test that draws at or above the largest multiple of n are redrawn."""
    # 2**32 % 3 == 1, so only 0xFFFFFFFF is rejected
    entropy = ScriptedEntropy([0xFFFFFFFF, 5])
    sampler = IndexSampler(entropy)

    assert sampler.index(3) == 2
    assert entropy.reads == 2


def test_rejection_limit_for_base62() -> None:
    """Test the rejection boundary for a 62 character charset."""
    # 2**32 % 62 == 4
    entropy = ScriptedEntropy([0xFFFFFFFC, 0xFFFFFFFB])
    sampler = IndexSampler(entropy)

    assert sampler.index(62) == 0xFFFFFFFB % 62
    assert entropy.reads == 2


def test_modulo_mode_keeps_every_draw() -> None:
    """Test that the modulo mode never redraws."""
    entropy = ScriptedEntropy([0xFFFFFFFF])
    sampler = IndexSampler(entropy, unbiased=False)

    assert sampler.index(3) == 0
    assert entropy.reads == 1


def test_power_of_two_never_rejects() -> None:
    """Test that sizes dividing 2**32 accept every draw."""
    entropy = ScriptedEntropy([0xFFFFFFFF])

    assert IndexSampler(entropy).index(16) == 15
    assert entropy.reads == 1


@pytest.mark.parametrize("n", [0, -1, DRAW_RANGE + 1])
def test_invalid_size(n: int) -> None:
    """Test that sizes outside [1, 2**32] are rejected before drawing."""
    entropy = ScriptedEntropy([])

    with pytest.raises(InvalidCharsetError):
        IndexSampler(entropy).index(n)

    assert entropy.reads == 0


def test_entropy_failure_propagates() -> None:
    """Test that entropy failures are not swallowed."""
    with pytest.raises(EntropyUnavailableError):
        IndexSampler(FailingEntropy()).index(10)


def test_short_read_is_entropy_failure() -> None:
    """Test that a short read is treated as unavailable entropy."""
    with pytest.raises(EntropyUnavailableError) as exc_info:
        IndexSampler(ShortEntropy()).index(10)

    assert "short read" in str(exc_info.value)


def test_system_entropy_range() -> None:
    """Test sampling with the default source stays in range."""
    sampler = IndexSampler()

    for _ in range(1000):
        assert 0 <= sampler.index(7) < 7
