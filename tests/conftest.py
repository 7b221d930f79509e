"""Shared test fixtures for Catsync tests."""

import pytest


def _random_dna(seed, length):
    import random

    rng = random.Random(seed)
    return "".join(rng.choice("ACGT") for _ in range(length)).encode()


@pytest.fixture
def simple_seq():
    """Short periodic sequence."""
    return b"ACGTACGTACGTACGT"


@pytest.fixture
def random_dna():
    """500bp of seeded random DNA."""
    return _random_dna(42, 500)


@pytest.fixture
def long_dna():
    """5kb of seeded random DNA."""
    return _random_dna(7, 5000)


@pytest.fixture
def repetitive_seq():
    """Repetitive sequence (many tied k-mers)."""
    return b"ATATAT" * 20


@pytest.fixture
def mixed_case_seq():
    """Sequence with lowercase bases and an N."""
    return b"ACGTacgtNNACGTTTGCAacgtaCCGTA"
