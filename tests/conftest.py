from random import Random

import pytest


@pytest.fixture
def rng() -> Random:
    """
    Seeded random source making sampling and shuffling repeatable in tests.
    """
    return Random(2024)  # nosec B311
