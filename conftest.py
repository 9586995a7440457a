import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so random opening sequences are reproducible."""
    return np.random.default_rng(20240917)
