import random

import pytest

from workshop.core.workshop import WorkShop


@pytest.fixture
def ws() -> WorkShop:
    """Workshop over the mock dataset with a seeded random source."""
    return WorkShop(rng=random.Random(1234))
