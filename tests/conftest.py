import matplotlib

matplotlib.use('Agg')

import numpy as np
import pytest


@pytest.fixture
def random_points():
    """500 random RGBA points, fixed seed."""
    rng = np.random.RandomState(0)
    return rng.randint(0, 256, size=(500, 4)).astype(np.uint8)


@pytest.fixture
def black_and_white():
    return np.array([[0, 0, 0, 255], [255, 255, 255, 255]], dtype=np.uint8)


def _sorted_rows(arr):
    arr = np.asarray(arr).reshape(-1, 4)
    if len(arr) == 0:
        return arr
    return arr[np.lexsort(arr.T[::-1])]


@pytest.fixture
def sorted_rows():
    """Rows of an (N, 4) array in lexicographic order, for multiset comparison."""
    return _sorted_rows
