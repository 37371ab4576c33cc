"""Tests for seed center sampling."""

import numpy as np
import pytest

from kcolors.clustering import (
    ColorPoint,
    EmptyInputError,
    clusters_from_centers,
    initialize_clusters,
)


def test_produces_k_clusters_with_empty_members(random_points):
    clusters = initialize_clusters(random_points, 7, random_state=0)

    assert len(clusters) == 7
    assert all(c.size == 0 for c in clusters)

    rows = {tuple(row) for row in random_points.tolist()}
    assert all(c.center.as_tuple() in rows for c in clusters)


def test_same_seed_same_centers(random_points):
    a = initialize_clusters(random_points, 5, random_state=3)
    b = initialize_clusters(random_points, 5, random_state=3)
    assert [c.center for c in a] == [c.center for c in b]


def test_accepts_random_state_instance(random_points):
    a = initialize_clusters(random_points, 4, random_state=np.random.RandomState(9))
    b = initialize_clusters(random_points, 4, random_state=9)
    assert [c.center for c in a] == [c.center for c in b]


def test_draws_with_replacement():
    # One distinct point, more clusters than points: duplicates are kept
    clusters = initialize_clusters([(9, 8, 7, 6)], 3, random_state=0)
    assert [c.center for c in clusters] == [ColorPoint(9, 8, 7, 6)] * 3


def test_zero_clusters(random_points):
    assert initialize_clusters(random_points, 0) == []


@pytest.mark.parametrize("k", [0, 1, 5])
def test_empty_input_raises(k):
    with pytest.raises(EmptyInputError):
        initialize_clusters(np.empty((0, 4), dtype=np.uint8), k)


def test_empty_input_is_a_value_error():
    with pytest.raises(ValueError):
        initialize_clusters([], 2)


def test_negative_k(random_points):
    with pytest.raises(ValueError):
        initialize_clusters(random_points, -1)


def test_clusters_from_centers():
    clusters = clusters_from_centers([ColorPoint(1, 2, 3, 4), (5, 6, 7, 8)])
    assert [c.center for c in clusters] == [ColorPoint(1, 2, 3, 4), ColorPoint(5, 6, 7, 8)]
    assert all(c.size == 0 for c in clusters)
