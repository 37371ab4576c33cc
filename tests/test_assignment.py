"""Tests for the single assignment pass, sequential and parallel."""

import numpy as np
import pytest

from kcolors.clustering import (
    ClusteringConfig,
    ColorPoint,
    ParallelAssignment,
    SequentialAssignment,
    clusters_from_centers,
    create_assignment_engine,
    initialize_clusters,
)


ENGINES = [
    pytest.param(lambda: SequentialAssignment(), id='sequential'),
    pytest.param(lambda: ParallelAssignment(n_workers=1, strategy='merge'), id='merge-1'),
    pytest.param(lambda: ParallelAssignment(n_workers=4, strategy='merge'), id='merge-4'),
    pytest.param(lambda: ParallelAssignment(n_workers=3, strategy='lock'), id='lock-3'),
    pytest.param(lambda: ParallelAssignment(n_workers=8, strategy='lock'), id='lock-8'),
]


def _fixed_clusters(points, k=6):
    return clusters_from_centers([tuple(row) for row in points[:k]])


@pytest.mark.parametrize("make_engine", ENGINES)
def test_exhaustive_partition(make_engine, random_points, sorted_rows):
    partition = make_engine().assign(random_points, initialize_clusters(random_points, 6, random_state=1))

    assert len(partition) == 6
    assert sum(partition.counts) == len(random_points)

    union = np.concatenate([c.members for c in partition])
    np.testing.assert_array_equal(sorted_rows(union), sorted_rows(random_points))


@pytest.mark.parametrize("make_engine", ENGINES)
def test_labels_match_members(make_engine, random_points):
    partition = make_engine().assign(random_points, _fixed_clusters(random_points))

    assert partition.labels.shape == (len(random_points),)
    for idx, cluster in enumerate(partition):
        assert cluster.size == int(np.sum(partition.labels == idx))


@pytest.mark.parametrize("make_engine", ENGINES)
def test_points_go_to_nearest_center(make_engine, random_points):
    partition = make_engine().assign(random_points, _fixed_clusters(random_points))
    centers = np.array([c.as_tuple() for c in partition.centers], dtype=np.int64)

    for point, label in zip(random_points.astype(np.int64), partition.labels):
        d = np.sqrt(((centers - point) ** 2).sum(axis=1))
        assert label == int(np.argmin(d))


def test_sequential_is_deterministic(random_points):
    a = SequentialAssignment().assign(random_points, _fixed_clusters(random_points))
    b = SequentialAssignment().assign(random_points, _fixed_clusters(random_points))

    np.testing.assert_array_equal(a.labels, b.labels)
    for ca, cb in zip(a, b):
        assert ca.members.tobytes() == cb.members.tobytes()


def test_sequential_members_keep_input_order(random_points):
    partition = SequentialAssignment().assign(random_points, _fixed_clusters(random_points))
    for idx, cluster in enumerate(partition):
        np.testing.assert_array_equal(cluster.members, random_points[partition.labels == idx])


@pytest.mark.parametrize("n_workers", [1, 2, 5, 16])
@pytest.mark.parametrize("strategy", ['merge', 'lock'])
def test_parallel_matches_sequential(n_workers, strategy, random_points, sorted_rows):
    sequential = SequentialAssignment().assign(random_points, _fixed_clusters(random_points))
    parallel = ParallelAssignment(n_workers=n_workers, strategy=strategy).assign(
        random_points, _fixed_clusters(random_points)
    )

    np.testing.assert_array_equal(parallel.labels, sequential.labels)
    for cs, cp in zip(sequential, parallel):
        np.testing.assert_array_equal(sorted_rows(cp.members), sorted_rows(cs.members))


def test_merge_preserves_input_order(random_points):
    sequential = SequentialAssignment().assign(random_points, _fixed_clusters(random_points))
    merged = ParallelAssignment(n_workers=4, strategy='merge').assign(
        random_points, _fixed_clusters(random_points)
    )
    for cs, cm in zip(sequential, merged):
        assert cs.members.tobytes() == cm.members.tobytes()


def test_centers_are_not_modified(random_points):
    clusters = _fixed_clusters(random_points)
    before = [c.center for c in clusters]
    partition = ParallelAssignment(n_workers=4).assign(random_points, clusters)
    assert partition.centers == before


@pytest.mark.parametrize("make_engine", ENGINES)
def test_two_points_two_centers(make_engine, black_and_white):
    clusters = clusters_from_centers([(0, 0, 0, 255), (255, 255, 255, 255)])
    partition = make_engine().assign(black_and_white, clusters)

    assert partition[0].member_points() == [ColorPoint(0, 0, 0, 255)]
    assert partition[1].member_points() == [ColorPoint(255, 255, 255, 255)]


@pytest.mark.parametrize("make_engine", ENGINES)
def test_tie_goes_to_lower_index(make_engine):
    clusters = clusters_from_centers([(0, 0, 0, 0), (20, 0, 0, 0)])
    partition = make_engine().assign([(10, 0, 0, 0)], clusters)
    assert partition.counts == [1, 0]


@pytest.mark.parametrize("make_engine", ENGINES)
def test_zero_clusters_is_a_no_op(make_engine, random_points):
    partition = make_engine().assign(random_points, [])
    assert len(partition) == 0
    assert (partition.labels == -1).all()


@pytest.mark.parametrize("make_engine", ENGINES)
def test_no_points(make_engine):
    clusters = clusters_from_centers([(1, 1, 1, 1), (2, 2, 2, 2)])
    partition = make_engine().assign([], clusters)
    assert partition.counts == [0, 0]
    assert partition.labels.shape == (0,)


def test_more_workers_than_points(black_and_white):
    clusters = clusters_from_centers([(0, 0, 0, 0)])
    partition = ParallelAssignment(n_workers=32).assign(black_and_white, clusters)
    assert partition.counts == [2]


def test_rejects_populated_clusters(random_points):
    clusters = _fixed_clusters(random_points)
    clusters[2].extend(random_points[:1])
    with pytest.raises(ValueError):
        SequentialAssignment().assign(random_points, clusters)


@pytest.mark.parametrize("kwargs", [{'n_workers': 0}, {'strategy': 'atomic'}])
def test_parallel_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        ParallelAssignment(**kwargs)


def test_engine_factory():
    assert isinstance(create_assignment_engine(ClusteringConfig()), SequentialAssignment)

    engine = create_assignment_engine(ClusteringConfig(mode='parallel', n_workers=3, strategy='lock'))
    assert isinstance(engine, ParallelAssignment)
    assert engine.n_workers == 3
    assert engine.strategy == 'lock'
