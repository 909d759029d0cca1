import pytest

from hex_playground.geometry import PlacementPoint
from hex_playground.point_index import LinearPointIndex, SpatialHashPointIndex


@pytest.mark.parametrize("index_cls", [LinearPointIndex, SpatialHashPointIndex])
def test_index_membership_uses_epsilon(index_cls):
    index = index_cls()
    index.add(PlacementPoint(0.5, -0.5, 0.0))

    assert len(index) == 1
    assert index.contains(PlacementPoint(0.5004, -0.4996, 0.0))
    assert not index.contains(PlacementPoint(0.502, -0.5, 0.0))
    assert not index.contains(None)


def test_spatial_hash_matches_across_bucket_boundary():
    index = SpatialHashPointIndex(epsilon=0.001)
    # 0.0029999 and 0.0030001 land in different buckets.
    index.add(PlacementPoint(0.0029999, 0.0, 0.0))
    assert index.contains(PlacementPoint(0.0030001, 0.0, 0.0))
    assert index.contains(PlacementPoint(0.0030001, -0.0000001, 0.0))


def test_spatial_hash_agrees_with_linear_scan():
    stored = [PlacementPoint(i * 0.0007, (i % 5) * 0.0011, 0.0) for i in range(40)]
    probes = [PlacementPoint(i * 0.00053, (i % 7) * 0.0009, 0.0) for i in range(80)]

    linear = LinearPointIndex()
    hashed = SpatialHashPointIndex()
    for point in stored:
        linear.add(point)
        hashed.add(point)

    assert [linear.contains(p) for p in probes] == [hashed.contains(p) for p in probes]


def test_spatial_hash_rejects_non_positive_epsilon():
    with pytest.raises(ValueError):
        SpatialHashPointIndex(epsilon=0)
