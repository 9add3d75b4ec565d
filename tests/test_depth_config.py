import pytest

from semaphore_kit.depth_config import (
    get_depth_index,
    get_supported_depth_count,
    get_supported_depths,
)


def test_supported_depths():
    assert get_supported_depths() == (16, 20, 30)


def test_count_matches_depths():
    assert get_supported_depth_count() == len(get_supported_depths())


def test_depths_are_ascending_and_unique():
    depths = get_supported_depths()
    assert list(depths) == sorted(set(depths))


def test_index_round_trip():
    depths = get_supported_depths()
    for position, depth in enumerate(depths):
        assert get_depth_index(depth) == position


@pytest.mark.parametrize("depth", [0, 1, 15, 17, 21, 29, 31, 32])
def test_unsupported_depth_has_no_index(depth):
    assert get_depth_index(depth) is None