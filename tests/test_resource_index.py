"""Tests for building the resource index."""

import numpy as np
import pytest

from conftest import make_snapshot
from tile_mapper.coordinate import Coordinate
from tile_mapper.resource_index import Observation, ResourceIndex, build_index
from tile_mapper.tile import Category, Extent, Scalar, Tile


def test_unexplored_world_returns_none():
    """Test the unexplored sentinel yields no index at all."""
    assert build_index(None) is None


def test_snapshot_without_discovered_tiles_returns_none():
    """Test a snapshot whose cells are all undiscovered yields no index."""
    assert build_index(make_snapshot(4, {})) is None
    assert build_index([]) is None


def test_discovered_but_empty_world_returns_empty_index():
    """Test observed empty tiles give an empty index, not None."""
    index = build_index(make_snapshot(3, {}, fill=Tile.empty()))
    assert index is not None
    assert len(index) == 0
    assert index.discovered == 9
    assert index.shape == (3, 3)


def test_explored_world_index(explored_world):
    """Test the path-explored world is grouped by category in scan order."""
    index = build_index(explored_world)

    expected = {
        Category.BIN: (Observation(Coordinate(1, 1), Extent(0, 4)),),
        Category.COIN: (Observation(Coordinate(2, 1), Scalar(3)),),
        Category.ROCK: (
            Observation(Coordinate(3, 1), Scalar(17)),
            Observation(Coordinate(2, 2), Scalar(2)),
        ),
    }
    assert dict(index) == expected
    assert index.categories() == [Category.BIN, Category.COIN, Category.ROCK]
    assert index.discovered == 25


def test_coordinates_are_column_first():
    """Test a tile at snapshot[row][column] is recorded as (column, row)."""
    snapshot = [[None, None, None], [None, None, Tile(Category.TREE, Scalar(1))]]
    index = build_index(snapshot)
    assert index[Category.TREE][0].coordinate == Coordinate(2, 1)
    assert index.shape == (2, 3)


def test_undiscovered_and_empty_tiles_are_skipped():
    """Test only discovered resource tiles are recorded."""
    snapshot = make_snapshot(
        3,
        {
            (0, 0): Tile.empty(),
            (1, 0): Tile(Category.FISH, Scalar(2)),
            (2, 2): Tile(Category.FISH, Scalar(5)),
        },
    )
    index = build_index(snapshot)
    assert Category.EMPTY not in index
    assert [entry.coordinate for entry in index[Category.FISH]] == [
        Coordinate(1, 0),
        Coordinate(2, 2),
    ]
    assert index.discovered == 3


def test_scan_order_is_row_major():
    """Test observations follow rows first, then columns."""
    tiles = {
        (4, 0): Tile(Category.ROCK, Scalar(1)),
        (0, 1): Tile(Category.ROCK, Scalar(2)),
        (2, 0): Tile(Category.ROCK, Scalar(3)),
        (1, 3): Tile(Category.ROCK, Scalar(4)),
    }
    index = build_index(make_snapshot(5, tiles))
    assert [entry.coordinate.as_tuple() for entry in index[Category.ROCK]] == [
        (2, 0),
        (4, 0),
        (0, 1),
        (1, 3),
    ]


def test_jagged_rows_are_scanned_as_given():
    """Test rows of different lengths are each scanned to their own end."""
    snapshot = [
        [Tile(Category.COIN, Scalar(1))],
        [None, None, None, Tile(Category.COIN, Scalar(2))],
        [],
    ]
    index = build_index(snapshot)
    assert [entry.coordinate for entry in index[Category.COIN]] == [
        Coordinate(0, 0),
        Coordinate(3, 1),
    ]
    assert index.shape == (3, 4)


def test_numpy_snapshot():
    """Test a 2D numpy object array is accepted as a snapshot."""
    snapshot = np.full((3, 4), None, dtype=object)
    snapshot[1, 2] = Tile(Category.CRATE, Extent(0, 9))
    snapshot[2, 0] = Tile.empty()
    index = build_index(snapshot)
    assert index[Category.CRATE] == (Observation(Coordinate(2, 1), Extent(0, 9)),)
    assert index.shape == (3, 4)
    assert index.discovered == 2


def test_snapshot_is_not_mutated(explored_world):
    """Test building an index leaves the snapshot untouched."""
    before = [list(row) for row in explored_world]
    build_index(explored_world)
    assert explored_world == before


def test_rebuild_is_idempotent(explored_world):
    """Test rebuilding from an unchanged snapshot gives an equal index."""
    assert build_index(explored_world) == build_index(explored_world)


def test_invalid_cell_raises():
    """Test cells that are neither Tile nor None are rejected."""
    with pytest.raises(TypeError, match=r"Snapshot cell \(1, 0\)"):
        build_index([[None, "rock"]])


class TestResourceIndex:
    """Tests for the ResourceIndex mapping."""

    def test_mapping_interface(self, explored_world):
        """Test membership, lookup, length and iteration."""
        index = build_index(explored_world)
        assert Category.ROCK in index
        assert Category.WATER not in index
        assert len(index) == 3
        assert set(index) == {Category.BIN, Category.COIN, Category.ROCK}
        with pytest.raises(KeyError):
            index[Category.WATER]

    def test_lookup_returns_a_copy(self, explored_world):
        """Test the index cannot be modified through lookups."""
        index = build_index(explored_world)
        entries = index[Category.ROCK]
        with pytest.raises(TypeError):
            entries[0] = Observation(Coordinate(0, 0), Scalar(99))

        listed = list(index.observations(Category.ROCK))
        listed.append(Observation(Coordinate(4, 4), Scalar(1)))
        listed.clear()

        assert index[Category.ROCK] == (
            Observation(Coordinate(3, 1), Scalar(17)),
            Observation(Coordinate(2, 2), Scalar(2)),
        )
        with pytest.raises(TypeError):
            index[Category.WATER] = ()

    def test_observations_of_unseen_category(self, explored_world):
        """Test an unseen category has no observations."""
        assert build_index(explored_world).observations(Category.WATER) == ()

    def test_coordinates_array(self, explored_world):
        """Test coordinates come back as an (n, 2) integer array."""
        index = build_index(explored_world)
        np.testing.assert_array_equal(
            index.coordinates(Category.ROCK), np.array([[3, 1], [2, 2]])
        )
        assert index.coordinates(Category.WATER).shape == (0, 2)

    def test_total_load(self, explored_world):
        """Test loads are summed per category."""
        index = build_index(explored_world)
        assert index.total_load(Category.ROCK) == 19
        assert index.total_load(Category.BIN) == 4
        assert index.total_load(Category.WATER) == 0

    def test_empty_lists_are_dropped(self):
        """Test categories without observations are not kept."""
        index = ResourceIndex({Category.ROCK: [], Category.TREE: []})
        assert len(index) == 0

    def test_repr(self, explored_world):
        """Test the repr lists observation counts per category."""
        assert repr(build_index(explored_world)) == (
            "ResourceIndex({Bin: 1, Coin: 1, Rock: 2})"
        )
