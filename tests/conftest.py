"""Shared fixtures for the tile_mapper tests."""

import pytest

from tile_mapper import Category, Extent, Scalar, Tile


def make_snapshot(size, tiles, fill=None):
    """Build a size x size snapshot.

    Args:
        size: number of rows and columns
        tiles: mapping of (column, row) to Tile
        fill: value for every other cell, None for undiscovered
    """
    snapshot = [[fill for _ in range(size)] for _ in range(size)]
    for (column, row), tile in tiles.items():
        snapshot[row][column] = tile
    return snapshot


class HostWorld:
    """Minimal stand-in for the host world."""

    def __init__(self, known):
        self.known = known
        self.calls = 0

    def robot_map(self):
        self.calls += 1
        return self.known


class HostRobot:
    """Minimal stand-in for the host robot."""

    def __init__(self, column, row):
        self._position = (column, row)

    @property
    def position(self):
        return self._position


@pytest.fixture
def explored_world():
    """The 5x5 world explored along a path from the top-left corner."""
    tiles = {
        (1, 1): Tile(Category.BIN, Extent(0, 4)),
        (2, 1): Tile(Category.COIN, Scalar(3)),
        (3, 1): Tile(Category.ROCK, Scalar(17)),
        (2, 2): Tile(Category.ROCK, Scalar(2)),
    }
    return make_snapshot(5, tiles, fill=Tile.empty())
