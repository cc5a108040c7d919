"""Grouping of discovered tiles by resource category.

``build_index`` scans a snapshot once, row by row, and records every discovered
non-empty tile under its category. The order of observations within a category
is the row-major scan order of the snapshot; the queries rely on it to break
exact ties in favour of the first tile scanned.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import NamedTuple

import numpy as np

from tile_mapper.coordinate import Coordinate
from tile_mapper.mapper_logging import create_module_logger
from tile_mapper.protocols import Snapshot
from tile_mapper.tile import Category, Quantity, Tile

_tm_logger = create_module_logger()


class Observation(NamedTuple):
    """A discovered tile's location and the amount of resource found there."""

    coordinate: Coordinate
    quantity: Quantity


class ResourceIndex(Mapping):
    """Read-only mapping from ``Category`` to the observations of that category.

    Attributes:
        shape (tuple[int, int]): number of rows and the widest row of the scanned snapshot
        discovered (int): number of discovered tiles, empty ones included

    Notes:
        Indexing returns a tuple, so the index cannot be modified through it.
        The index is a value built from one snapshot and is not kept in sync
        with the world; rebuild it whenever the snapshot changes.
    """

    __slots__ = ("_observations", "discovered", "shape")

    def __init__(
        self,
        observations: Mapping[Category, list[Observation]] | None = None,
        shape: tuple[int, int] = (0, 0),
        discovered: int = 0,
    ) -> None:
        """Initialise the index.

        Args:
            observations: observations per category, in scan order
            shape: number of rows and the widest row of the scanned snapshot
            discovered: number of discovered tiles in the snapshot
        """
        self._observations: dict[Category, list[Observation]] = {
            category: list(entries)
            for category, entries in (observations or {}).items()
            if entries
        }
        self.shape = shape
        self.discovered = discovered

    def __getitem__(self, category: Category) -> tuple[Observation, ...]:  # noqa: D105
        return tuple(self._observations[category])

    def __iter__(self) -> Iterator[Category]:  # noqa: D105
        return iter(self._observations)

    def __len__(self) -> int:  # noqa: D105
        return len(self._observations)

    def __contains__(self, category) -> bool:  # noqa: D105
        return category in self._observations

    def __repr__(self) -> str:  # noqa: D105
        counts = ", ".join(
            f"{category}: {len(entries)}"
            for category, entries in self._observations.items()
        )
        return f"ResourceIndex({{{counts}}})"

    def categories(self) -> list[Category]:
        """Return the categories seen, in order of first discovery."""
        return list(self._observations)

    def observations(self, category: Category) -> tuple[Observation, ...]:
        """Return the observations of a category, or an empty tuple if it was never seen."""
        return tuple(self._observations.get(category, ()))

    def coordinates(self, category: Category) -> np.ndarray:
        """Return an ``(n, 2)`` integer array of (column, row) per observation."""
        entries = self._observations.get(category, ())
        return np.array(
            [entry.coordinate.as_tuple() for entry in entries], dtype=np.int64
        ).reshape(-1, 2)

    def total_load(self, category: Category) -> int:
        """Return the summed load of all observations of a category."""
        return sum(entry.quantity.load for entry in self._observations.get(category, ()))

    def _append(self, category: Category, observation: Observation) -> None:
        self._observations.setdefault(category, []).append(observation)


def build_index(snapshot: Snapshot | None) -> ResourceIndex | None:
    """Group the discovered tiles of a snapshot by resource category.

    Args:
        snapshot: row-major tiles, None where undiscovered; the snapshot itself
            is None when the world has never been explored

    Returns:
        None if the world was never explored or no tile of the snapshot has
        been discovered, otherwise the index. A world whose discovered tiles
        are all empty yields an empty index, not None.
    """
    if snapshot is None:
        _tm_logger.debug("snapshot unavailable, world not explored yet")
        return None

    index = ResourceIndex()
    n_rows = 0
    width = 0
    discovered = 0
    for row, tiles in enumerate(snapshot):
        n_rows += 1
        width = max(width, len(tiles))
        for column, tile in enumerate(tiles):
            if tile is None:
                continue
            if not isinstance(tile, Tile):
                raise TypeError(
                    f"Snapshot cell ({column}, {row}) must be a Tile or None, "
                    f"got {type(tile).__name__}"
                )
            discovered += 1
            if tile.is_empty:
                continue
            index._append(
                tile.category, Observation(Coordinate(column, row), tile.quantity)
            )

    if discovered == 0:
        _tm_logger.debug("snapshot holds no discovered tile, world not explored yet")
        return None

    index.shape = (n_rows, width)
    index.discovered = discovered
    _tm_logger.debug(
        f"indexed {discovered} discovered tiles of a {n_rows}x{width} snapshot "
        f"into {len(index)} categories"
    )
    return index
