"""Structural interfaces for the host simulation.

tile_mapper never owns a world. The host hands it two things:

- ``WorldView``: anything with a ``robot_map()`` method returning the snapshot of
  tiles known so far, or None when nothing has been explored yet.
- ``Positioned``: anything with a ``position`` property giving the observer's
  (column, row) location.

Both are Protocols, so host objects satisfy them through duck typing without
inheriting from anything in this package.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from tile_mapper.tile import Tile

# A snapshot is row-major: snapshot[row][column] is a Tile, or None when the
# cell has not been discovered. A 2D numpy object array works the same way.
Snapshot = Sequence[Sequence[Tile | None]] | NDArray[np.object_]


@runtime_checkable
class WorldView(Protocol):
    """Protocol for the host's read access to the explored map.

    Examples:
        A minimal host world::

            class HostWorld:
                def __init__(self, known):
                    self.known = known

                def robot_map(self):
                    return self.known

            assert isinstance(HostWorld(None), WorldView)

    """

    def robot_map(self) -> Snapshot | None:
        """Return the tiles discovered so far, or None if nothing was ever observed."""
        ...


@runtime_checkable
class Positioned(Protocol):
    """Protocol for the observer whose location anchors distance tie-breaks."""

    @property
    def position(self) -> tuple[int, int]:
        """The observer's location as (column, row)."""
        ...
