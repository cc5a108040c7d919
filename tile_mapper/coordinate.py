"""Integer grid coordinates.

Coordinates are stored horizontal-first as (column, row). Snapshots are indexed
row-major, so a tile found at ``snapshot[row][column]`` has coordinate
``Coordinate(column, row)``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator


class Coordinate:
    """An immutable point on the grid.

    Attributes:
        column (int): the horizontal position
        row (int): the vertical position

    Notes:
        Subtraction that would leave a component negative is not checked.
    """

    __slots__ = ("_column", "_row")

    def __init__(self, column: int, row: int) -> None:
        """Create a coordinate.

        Args:
            column: the horizontal position
            row: the vertical position
        """
        object.__setattr__(self, "_column", int(column))
        object.__setattr__(self, "_row", int(row))

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> Coordinate:
        """Create a coordinate from a ``(column, row)`` tuple."""
        column, row = value
        return cls(column, row)

    @property
    def column(self) -> int:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    def as_tuple(self) -> tuple[int, int]:
        """Return the coordinate as a ``(column, row)`` tuple."""
        return (self._column, self._row)

    def distance(self, other: Coordinate) -> float:
        """Return the Euclidean distance to another coordinate."""
        d_column = float(self._column - other._column)
        d_row = float(self._row - other._row)
        return math.sqrt(d_column**2 + d_row**2)

    def __setattr__(self, name, value):  # noqa: D105
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __add__(self, other: Coordinate) -> Coordinate:  # noqa: D105
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self._column + other._column, self._row + other._row)

    def __sub__(self, other: Coordinate) -> Coordinate:  # noqa: D105
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self._column - other._column, self._row - other._row)

    def __eq__(self, other) -> bool:  # noqa: D105
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._column == other._column and self._row == other._row

    def __hash__(self) -> int:  # noqa: D105
        return hash((self._column, self._row))

    def __iter__(self) -> Iterator[int]:  # noqa: D105
        return iter((self._column, self._row))

    def __repr__(self) -> str:  # noqa: D105
        return f"Coordinate({self._column}, {self._row})"

    def __getstate__(self):  # noqa: D105
        return self.as_tuple()

    def __setstate__(self, state):  # noqa: D105
        column, row = state
        object.__setattr__(self, "_column", column)
        object.__setattr__(self, "_row", row)
