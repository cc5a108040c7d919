"""Tile contents: resource categories and the quantities they carry.

A discovered tile holds one resource ``Category`` and, unless the category is
``Category.EMPTY``, a ``Quantity``. A quantity is either a ``Scalar`` count
(e.g. the number of rocks) or an ``Extent`` interval whose magnitude is the
comparable measure (e.g. the capacity span of a bin).
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum

from tile_mapper.errors import TileContentError


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "").replace(" ", "")


def _require_integer(owner: str, field: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TileContentError(
            f"{owner} {field} must be an integer, got {type(value).__name__} {value!r}."
        )
    return int(value)


class Category(Enum):
    """Kind of resource a tile holds, independent of the amount."""

    ROCK = "rock"
    TREE = "tree"
    GARBAGE = "garbage"
    FIRE = "fire"
    COIN = "coin"
    BIN = "bin"
    CRATE = "crate"
    BANK = "bank"
    WATER = "water"
    MARKET = "market"
    FISH = "fish"
    BUILDING = "building"
    BUSH = "bush"
    JOLLY_BLOCK = "jolly_block"
    SCARECROW = "scarecrow"
    EMPTY = "empty"

    @classmethod
    def parse(cls, value: Category | Tile | str) -> Category:
        """Derive the category key from a category, a tile or a category name.

        Names are matched ignoring case, spaces and underscores, so ``"Rock"``,
        ``"ROCK"`` and ``"rock"`` all give ``Category.ROCK`` and ``"JollyBlock"``
        gives ``Category.JOLLY_BLOCK``.
        """
        if isinstance(value, Category):
            return value
        if isinstance(value, Tile):
            return value.category
        if isinstance(value, str):
            key = _normalize(value)
            for member in cls:
                if _normalize(member.value) == key:
                    return member
            raise ValueError(f"Unknown resource category '{value}'.")
        raise TypeError(
            f"Expected a Category, Tile or str, got {type(value).__name__}"
        )

    def __str__(self) -> str:  # noqa: D105
        return self.name.title().replace("_", "")


@dataclass(frozen=True, slots=True)
class Scalar:
    """A discrete amount of a resource."""

    count: int

    def __post_init__(self):  # noqa: D105
        object.__setattr__(self, "count", _require_integer("Scalar", "count", self.count))
        if self.count < 0:
            raise TileContentError(f"Scalar count must be >= 0, got {self.count}.")

    @property
    def load(self) -> int:
        """The comparable measure of this quantity."""
        return self.count


@dataclass(frozen=True, slots=True)
class Extent:
    """A half-open interval ``[start, end)``; its load is ``end - start``."""

    start: int
    end: int

    def __post_init__(self):  # noqa: D105
        object.__setattr__(self, "start", _require_integer("Extent", "start", self.start))
        object.__setattr__(self, "end", _require_integer("Extent", "end", self.end))
        if self.end < self.start:
            raise TileContentError(
                f"Extent end must not precede its start, got {self.start}..{self.end}."
            )

    @property
    def load(self) -> int:
        """The magnitude of the interval."""
        return self.end - self.start


Quantity = Scalar | Extent


@dataclass(frozen=True, slots=True)
class Tile:
    """A discovered grid cell.

    Attributes:
        category: the kind of resource on the tile
        quantity: the amount of that resource, None only for empty tiles
    """

    category: Category
    quantity: Quantity | None = None

    def __post_init__(self):  # noqa: D105
        if not isinstance(self.category, Category):
            raise TileContentError(
                f"Tile category must be a Category, got {type(self.category).__name__}."
            )
        if self.category is Category.EMPTY:
            if self.quantity is not None:
                raise TileContentError("An empty tile cannot carry a quantity.")
        elif not isinstance(self.quantity, (Scalar, Extent)):
            raise TileContentError(
                f"A {self.category} tile needs a Scalar or Extent quantity, "
                f"got {self.quantity!r}."
            )

    @classmethod
    def empty(cls) -> Tile:
        """Return a discovered tile holding nothing."""
        return cls(Category.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.category is Category.EMPTY
