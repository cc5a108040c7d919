"""Spatial queries over a resource index.

Two queries are provided:
- find_closest: the discovered tile of a category nearest to a reference point
- find_most_loaded: the discovered tile of a category with the largest load,
  ties broken by distance to the reference point

Both accept a built ``ResourceIndex``, a raw snapshot (indexed on the fly), or
None for a world that has not been explored yet. Callers that issue several
queries against one snapshot should build the index once and pass it to each.

Tie-breaking is deterministic. Distances and loads are evaluated as numpy
arrays in scan order, and ``np.argmin``/``np.flatnonzero`` return the first
matching position, so among exact ties the tile scanned first wins. A later
tile only displaces an earlier one when it is strictly better.
"""

from __future__ import annotations

import numpy as np

from tile_mapper.coordinate import Coordinate
from tile_mapper.errors import (
    ConfigurationError,
    ContentNotDiscovered,
    QuantityVariantError,
    WorldNotDiscovered,
)
from tile_mapper.mapper_logging import create_module_logger, function_logger
from tile_mapper.protocols import Snapshot
from tile_mapper.resource_index import Observation, ResourceIndex, build_index
from tile_mapper.tile import Category, Tile

_tm_logger = create_module_logger()

IndexSource = ResourceIndex | Snapshot | None


def _resolve(
    source: IndexSource, category: Category | Tile | str
) -> tuple[Category, tuple[Observation, ...]]:
    """Return the category key and its observations, raising the query errors."""
    category = Category.parse(category)
    index = source if isinstance(source, ResourceIndex) else build_index(source)
    if index is None:
        raise WorldNotDiscovered()
    observations = index.observations(category)
    if not observations:
        raise ContentNotDiscovered(category)
    return category, observations


def _distances(
    observations: tuple[Observation, ...], reference_point: Coordinate
) -> np.ndarray:
    # differences are taken on Python ints, so no fixed-width overflow
    delta = np.array(
        [
            (entry.coordinate.column - reference_point.column,
             entry.coordinate.row - reference_point.row)
            for entry in observations
        ],
        dtype=np.float64,
    ).reshape(-1, 2)
    return np.sqrt(delta[:, 0] ** 2 + delta[:, 1] ** 2)


def _comparable(
    category: Category,
    observations: tuple[Observation, ...],
    strict_variants: bool,
) -> tuple[Observation, ...]:
    """Drop observations whose quantity variant differs from the category's.

    The category's variant is the variant of its first observation.
    """
    variant = type(observations[0].quantity)
    kept = []
    for entry in observations:
        if type(entry.quantity) is variant:
            kept.append(entry)
            continue
        if strict_variants:
            raise QuantityVariantError(category, entry.coordinate)
        _tm_logger.warning(
            f"skipping {type(entry.quantity).__name__} observation at "
            f"{entry.coordinate} in {variant.__name__} category {category}"
        )
    return tuple(kept)


@function_logger(__name__)
def find_closest(
    source: IndexSource,
    reference_point: Coordinate,
    category: Category | Tile | str,
) -> Coordinate:
    """Find the discovered tile of a category nearest to the reference point.

    Args:
        source: a built index, a snapshot, or None if the world is unexplored
        reference_point: the observer's position
        category: the resource to look for; a Tile or a name is reduced to its category

    Returns:
        The coordinate of the nearest tile. Among equidistant tiles the one
        scanned first (lowest row, then lowest column) is returned.

    Raises:
        WorldNotDiscovered: if nothing has been observed yet
        ContentNotDiscovered: if no observed tile holds the category
    """
    _, observations = _resolve(source, category)
    best = int(np.argmin(_distances(observations, reference_point)))
    return observations[best].coordinate


@function_logger(__name__)
def find_most_loaded(
    source: IndexSource,
    reference_point: Coordinate,
    category: Category | Tile | str,
    strict_variants: bool = False,
) -> Coordinate:
    """Find the discovered tile of a category holding the largest load.

    Args:
        source: a built index, a snapshot, or None if the world is unexplored
        reference_point: the observer's position, used to break load ties
        category: the resource to look for; a Tile or a name is reduced to its category
        strict_variants: raise instead of skipping observations whose quantity
            variant does not match the category's

    Returns:
        The coordinate of the tile with the largest load. Among equal loads the
        tile strictly closest to the reference point wins; among equal loads at
        equal distance the tile scanned first wins. A category whose loads are
        all zero still yields its closest tile.

    Raises:
        WorldNotDiscovered: if nothing has been observed yet
        ContentNotDiscovered: if no observed tile holds the category
        QuantityVariantError: if ``strict_variants`` is set and the category mixes variants
    """
    if not isinstance(strict_variants, bool):
        raise ConfigurationError("strict_variants", "must be a bool")

    category, observations = _resolve(source, category)
    observations = _comparable(category, observations, strict_variants)

    # object dtype keeps loads as unbounded Python ints
    loads = np.array([entry.quantity.load for entry in observations], dtype=object)
    candidates = np.flatnonzero((loads == max(loads)).astype(bool))
    distances = _distances(observations, reference_point)[candidates]
    best = int(candidates[np.argmin(distances)])
    return observations[best].coordinate
