"""The tool object a host simulation holds to query its explored map.

Core Objects: TileMapper
"""

from __future__ import annotations

from tile_mapper import queries
from tile_mapper.coordinate import Coordinate
from tile_mapper.errors import ConfigurationError
from tile_mapper.mapper_logging import method_logger
from tile_mapper.protocols import Positioned, WorldView
from tile_mapper.resource_index import ResourceIndex, build_index
from tile_mapper.tile import Category, Tile


class TileMapper:
    """Answer resource queries against a host world, from a robot's point of view.

    Every call reads a fresh snapshot from the world, so results always reflect
    what has been explored by then. Nothing is cached between calls.

    Attributes:
        strict_variants (bool): raise instead of skipping tiles whose quantity
            variant does not match the rest of their category

    Examples:
        In a host's per-tick logic::

            mapper = TileMapper()
            try:
                target = mapper.find_most_loaded(world, robot, Category.ROCK)
            except ContentNotDiscovered:
                ...  # keep exploring

    """

    @method_logger(__name__)
    def __init__(self, strict_variants: bool = False) -> None:
        """Create a mapper.

        Args:
            strict_variants: raise QuantityVariantError on mixed-variant categories
        """
        if not isinstance(strict_variants, bool):
            raise ConfigurationError("strict_variants", "must be a bool")
        self.strict_variants = strict_variants

    @staticmethod
    def collection(world: WorldView) -> ResourceIndex | None:
        """Index the tiles the world reports as discovered.

        Returns:
            None if the world has not been explored yet, otherwise the index
        """
        return build_index(world.robot_map())

    @staticmethod
    def reference_point(robot: Positioned) -> Coordinate:
        """Return the robot's (column, row) position as a coordinate."""
        return Coordinate.from_tuple(robot.position)

    def find_closest(
        self, world: WorldView, robot: Positioned, category: Category | Tile | str
    ) -> Coordinate:
        """Return the discovered tile of ``category`` nearest to the robot.

        Raises:
            WorldNotDiscovered: if nothing has been observed yet
            ContentNotDiscovered: if no observed tile holds the category
        """
        return queries.find_closest(
            self.collection(world), self.reference_point(robot), category
        )

    def find_most_loaded(
        self, world: WorldView, robot: Positioned, category: Category | Tile | str
    ) -> Coordinate:
        """Return the discovered tile of ``category`` with the largest load.

        Ties on load go to the tile closer to the robot.

        Raises:
            WorldNotDiscovered: if nothing has been observed yet
            ContentNotDiscovered: if no observed tile holds the category
            QuantityVariantError: in strict mode, if the category mixes variants
        """
        return queries.find_most_loaded(
            self.collection(world),
            self.reference_point(robot),
            category,
            strict_variants=self.strict_variants,
        )
