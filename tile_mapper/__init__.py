"""tile_mapper: resource index and spatial queries over partially explored grids.

Core Objects: Coordinate, Tile, ResourceIndex, TileMapper
"""

from tile_mapper.coordinate import Coordinate
from tile_mapper.errors import (
    ContentNotDiscovered,
    QuantityVariantError,
    TileMapperError,
    WorldNotDiscovered,
)
from tile_mapper.mapper import TileMapper
from tile_mapper.queries import find_closest, find_most_loaded
from tile_mapper.resource_index import Observation, ResourceIndex, build_index
from tile_mapper.tile import Category, Extent, Quantity, Scalar, Tile

__all__ = [
    "Category",
    "ContentNotDiscovered",
    "Coordinate",
    "Extent",
    "Observation",
    "Quantity",
    "QuantityVariantError",
    "ResourceIndex",
    "Scalar",
    "Tile",
    "TileMapper",
    "TileMapperError",
    "WorldNotDiscovered",
    "build_index",
    "find_closest",
    "find_most_loaded",
]

__title__ = "tile_mapper"
__version__ = "0.3.0"
__license__ = "MIT"
