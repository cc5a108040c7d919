import tile_mapper


class TileMapperError(Exception):
    """Base class for all tile_mapper exceptions.
    It automatically prepends the package version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.tile_mapper_version = getattr(tile_mapper, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[tile_mapper {self.tile_mapper_version}] {message}"
        super().__init__(full_message)


class ConfigurationError(TileMapperError):
    """Raised when a mapper or query option has an invalid value.

    Given an option name and a reason, the message names the option and
    ``param_name`` is set; a lone argument is used as the whole message.
    """

    def __init__(self, param_name: str = None, reason: str = None):
        if param_name and reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name = param_name
        else:
            message = param_name if param_name else "Invalid configuration"
            self.param_name = None

        super().__init__(message)


# Tile Errors
class TileContentError(TileMapperError):
    """Raised when a tile's category and quantity do not fit together.
    Examples: a rock tile without an amount, an empty tile carrying one,
    or an extent whose end lies before its start.
    """


class QuantityVariantError(TileMapperError):
    """Raised in strict mode when a category mixes scalar and extent quantities."""

    def __init__(self, category, coordinate):
        self.category = category
        self.coordinate = coordinate
        message = (
            f"Observation at {coordinate} does not use the quantity variant "
            f"of category {category}."
        )
        super().__init__(message)


# Query Errors
class QueryError(TileMapperError):
    """Generic errors raised by the spatial queries."""


class WorldNotDiscovered(QueryError):  # noqa: N818
    """Raised when the world has not yielded a single observed cell yet."""

    def __init__(self, message: str = "The world has not been discovered yet."):
        super().__init__(message)


class ContentNotDiscovered(QueryError):  # noqa: N818
    """Raised when no discovered cell holds the requested category."""

    def __init__(self, category):
        self.category = category
        message = f"No discovered tile contains {category}."
        super().__init__(message)
