"""Exception types raised by respimage."""


class RespImageError(Exception):
    """Base class for all respimage errors."""


class MissingDimensionError(RespImageError, ValueError):
    """Raised when an image dimension cannot be resolved.

    The resolver needs a positive width and height to anchor its aspect
    ratio math. When neither the caller nor the image source provides them,
    resolution stops before any output is built.

    Attributes:
        dimension: Name of the dimension that could not be resolved
    """

    def __init__(self, dimension: str, message: str | None = None) -> None:
        self.dimension = dimension
        super().__init__(
            message or f"Cannot resolve image {dimension}: not supplied and not provided by the source"
        )


class ConfigError(RespImageError, ValueError):
    """Raised when a configuration file is malformed."""


class ImageSourceError(RespImageError):
    """Raised when an image source cannot read its backing image."""
