"""Image sources feeding the attribute resolver."""

from .base import BaseImageSource, ImageSource, ImageSourceData, SrcSet
from .local import LocalImageSource

__all__ = [
    "BaseImageSource",
    "ImageSource",
    "ImageSourceData",
    "SrcSet",
    "LocalImageSource",
]
