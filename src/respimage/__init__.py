"""respimage - attribute resolver for responsive, lazy-loading images."""

from .errors import ConfigError, ImageSourceError, MissingDimensionError, RespImageError
from .layout import Layout, LayoutSize, LayoutSizer, Loading
from .styles import StyleComposer, StyleMap, serialize_style
from .sources import BaseImageSource, ImageSource, ImageSourceData, LocalImageSource
from .config import ConfigLoader, ImageConfig
from .resolver import AttributeResolver, LayoutArgs, ResolvedView, WrapperView, resolve

__all__ = [
    "ConfigError",
    "ImageSourceError",
    "MissingDimensionError",
    "RespImageError",
    "Layout",
    "LayoutSize",
    "LayoutSizer",
    "Loading",
    "StyleComposer",
    "StyleMap",
    "serialize_style",
    "BaseImageSource",
    "ImageSource",
    "ImageSourceData",
    "LocalImageSource",
    "ConfigLoader",
    "ImageConfig",
    "AttributeResolver",
    "LayoutArgs",
    "ResolvedView",
    "WrapperView",
    "resolve",
]
