"""Layout modes and display size resolution."""

from .sizing import (
    Layout,
    LayoutSize,
    LayoutSizer,
    Loading,
    default_sizes,
    resolve_dimensions,
    resolve_sizes,
)

__all__ = [
    "Layout",
    "LayoutSize",
    "LayoutSizer",
    "Loading",
    "default_sizes",
    "resolve_dimensions",
    "resolve_sizes",
]
