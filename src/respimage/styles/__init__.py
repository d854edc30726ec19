"""Style map composition and serialization."""

from .style_map import StyleMap, serialize_style
from .composer import (
    IMG_BASE_STYLE,
    MAIN_BASE_STYLE,
    WRAPPER_CLASS,
    WRAPPER_CONSTRAINED_CLASS,
    StyleComposer,
)

__all__ = [
    "StyleMap",
    "serialize_style",
    "IMG_BASE_STYLE",
    "MAIN_BASE_STYLE",
    "WRAPPER_CLASS",
    "WRAPPER_CONSTRAINED_CLASS",
    "StyleComposer",
]
