"""Layout modes and the dimension/sizes computation for each of them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..errors import MissingDimensionError
from ..units import format_css_number


class Layout(str, Enum):
    """Sizing strategies for a responsive image.

    - FULL_WIDTH: the image always spans the viewport
    - FIXED: the image is always rendered at its resolved width
    - CONSTRAINED: the image spans the viewport up to its resolved width
    """
    FULL_WIDTH = "fullWidth"
    FIXED = "fixed"
    CONSTRAINED = "constrained"


class Loading(str, Enum):
    """Loading strategies for the main image."""
    LAZY = "lazy"
    EAGER = "eager"


@dataclass(frozen=True)
class LayoutSize:
    """Resolved display size of an image.

    Attributes:
        width: Display width in pixels
        height: Display height in pixels
        sizes: Value for the ``sizes`` attribute, or None when no hint applies
    """

    width: float
    height: float
    sizes: str | None


def _is_dimension(value: float | None) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def resolve_dimensions(
    source_width: float | None,
    source_height: float | None,
    width: float | None = None,
    height: float | None = None,
) -> tuple[float, float]:
    """Resolve the display width and height of an image.

    An explicit width without an explicit height scales the source height
    by ``width / source_width`` so the aspect ratio is preserved.

    Args:
        source_width: Native width reported by the image source
        source_height: Native height reported by the image source
        width: Caller supplied width override
        height: Caller supplied height override

    Returns:
        Tuple of (width, height)

    Raises:
        MissingDimensionError: If either dimension cannot be anchored
    """
    if width is not None and not _is_dimension(width):
        raise MissingDimensionError("width", f"Invalid image width override: {width!r}")
    if height is not None and not _is_dimension(height):
        raise MissingDimensionError("height", f"Invalid image height override: {height!r}")

    width_supplied = width is not None
    if not width_supplied:
        if not _is_dimension(source_width):
            raise MissingDimensionError("width")
        width = source_width

    if height is None:
        if not _is_dimension(source_height):
            raise MissingDimensionError("height")
        if width_supplied:
            # Scaling needs the native width as well
            if not _is_dimension(source_width):
                raise MissingDimensionError(
                    "height",
                    "Cannot derive image height: the source provides no width to scale from",
                )
            height = width / source_width * source_height
        else:
            height = source_height

    return width, height


def default_sizes(layout: Layout | str, width: float) -> str | None:
    """Build the default ``sizes`` attribute for a layout.

    Args:
        layout: Layout mode (enum or string value)
        width: Resolved display width in pixels

    Returns:
        The sizes string, or None for unknown layouts
    """
    px = f"{format_css_number(width)}px"

    # Capped at width on wide viewports, otherwise the viewport width
    if layout == Layout.CONSTRAINED:
        return f"(min-width:{px}) {px}, 100vw"
    if layout == Layout.FIXED:
        return px
    if layout == Layout.FULL_WIDTH:
        return "100vw"
    return None


def resolve_sizes(
    layout: Layout | str,
    width: float,
    sizes: str | None = None,
    source_sizes: str | None = None,
) -> str | None:
    """Pick the ``sizes`` attribute: caller override, then source, then layout default."""
    if sizes is not None:
        return sizes
    if source_sizes is not None:
        return source_sizes
    return default_sizes(layout, width)


class LayoutSizer:
    """Computes the display size of an image for a layout mode."""

    def size(
        self,
        layout: Layout | str,
        source_width: float | None,
        source_height: float | None,
        width: float | None = None,
        height: float | None = None,
        sizes: str | None = None,
        source_sizes: str | None = None,
    ) -> LayoutSize:
        """Resolve width, height and sizes in one step.

        Args:
            layout: Layout mode
            source_width: Native width reported by the image source
            source_height: Native height reported by the image source
            width: Caller supplied width override
            height: Caller supplied height override
            sizes: Caller supplied sizes override
            source_sizes: Sizes attribute reported by the image source

        Returns:
            LayoutSize holding the resolved values
        """
        resolved_width, resolved_height = resolve_dimensions(
            source_width, source_height, width, height
        )
        return LayoutSize(
            width=resolved_width,
            height=resolved_height,
            sizes=resolve_sizes(layout, resolved_width, sizes, source_sizes),
        )
