"""Inline style composition for the wrapper, placeholder and main image.

Each style map is built by an explicit ordered merge. For a given key the
later step wins, while the first step that sets the key fixes its position
in the serialized output:

1. Defaults (``IMG_BASE_STYLE``, and ``MAIN_BASE_STYLE`` for the main image)
2. Caller ``img_style`` overrides of the shared image defaults
3. Layout-specific values (forced fill, pixel dimensions, positioning)
4. Background color injection
5. Loading state (opacity, transition)
"""

from __future__ import annotations

from collections.abc import Mapping

from ..layout.sizing import Layout, Loading
from ..units import CSSValue, format_css_number
from .style_map import StyleMap

WRAPPER_CLASS = "twill-image-wrapper"
WRAPPER_CONSTRAINED_CLASS = "twill-image-wrapper-constrained"

# Shared by the placeholder and the main image
IMG_BASE_STYLE: Mapping[str, CSSValue] = {
    "bottom": 0,
    "height": "100%",
    "left": 0,
    "margin": 0,
    "max-width": "none",
    "padding": 0,
    "position": "absolute",
    "right": 0,
    "top": 0,
    "width": "100%",
    "object-fit": "cover",
    "object-position": "center center",
}

MAIN_BASE_STYLE: Mapping[str, CSSValue] = {
    "transition": "opacity 250ms linear",
    "transform": "translateZ(0px)",
    "will-change": "opacity",
}

# The placeholder always fills its container
PLACEHOLDER_FILL_STYLE: Mapping[str, CSSValue] = {
    "height": "100%",
    "left": 0,
    "position": "absolute",
    "top": 0,
    "width": "100%",
}

PLACEHOLDER_TRANSITION = "opacity 500ms linear"


def _px(value: float) -> str:
    return f"{format_css_number(value)}px"


class StyleComposer:
    """Builds the three style maps of a responsive image.

    The composer is a pure function of its constructor arguments; every
    method returns a fresh StyleMap.

    Attributes:
        layout: Layout mode; unknown values get no layout-specific styles
        width: Resolved display width in pixels
        height: Resolved display height in pixels
        background_color: CSS color, or a falsy value to skip injection
        loading: Loading strategy of the main image
        img_style: Caller overrides merged over the image defaults
    """

    def __init__(
        self,
        layout: Layout | str,
        width: float,
        height: float,
        background_color: str | None = "transparent",
        loading: Loading | str = Loading.LAZY,
        img_style: Mapping[str, CSSValue] | None = None,
    ) -> None:
        self.layout = layout
        self.width = width
        self.height = height
        self.background_color = background_color
        self.loading = loading
        self.img_style = StyleMap.merged(IMG_BASE_STYLE, img_style or {})

    def wrapper_style(self) -> StyleMap:
        """Style of the outer container that positions both image layers."""
        style = StyleMap(position="relative", overflow="hidden")

        if self.layout == Layout.FIXED:
            style["width"] = _px(self.width)
            style["height"] = _px(self.height)
        elif self.layout == Layout.CONSTRAINED:
            style["display"] = "inline-block"

        if self.background_color:
            style["background-color"] = self.background_color

        return style

    def wrapper_classes(self, wrapper_class: str | None = None) -> str:
        """Space separated class list of the wrapper, base class first."""
        classes = [WRAPPER_CLASS]
        if self.layout == Layout.CONSTRAINED:
            classes.append(WRAPPER_CONSTRAINED_CLASS)
        if wrapper_class:
            classes.append(wrapper_class)
        return " ".join(classes)

    def placeholder_style(self) -> StyleMap:
        """Style of the low-quality placeholder layer."""
        style = StyleMap.merged(self.img_style, PLACEHOLDER_FILL_STYLE)

        if self.background_color:
            style["background-color"] = self.background_color

            if self.layout == Layout.FIXED:
                style["width"] = _px(self.width)
                style["height"] = _px(self.height)
                style["position"] = "relative"
            elif self.layout in (Layout.CONSTRAINED, Layout.FULL_WIDTH):
                style.update(position="absolute", top=0, left=0, bottom=0, right=0)

        style["opacity"] = 1
        style["transition"] = PLACEHOLDER_TRANSITION
        return style

    def main_style(self) -> StyleMap:
        """Style of the main image layer.

        Lazy images start fully transparent so the rendering layer can fade
        them in once loaded.
        """
        style = StyleMap.merged(MAIN_BASE_STYLE, self.img_style)

        if self.background_color:
            style["background-color"] = self.background_color

        style["opacity"] = 0 if self.loading == Loading.LAZY else 1
        return style
