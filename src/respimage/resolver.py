"""Resolve image source data and layout options into a render-ready view."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .config.loader import ImageConfig
from .layout.sizing import Layout, LayoutSizer, Loading
from .sources.base import ImageSource, ImageSourceData
from .styles.composer import StyleComposer
from .units import CSSValue

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND_COLOR = "transparent"
DEFAULT_LQIP = True

# Caller option name -> LayoutArgs field
ARG_ALIASES: dict[str, str] = {
    "layout": "layout",
    "loading": "loading",
    "width": "width",
    "height": "height",
    "sizes": "sizes",
    "backgroundColor": "background_color",
    "background_color": "background_color",
    "lqip": "lqip",
    "imgStyle": "img_style",
    "img_style": "img_style",
    "class": "wrapper_class",
    "wrapperClass": "wrapper_class",
    "wrapper_class": "wrapper_class",
}


@dataclass(frozen=True)
class LayoutArgs:
    """Layout options supplied by the caller.

    Attributes:
        layout: Layout mode, fullWidth by default
        loading: Loading strategy, lazy by default
        width: Display width override in pixels
        height: Display height override in pixels
        sizes: Sizes attribute override
        background_color: Background color; None uses the configured default
        lqip: Whether to request a placeholder; None uses the configured default
        img_style: CSS overrides merged over the image defaults
        wrapper_class: Extra class appended to the wrapper
    """

    layout: Layout | str = Layout.FULL_WIDTH
    loading: Loading | str = Loading.LAZY
    width: float | None = None
    height: float | None = None
    sizes: str | None = None
    background_color: str | None = None
    lqip: bool | None = None
    img_style: Mapping[str, CSSValue] = field(default_factory=dict)
    wrapper_class: str | None = None

    @classmethod
    def from_mapping(cls, args: Mapping[str, Any]) -> LayoutArgs:
        """Build layout args from caller options.

        Accepts both the camelCase option names (``backgroundColor``,
        ``imgStyle``, ``class``) and the field names. None values count as
        not supplied; unrecognized options are ignored.
        """
        kwargs: dict[str, Any] = {}
        for key, value in args.items():
            name = ARG_ALIASES.get(key)
            if name is None:
                logger.debug("Ignoring unknown image option %r", key)
                continue
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class WrapperView:
    """Class list and inline style of the wrapper element."""

    classes: str
    style: str


@dataclass(frozen=True)
class ResolvedView:
    """Everything a template needs to render a responsive image.

    ``placeholder`` and ``main`` are read-only mappings holding the source
    fields overlaid by the computed attributes. Use :meth:`to_dict` to hand
    the view to a templating layer.
    """

    layout: str
    wrapper: WrapperView
    placeholder: Mapping[str, Any]
    main: Mapping[str, Any]
    alt: str
    width: float
    height: float
    sizes: str | None

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict keyed the way image templates expect."""
        main = dict(self.main)
        main["sources"] = [
            dict(s) if isinstance(s, Mapping) else s for s in main.get("sources", ())
        ]
        return {
            "layout": self.layout,
            "wrapper": {
                "classes": self.wrapper.classes,
                "style": self.wrapper.style,
            },
            "placeholder": dict(self.placeholder),
            "main": main,
            "alt": self.alt,
            "width": self.width,
            "height": self.height,
            "sizes": self.sizes,
        }


def _source_data(source: ImageSource | ImageSourceData | Mapping[str, Any]) -> ImageSourceData:
    if isinstance(source, ImageSourceData):
        return source
    if isinstance(source, Mapping):
        return ImageSourceData.from_mapping(source)
    return ImageSourceData.from_source(source)


def _layout_args(args: LayoutArgs | Mapping[str, Any] | None) -> LayoutArgs:
    if args is None:
        return LayoutArgs()
    if isinstance(args, LayoutArgs):
        return args
    return LayoutArgs.from_mapping(args)


def _value(option: Any) -> Any:
    # Enum members render as their plain string value
    return option.value if isinstance(option, (Layout, Loading)) else option


def resolve(
    source: ImageSource | ImageSourceData | Mapping[str, Any],
    args: LayoutArgs | Mapping[str, Any] | None = None,
    *,
    default_background_color: str | None = None,
    default_lqip: bool | None = None,
) -> ResolvedView:
    """Resolve the attributes of a responsive image.

    Args:
        source: Image source, a snapshot of one, or a mapping in the
            ImageSourceData.from_mapping shape
        args: Layout options (LayoutArgs or a mapping of caller options)
        default_background_color: Configured background color default
        default_lqip: Configured placeholder default

    Returns:
        Immutable ResolvedView

    Raises:
        MissingDimensionError: If width or height cannot be resolved
    """
    data = _source_data(source)
    args = _layout_args(args)

    layout = _value(args.layout)
    loading = _value(args.loading)
    background_color = _first_set(args.background_color, default_background_color, DEFAULT_BACKGROUND_COLOR)
    lqip = _first_set(args.lqip, default_lqip, DEFAULT_LQIP)

    size = LayoutSizer().size(
        layout,
        data.width,
        data.height,
        width=args.width,
        height=args.height,
        sizes=args.sizes,
        source_sizes=data.sizes_attr,
    )
    logger.debug(
        "Resolved %s image %r: %sx%s, sizes=%r",
        layout, data.default_src, size.width, size.height, size.sizes,
    )

    composer = StyleComposer(
        layout,
        size.width,
        size.height,
        background_color=background_color,
        loading=loading,
        img_style=args.img_style,
    )

    wrapper = WrapperView(
        classes=composer.wrapper_classes(args.wrapper_class),
        style=composer.wrapper_style().serialize(),
    )

    placeholder = dict(data.placeholder)
    placeholder["style"] = composer.placeholder_style().serialize()
    if not lqip:
        placeholder["src"] = None

    main = {
        "sources": data.src_sets,
        "src": data.default_src,
        "loading": loading,
        "shouldLoad": loading == Loading.EAGER,
        "style": composer.main_style().serialize(),
    }

    return ResolvedView(
        layout=layout,
        wrapper=wrapper,
        placeholder=MappingProxyType(placeholder),
        main=MappingProxyType(main),
        alt=data.alt,
        width=size.width,
        height=size.height,
        sizes=size.sizes,
    )


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


class AttributeResolver:
    """Resolves images against a fixed set of configured defaults.

    Example:
        resolver = AttributeResolver(ConfigLoader().load())
        view = resolver.resolve(source, {"layout": "fixed", "width": 300})
    """

    def __init__(self, config: ImageConfig | None = None) -> None:
        self.config = config or ImageConfig()

    def resolve(
        self,
        source: ImageSource | ImageSourceData | Mapping[str, Any],
        args: LayoutArgs | Mapping[str, Any] | None = None,
    ) -> ResolvedView:
        """Resolve an image with this resolver's configured defaults."""
        return resolve(
            source,
            args,
            default_background_color=self.config.background_color,
            default_lqip=self.config.lqip,
        )
