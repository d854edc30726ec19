"""Image source capability and the snapshot of data read from it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

SrcSet = Mapping[str, Any]


@runtime_checkable
class ImageSource(Protocol):
    """Protocol for anything that can describe an image and its variants.

    Any object exposing these synchronous accessors satisfies this protocol,
    whether it is backed by a local file, an asset pipeline or a CMS.
    """

    def width(self) -> float | None:
        ...

    def height(self) -> float | None:
        ...

    def alt(self) -> str:
        ...

    def sizes_attr(self) -> str | None:
        ...

    def default_src(self) -> str:
        ...

    def src_sets(self) -> Sequence[SrcSet]:
        ...

    def lqip(self) -> Mapping[str, Any]:
        ...


class BaseImageSource(ABC):
    """Abstract base class for image sources.

    Subclasses implement the dimension and default URL accessors; the
    remaining accessors fall back to empty values.
    """

    @abstractmethod
    def width(self) -> float | None:
        """Native width of the image in pixels."""
        pass

    @abstractmethod
    def height(self) -> float | None:
        """Native height of the image in pixels."""
        pass

    @abstractmethod
    def default_src(self) -> str:
        """URL of the fallback image."""
        pass

    def alt(self) -> str:
        return ""

    def sizes_attr(self) -> str | None:
        return None

    def src_sets(self) -> Sequence[SrcSet]:
        return ()

    def lqip(self) -> Mapping[str, Any]:
        return {}


@dataclass(frozen=True)
class ImageSourceData:
    """Immutable snapshot of everything the resolver reads from a source.

    Attributes:
        width: Native width in pixels, None when unknown
        height: Native height in pixels, None when unknown
        alt: Alternative text
        sizes_attr: Sizes attribute provided by the source, if any
        default_src: URL of the fallback image
        src_sets: Ordered source descriptors, copied into read-only mappings
        placeholder: Opaque placeholder payload fields
    """

    width: float | None = None
    height: float | None = None
    alt: str = ""
    sizes_attr: str | None = None
    default_src: str = ""
    src_sets: tuple[SrcSet, ...] = ()
    placeholder: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "src_sets", tuple(_frozen_src_set(s) for s in self.src_sets))
        object.__setattr__(self, "placeholder", MappingProxyType(_placeholder_fields(self.placeholder)))

    @classmethod
    def from_source(cls, source: ImageSource) -> ImageSourceData:
        """Read every accessor of an image source once.

        Args:
            source: Object implementing the ImageSource protocol

        Returns:
            ImageSourceData snapshot
        """
        return cls(
            width=source.width(),
            height=source.height(),
            alt=source.alt(),
            sizes_attr=source.sizes_attr(),
            default_src=source.default_src(),
            src_sets=tuple(source.src_sets()),
            placeholder=source.lqip(),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ImageSourceData:
        """Build source data from an already materialised mapping.

        Expected shape::

            width: 1200
            height: 800
            alt: "A harbour at dusk"
            sizes: null
            placeholder: {src: "data:image/gif;base64,..."}
            main:
              src: "/img/harbour.jpg"
              sources: [{url: "/img/harbour-600.webp", descriptor: "600w"}]

        Args:
            data: Mapping in the shape above; missing keys default to empty

        Returns:
            ImageSourceData snapshot
        """
        main = data.get("main") or {}
        return cls(
            width=data.get("width"),
            height=data.get("height"),
            alt=data.get("alt") or "",
            sizes_attr=data.get("sizes"),
            default_src=main.get("src") or "",
            src_sets=tuple(main.get("sources") or ()),
            placeholder=data.get("placeholder") or {},
        )


def _placeholder_fields(payload: Any) -> dict[str, Any]:
    """Normalise a placeholder payload into a dict of fields."""
    if payload is None:
        return {}
    if isinstance(payload, Mapping):
        return dict(payload)
    # A bare payload (data URI, color) becomes the placeholder source
    return {"src": payload}


def _frozen_src_set(src_set: Any) -> Any:
    """Read-only copy of a source descriptor; non-mapping descriptors are kept."""
    if isinstance(src_set, Mapping):
        return MappingProxyType(dict(src_set))
    return src_set
