"""Image source backed by an image file on disk."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import ImageSourceError
from .base import BaseImageSource, SrcSet

logger = logging.getLogger(__name__)

# Edge length of the thumbnail sampled for the placeholder color
SAMPLE_SIZE = 16

EXIF_ORIENTATION = 0x0112


class LocalImageSource(BaseImageSource):
    """Describes a local image file.

    Dimensions are read from the file header and reported as displayed,
    with EXIF orientation applied. The placeholder payload is a
    flat color, the mean of a small thumbnail of the image. URLs are not
    derived from the path: the public URL and any source set entries are
    supplied by the caller.

    Example:
        source = LocalImageSource(
            "media/harbour.jpg",
            url="/media/harbour.jpg",
            alt="A harbour at dusk",
            src_sets=[{"url": "/media/harbour-600.webp", "descriptor": "600w"}],
        )
    """

    def __init__(
        self,
        path: str | Path,
        url: str,
        alt: str = "",
        sizes: str | None = None,
        src_sets: Sequence[SrcSet] = (),
    ) -> None:
        self.path = Path(path)
        self.url = url
        self._alt = alt
        self._sizes = sizes
        self._src_sets = tuple(src_sets)
        self._size: tuple[int, int] | None = None
        self._color: str | None = None

    def _open(self) -> Image.Image:
        try:
            return Image.open(self.path)
        except (OSError, UnidentifiedImageError) as e:
            raise ImageSourceError(f"Cannot read image '{self.path}': {e}") from e

    def _read_size(self) -> tuple[int, int]:
        if self._size is None:
            with self._open() as img:
                try:
                    width, height = img.size
                    orientation = img.getexif().get(EXIF_ORIENTATION)
                except OSError as e:
                    raise ImageSourceError(f"Cannot read image '{self.path}': {e}") from e
            # Orientations 5-8 rotate by 90 degrees when displayed
            if orientation in (5, 6, 7, 8):
                width, height = height, width
            self._size = (width, height)
            logger.debug("Read %s: %dx%d (orientation %s)", self.path, width, height, orientation)
        return self._size

    def width(self) -> int:
        return self._read_size()[0]

    def height(self) -> int:
        return self._read_size()[1]

    def alt(self) -> str:
        return self._alt

    def sizes_attr(self) -> str | None:
        return self._sizes

    def default_src(self) -> str:
        return self.url

    def src_sets(self) -> tuple[SrcSet, ...]:
        return self._src_sets

    def dominant_color(self) -> str:
        """Mean color of the image as a ``#rrggbb`` hex string.

        Transparent areas are composited onto white before averaging.
        """
        if self._color is None:
            with self._open() as img:
                try:
                    img.draft("RGB", (SAMPLE_SIZE, SAMPLE_SIZE))
                    img.thumbnail((SAMPLE_SIZE, SAMPLE_SIZE))
                    rgba = img.convert("RGBA")
                except OSError as e:
                    raise ImageSourceError(f"Cannot decode image '{self.path}': {e}") from e
            background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
            sample = Image.alpha_composite(background, rgba).convert("RGB")
            pixels = np.asarray(sample, dtype=np.float64).reshape(-1, 3)
            mean = np.clip(np.rint(pixels.mean(axis=0)), 0, 255).astype(np.uint8)
            self._color = "#{:02x}{:02x}{:02x}".format(*mean.tolist())
        return self._color

    def lqip(self) -> Mapping[str, Any]:
        return {"color": self.dominant_color()}
