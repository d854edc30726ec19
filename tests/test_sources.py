"""Tests for image sources and source data snapshots."""

import numpy as np
import pytest
from PIL import Image

from respimage import ImageSource, ImageSourceData, ImageSourceError, LocalImageSource, resolve


@pytest.fixture
def image_path(tmp_path):
    """A 120x80 solid color PNG."""
    path = tmp_path / "solid.png"
    Image.new("RGB", (120, 80), (200, 100, 50)).save(path)
    return path


def test_local_source_reads_dimensions(image_path):
    source = LocalImageSource(image_path, url="/media/solid.png", alt="Solid")
    assert isinstance(source, ImageSource)
    assert source.width() == 120
    assert source.height() == 80
    assert source.alt() == "Solid"
    assert source.default_src() == "/media/solid.png"
    assert source.sizes_attr() is None
    assert source.src_sets() == ()


def test_local_source_placeholder_color(image_path):
    source = LocalImageSource(image_path, url="/media/solid.png")
    assert source.lqip() == {"color": "#c86432"}


def test_local_source_mean_color(tmp_path):
    """The placeholder color is the mean of the image."""
    pixels = np.zeros((10, 10, 3), dtype=np.uint8)
    pixels[:, 5:] = 255
    path = tmp_path / "split.png"
    Image.fromarray(pixels).save(path)

    color = LocalImageSource(path, url="/split.png").dominant_color()
    assert color in ("#7f7f7f", "#808080")


def test_local_source_passes_src_sets_through(image_path):
    src_sets = [{"url": "/solid-60.webp", "descriptor": "60w"}]
    source = LocalImageSource(image_path, url="/solid.png", sizes="50vw", src_sets=src_sets)
    assert source.src_sets() == tuple(src_sets)
    assert source.sizes_attr() == "50vw"


def test_local_source_missing_file(tmp_path):
    source = LocalImageSource(tmp_path / "missing.jpg", url="/missing.jpg")
    with pytest.raises(ImageSourceError):
        source.width()


def test_local_source_not_an_image(tmp_path):
    path = tmp_path / "notes.jpg"
    path.write_text("not an image")
    with pytest.raises(ImageSourceError):
        LocalImageSource(path, url="/notes.jpg").height()


def test_local_source_resolves(image_path):
    view = resolve(LocalImageSource(image_path, url="/solid.png"), {"layout": "fixed", "width": 60})
    assert (view.width, view.height) == (60, 40)
    assert view.placeholder["color"] == "#c86432"
    assert view.main["src"] == "/solid.png"


def test_snapshot_normalises_payload():
    """Bare placeholder payloads become the placeholder source."""
    data = ImageSourceData(width=10, height=10, placeholder="data:image/gif;base64,R0lG")
    assert dict(data.placeholder) == {"src": "data:image/gif;base64,R0lG"}
    assert dict(ImageSourceData(placeholder=None).placeholder) == {}


def test_snapshot_from_sparse_mapping():
    data = ImageSourceData.from_mapping({"width": 10})
    assert data.width == 10
    assert data.height is None
    assert data.alt == ""
    assert data.default_src == ""
    assert data.src_sets == ()


@pytest.fixture
def truncated_jpeg(tmp_path):
    """A 400x300 noisy JPEG with the second half of its bytes cut off."""
    pixels = np.random.default_rng(0).integers(0, 256, size=(300, 400, 3), dtype=np.uint8)
    path = tmp_path / "cut.jpg"
    Image.fromarray(pixels).save(path, quality=90)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])
    return path


def test_local_source_truncated_file(truncated_jpeg):
    """A damaged file reports its header size but fails to decode cleanly."""
    source = LocalImageSource(truncated_jpeg, url="/cut.jpg")
    assert source.width() == 400
    with pytest.raises(ImageSourceError):
        source.lqip()


@pytest.mark.parametrize("orientation,expected", [(1, (1200, 800)), (3, (1200, 800)), (6, (800, 1200)), (8, (800, 1200))])
def test_local_source_applies_exif_orientation(tmp_path, orientation, expected):
    """Dimensions are reported as the image is displayed."""
    exif = Image.Exif()
    exif[0x0112] = orientation
    path = tmp_path / "phone.jpg"
    Image.new("RGB", (1200, 800), (90, 90, 90)).save(path, exif=exif)

    source = LocalImageSource(path, url="/phone.jpg")
    assert (source.width(), source.height()) == expected


def test_rotated_image_resolves_displayed_aspect_ratio(tmp_path):
    exif = Image.Exif()
    exif[0x0112] = 6
    path = tmp_path / "phone.jpg"
    Image.new("RGB", (1200, 800), (90, 90, 90)).save(path, exif=exif)

    view = resolve(LocalImageSource(path, url="/phone.jpg"), {"layout": "fixed", "width": 300})
    assert view.height == 450
    assert "width:300px;height:450px" in view.wrapper.style


def test_local_source_transparent_pixels_ignored(tmp_path):
    """Fully transparent areas count as white, not as their hidden color."""
    pixels = np.zeros((10, 10, 4), dtype=np.uint8)
    pixels[:, :, :3] = (255, 0, 0)
    pixels[:, :, 3] = 255
    pixels[:, 5:] = (0, 0, 0, 0)
    path = tmp_path / "half_clear.png"
    Image.fromarray(pixels).save(path)

    color = LocalImageSource(path, url="/half_clear.png").dominant_color()
    assert color in ("#ff7f7f", "#ff8080")


def test_snapshot_copies_src_sets():
    """Changing a descriptor after the snapshot does not leak into it."""
    descriptor = {"url": "/a-600.webp", "descriptor": "600w"}
    data = ImageSourceData(width=10, height=10, src_sets=[descriptor])
    descriptor["url"] = "/changed.webp"
    assert data.src_sets[0]["url"] == "/a-600.webp"
    with pytest.raises(TypeError):
        data.src_sets[0]["url"] = "/other.webp"
