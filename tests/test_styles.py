"""Tests for style composition and serialization."""

import pytest

from respimage.styles import (
    IMG_BASE_STYLE,
    WRAPPER_CLASS,
    WRAPPER_CONSTRAINED_CLASS,
    StyleComposer,
    StyleMap,
    serialize_style,
)
from respimage.units import format_css_number

IMG_BASE = (
    "bottom:0;height:100%;left:0;margin:0;max-width:none;padding:0;"
    "position:absolute;right:0;top:0;width:100%;object-fit:cover;"
    "object-position:center center"
)


def test_serialize_keeps_insertion_order():
    """Declarations are joined in insertion order without a trailing separator."""
    style = StyleMap()
    style["z-index"] = 2
    style["color"] = "red"
    style["background"] = "none"
    assert serialize_style(style) == "z-index:2;color:red;background:none"


def test_serialize_empty_map():
    assert serialize_style({}) == ""


def test_serialize_passes_values_through():
    """Unknown properties and malformed values are not validated."""
    assert serialize_style({"not-a-prop": "??;", "width": 12.25}) == "not-a-prop:??;;width:12.25"


def test_merge_overwrites_in_place():
    """Later maps win for duplicate keys; the first occurrence fixes the order."""
    merged = StyleMap.merged({"a": 1, "b": 2}, {"c": 3, "a": 9})
    assert list(merged) == ["a", "b", "c"]
    assert merged.serialize() == "a:9;b:2;c:3"


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0"),
        (300, "300"),
        (200.0, "200"),
        (12.5, "12.5"),
        (1 / 3, "0.33333333333333"),
        (True, "1"),
    ],
)
def test_format_css_number(value, expected):
    assert format_css_number(value) == expected


@pytest.mark.parametrize(
    "layout,expected",
    [
        ("fullWidth", "position:relative;overflow:hidden;background-color:transparent"),
        ("fixed", "position:relative;overflow:hidden;width:300px;height:200px;background-color:transparent"),
        ("constrained", "position:relative;overflow:hidden;display:inline-block;background-color:transparent"),
        ("other", "position:relative;overflow:hidden;background-color:transparent"),
    ],
)
def test_wrapper_style(layout, expected):
    """Wrapper style depends on the layout."""
    composer = StyleComposer(layout, 300, 200)
    assert composer.wrapper_style().serialize() == expected


def test_wrapper_style_without_background_color():
    """A falsy background color is not injected."""
    composer = StyleComposer("fullWidth", 300, 200, background_color="")
    assert composer.wrapper_style().serialize() == "position:relative;overflow:hidden"


@pytest.mark.parametrize(
    "layout,wrapper_class,expected",
    [
        ("fullWidth", None, WRAPPER_CLASS),
        ("fixed", None, WRAPPER_CLASS),
        ("constrained", None, f"{WRAPPER_CLASS} {WRAPPER_CONSTRAINED_CLASS}"),
        ("fullWidth", "hero", f"{WRAPPER_CLASS} hero"),
        ("constrained", "hero", f"{WRAPPER_CLASS} {WRAPPER_CONSTRAINED_CLASS} hero"),
    ],
)
def test_wrapper_classes(layout, wrapper_class, expected):
    composer = StyleComposer(layout, 300, 200)
    assert composer.wrapper_classes(wrapper_class) == expected


@pytest.mark.parametrize("layout", ["fullWidth", "constrained", "other"])
def test_placeholder_style_fills_container(layout):
    """Non-fixed placeholders are absolutely positioned over the wrapper."""
    composer = StyleComposer(layout, 300, 200)
    assert composer.placeholder_style().serialize() == (
        f"{IMG_BASE};background-color:transparent;opacity:1;transition:opacity 500ms linear"
    )


def test_placeholder_style_fixed():
    """Fixed placeholders take explicit pixel dimensions."""
    composer = StyleComposer("fixed", 300, 200, background_color="red")
    assert composer.placeholder_style().serialize() == (
        "bottom:0;height:200px;left:0;margin:0;max-width:none;padding:0;"
        "position:relative;right:0;top:0;width:300px;object-fit:cover;"
        "object-position:center center;background-color:red;"
        "opacity:1;transition:opacity 500ms linear"
    )


def test_placeholder_ignores_fill_overrides():
    """Caller overrides cannot stop the placeholder from filling its container."""
    composer = StyleComposer(
        "fullWidth", 300, 200,
        img_style={"height": "50%", "position": "static", "object-fit": "contain"},
    )
    style = composer.placeholder_style()
    assert style["height"] == "100%"
    assert style["position"] == "absolute"
    assert style["object-fit"] == "contain"


def test_main_style_lazy():
    """Lazy main images start transparent."""
    composer = StyleComposer("fullWidth", 300, 200)
    assert composer.main_style().serialize() == (
        "transition:opacity 250ms linear;transform:translateZ(0px);will-change:opacity;"
        f"{IMG_BASE};background-color:transparent;opacity:0"
    )


@pytest.mark.parametrize("loading,opacity", [("lazy", 0), ("eager", 1), ("auto", 1)])
def test_main_style_opacity(loading, opacity):
    composer = StyleComposer("fixed", 300, 200, loading=loading)
    assert composer.main_style()["opacity"] == opacity


def test_main_style_single_transition():
    """Only the short transition survives in the main style."""
    serialized = StyleComposer("fullWidth", 300, 200).main_style().serialize()
    assert serialized.count("transition:") == 1
    assert "transition:opacity 250ms linear" in serialized


def test_main_style_caller_overrides_win():
    """Caller img_style beats the defaults, in the defaults' position."""
    composer = StyleComposer(
        "fullWidth", 300, 200,
        img_style={"object-fit": "contain", "transition": "none", "filter": "grayscale(1)"},
    )
    style = composer.main_style()
    assert style["object-fit"] == "contain"
    assert style["transition"] == "none"
    assert list(style)[0] == "transition"
    assert list(style)[-3:] == ["filter", "background-color", "opacity"]


def test_composer_does_not_mutate_defaults():
    composer = StyleComposer("fixed", 300, 200, img_style={"top": "5px"})
    composer.placeholder_style()
    composer.main_style()
    assert IMG_BASE_STYLE["top"] == 0
    assert IMG_BASE_STYLE["height"] == "100%"
