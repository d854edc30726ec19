"""Ordered CSS style maps and their serialization."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..units import CSSValue, format_css_value


class StyleMap(dict[str, CSSValue]):
    """Mapping of CSS property name to value that keeps insertion order.

    Assigning to an existing property replaces its value but keeps its
    position, so merges behave like an ordered associative merge: later
    maps win for duplicate keys while the first occurrence fixes the order.
    """

    @classmethod
    def merged(cls, *maps: Mapping[str, CSSValue] | Iterable[tuple[str, CSSValue]]) -> StyleMap:
        """Merge style maps left to right.

        Args:
            *maps: Mappings (or key/value pairs) in increasing precedence

        Returns:
            New StyleMap holding the merged declarations
        """
        style = cls()
        for declarations in maps:
            style.update(declarations)
        return style

    def serialize(self) -> str:
        """Serialize this map with :func:`serialize_style`."""
        return serialize_style(self)


def serialize_style(style: Mapping[str, CSSValue]) -> str:
    """Serialize a style map into an inline CSS declaration string.

    Declarations are emitted in the map's iteration order and joined with
    ``;`` without a trailing separator. Properties and values are not
    validated.

    Args:
        style: Ordered mapping of CSS property to value

    Returns:
        String such as ``"position:relative;overflow:hidden"``
    """
    return ";".join(f"{prop}:{format_css_value(value)}" for prop, value in style.items())
