"""Formatting of numbers and values for CSS declarations."""

CSSValue = str | int | float


def format_css_number(value: int | float) -> str:
    """Format a number the way it should appear in a CSS declaration.

    Integral values print without a fractional part so that a derived
    height of ``200.0`` renders as ``200px`` rather than ``200.0px``.

    Args:
        value: Number to format

    Returns:
        String representation with at most 14 significant digits
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return format(value, ".14g")


def format_css_value(value: CSSValue) -> str:
    """Format a style value. Non-numeric values are passed through verbatim."""
    if isinstance(value, (int, float)):
        return format_css_number(value)
    return str(value)
