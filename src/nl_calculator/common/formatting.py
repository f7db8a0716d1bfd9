"""Render outcomes for display."""
import math

# Maximum number of decimals shown for a result
DEFAULT_PRECISION: int = 10


def format_result(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a result for display.

    The value is rounded to `precision` decimals, then trailing zeros and a
    trailing decimal point are stripped.

    Examples:
        - 42.0 -> "42"
        - 0.1 + 0.2 -> "0.3"
        - 2 / 3 -> "0.6666666667"

    :param float value: Unrounded result
    :param int precision: Maximum number of decimals

    :return: Display string
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    # Always fixed notation: 1e21 and 1e-7 are written out in full, unlike the
    # exponent form ("1e+21", "1e-7") of the original web front end
    text: str = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Rounding may leave "-0" for tiny negative values
    if text == "-0":
        text = "0"
    return text
