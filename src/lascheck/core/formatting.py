import math
from typing import Optional


def format_double(value: float, scale: Optional[float] = None) -> str:
    """
    Render a coordinate for a diagnostic message.

    Without a scale: fixed 15 decimals with trailing zeros (and a dangling
    decimal point) removed, so 2.000 becomes "2".

    With a scale: as many decimals as the scale resolves (0.01 -> 2,
    0.001 -> 3, 1.0 -> integer). Scales finer than 1e-8 fall back to the
    trimmed form. Non-finite values render as "inf", "-inf" or "nan".
    """
    if not math.isfinite(value):
        return str(value)
    if scale is None:
        return _trimmed(value)
    decimals = 0
    while scale < 1.0 and decimals <= 8:
        scale *= 10.0
        decimals += 1
    if decimals == 0:
        return str(int(value))
    if decimals <= 8:
        return f"{value:.{decimals}f}"
    return _trimmed(value)


def _trimmed(value: float) -> str:
    text = f"{value:.15f}".rstrip("0")
    if text.endswith("."):
        text = text[:-1]
    return text
