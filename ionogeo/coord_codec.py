"""
Coordinate token codec.

Translates between whole-degree tokens such as ``"37N"`` or ``"75W"`` and
signed decimal degrees. By convention south and west are negative.

Only whole degrees are supported; minutes/seconds notation is not.
"""

import math

from ionogeo.config import AXIS_HEMISPHERES, AXIS_LIMITS, HEMISPHERE_SIGN
from ionogeo.errors import BadNumber, MissingHemisphere, OutOfRange


def _axis_of(hemisphere: str) -> str:
    """Axis implied by a hemisphere letter."""
    return "lat" if hemisphere in AXIS_HEMISPHERES["lat"] else "lon"


def _check_axis(axis: str) -> None:
    if axis not in AXIS_HEMISPHERES:
        raise ValueError(f"Unknown axis: {axis!r} (expected 'lat' or 'lon')")


def decode_coordinate(token: str, axis: str | None = None) -> float:
    """
    Parse a coordinate token into signed decimal degrees.

    Parameters
    ----------
    token : str
        Whole degrees followed by a hemisphere letter, e.g. ``"37N"``
    axis : str, optional
        ``"lat"`` or ``"lon"``. When given, the hemisphere letter must belong
        to this axis. When omitted, the letter decides the axis.

    Returns
    -------
    float
        Degrees, negative for S and W

    Raises
    ------
    MissingHemisphere
        If the token does not end in N, S, E or W (or in a letter of `axis`)
    BadNumber
        If the degrees are not a non-negative integer
    OutOfRange
        If |lat| > 90 or |lon| > 180

    Examples
    --------
    >>> decode_coordinate("37N")
    37.0
    >>> decode_coordinate("75W", axis="lon")
    -75.0
    """
    if axis is not None:
        _check_axis(axis)

    text = token.strip()
    hemisphere = text[-1:]
    if hemisphere not in HEMISPHERE_SIGN:
        raise MissingHemisphere(
            f"Coordinate {token!r} does not end in N, S, E or W", token
        )
    if axis is not None and hemisphere not in AXIS_HEMISPHERES[axis]:
        expected = " or ".join(AXIS_HEMISPHERES[axis])
        raise MissingHemisphere(
            f"Coordinate {token!r} is not a {axis} token (expected {expected})",
            token,
        )
    axis = _axis_of(hemisphere)

    digits = text[:-1]
    if not (digits.isascii() and digits.isdigit()):
        raise BadNumber(
            f"Coordinate {token!r} must be whole degrees before the hemisphere",
            token,
        )

    degrees = float(int(digits))
    if degrees > AXIS_LIMITS[axis]:
        raise OutOfRange(
            f"Coordinate {token!r} exceeds {AXIS_LIMITS[axis]} degrees {axis}",
            token,
        )
    return HEMISPHERE_SIGN[hemisphere] * degrees


def round_half_away(value: float) -> float:
    """
    Round to the nearest whole number, halves away from zero.

    Matches C ``round()``; the sign of zero is kept (-0.4 -> -0.0).
    """
    whole = math.floor(abs(value))
    if abs(value) - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def encode_coordinate(value: float, axis: str) -> str:
    """
    Format signed decimal degrees as a whole-degree token.

    Parameters
    ----------
    value : float
        Degrees; negative for south or west
    axis : str
        ``"lat"`` or ``"lon"``

    Returns
    -------
    str
        Rounded magnitude plus hemisphere letter, e.g. ``"18N"``, ``"66W"``

    Notes
    -----
    Values that round to zero are non-negative: ``encode(-0.4, "lat")``
    gives ``"0N"``.
    """
    _check_axis(axis)
    degrees = round_half_away(float(value))
    positive, negative = AXIS_HEMISPHERES[axis]
    hemisphere = negative if degrees < 0 else positive
    return f"{abs(degrees):.0f}{hemisphere}"
