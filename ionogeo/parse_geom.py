"""
Input file parsing for geom_dist.

The input file has two lines, a free-form header and one data line of four
fields separated by ", ":

    GIS to radar (-G):   lat_start, lon_start, lat_end, lon_end
                         e.g. 37N, 75W, 18N, 66W
    radar to GIS (-R):   lat_start, lon_start, range_km, bearing_deg
                         e.g. 37N, 75W, 2288.66, 154.96

The starting point is always in GIS format.
"""

import math
from pathlib import Path
from typing import NamedTuple

from ionogeo.config import FIELD_DELIMITER, GEOM_FIELDS
from ionogeo.coord_codec import decode_coordinate
from ionogeo.errors import BadNumber, OutOfRange, ReadFailed
from ionogeo.reader import read_lines
from ionogeo.spherical import GeoPoint, RadarVector

GIS_MODE = "gis"
RADAR_MODE = "radar"


class GeoRequest(NamedTuple):
    """One geom_dist conversion request."""

    mode: str
    """GIS_MODE (points to range/bearing) or RADAR_MODE (range/bearing to point)"""
    start: GeoPoint
    """Starting coordinates in degrees"""
    end: GeoPoint | None
    """Destination coordinates (GIS_MODE only)"""
    radar: RadarVector | None
    """Range and bearing (RADAR_MODE only)"""


def _parse_float(token: str, name: str) -> float:
    """Parse a finite decimal number."""
    try:
        value = float(token)
    except ValueError as e:
        raise BadNumber(f"{name} {token!r} is not a number", token) from e
    if not math.isfinite(value):
        raise BadNumber(f"{name} {token!r} is not finite", token)
    return value


def _parse_start(fields: list[str]) -> GeoPoint:
    return GeoPoint(
        lat=decode_coordinate(fields[0], axis="lat"),
        lon=decode_coordinate(fields[1], axis="lon"),
    )


def parse_gis_fields(fields: list[str]) -> GeoRequest:
    """
    Build a GIS to radar request from the four data fields.

    Parameters
    ----------
    fields : list[str]
        lat_start, lon_start, lat_end, lon_end coordinate tokens

    Returns
    -------
    GeoRequest
        Request with `start` and `end` set
    """
    return GeoRequest(
        mode=GIS_MODE,
        start=_parse_start(fields),
        end=GeoPoint(
            lat=decode_coordinate(fields[2], axis="lat"),
            lon=decode_coordinate(fields[3], axis="lon"),
        ),
        radar=None,
    )


def parse_radar_fields(fields: list[str]) -> GeoRequest:
    """
    Build a radar to GIS request from the four data fields.

    Parameters
    ----------
    fields : list[str]
        lat_start, lon_start coordinate tokens, then range (km) and
        bearing (degrees) as decimal numbers

    Returns
    -------
    GeoRequest
        Request with `start` and `radar` set; the bearing is reduced to
        [0, 360)

    Raises
    ------
    BadNumber
        If range or bearing is not a finite number
    OutOfRange
        If the range is negative
    """
    range_km = _parse_float(fields[2], "Range")
    if range_km < 0:
        raise OutOfRange(f"Range {fields[2]!r} must be non-negative", fields[2])
    bearing = _parse_float(fields[3], "Bearing") % 360.0
    # tiny negative bearings round up to exactly 360
    if bearing >= 360.0:
        bearing = 0.0

    return GeoRequest(
        mode=RADAR_MODE,
        start=_parse_start(fields),
        end=None,
        radar=RadarVector(range_km=range_km, bearing_deg=bearing),
    )


def split_data_line(lines: list[str]) -> list[str]:
    """
    Discard the header and split the data line into fields.

    Parameters
    ----------
    lines : list[str]
        Lines of the input file

    Returns
    -------
    list[str]
        The stripped fields of the first non-blank line after the header

    Raises
    ------
    ReadFailed
        If there is no data line or it does not have four fields
    """
    data_lines = [line for line in lines[1:] if line.strip()]
    if not data_lines:
        raise ReadFailed("Input file has no data line after the header")

    fields = [field.strip() for field in data_lines[0].split(FIELD_DELIMITER)]
    if len(fields) != GEOM_FIELDS:
        raise ReadFailed(
            f"Expected {GEOM_FIELDS} fields separated by {FIELD_DELIMITER!r}, "
            f"got {len(fields)}: {data_lines[0]!r}"
        )
    return fields


def read_geom_request(filepath: Path, mode: str) -> GeoRequest:
    """
    Read a geom_dist input file.

    Parameters
    ----------
    filepath : Path
        Input file (header line + data line)
    mode : str
        GIS_MODE or RADAR_MODE

    Returns
    -------
    GeoRequest
        Parsed request

    Examples
    --------
    >>> request = read_geom_request(Path("gis.txt"), GIS_MODE)
    >>> print(request.start, request.end)
    GeoPoint(lat=37.0, lon=-75.0) GeoPoint(lat=18.0, lon=-66.0)
    """
    fields = split_data_line(read_lines(filepath))
    if mode == GIS_MODE:
        return parse_gis_fields(fields)
    if mode == RADAR_MODE:
        return parse_radar_fields(fields)
    raise ValueError(f"Unknown mode: {mode!r}")
