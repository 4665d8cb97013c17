"""
Human readable geom_dist reports.

Range and bearing are shown with 2 decimals; geographic coordinates in whole
degrees. Single precision is only a display concern here, all arithmetic is
double precision.
"""

from ionogeo.coord_codec import encode_coordinate
from ionogeo.spherical import GeoPoint, RadarVector


def format_gis_report(start: GeoPoint, end: GeoPoint, radar: RadarVector) -> str:
    """
    Report for a GIS to radar conversion.

    Names both points in whole signed degrees, then the range and bearing:

        is              2288.66 kilometers
        with a          bearing of 154.96 degrees.
    """
    lines = [
        "",
        "The range in decimal coordinates between the",
        f"\t\tstarting coordinates {start.lat:3.0f} latitude and {start.lon:3.0f} longitude",
        f"and \t\tfinal coordinates {end.lat:3.0f} latitude and {end.lon:3.0f} longitude",
        f"is \t\t{radar.range_km:.2f} kilometers",
        f"with a \t\tbearing of {radar.bearing_deg:.2f} degrees.",
        "",
    ]
    return "\n".join(lines)


def format_radar_report(start: GeoPoint, radar: RadarVector, end: GeoPoint) -> str:
    """
    Report for a radar to GIS conversion.

    The final coordinates are rounded to whole degrees with hemisphere
    letters, e.g. "18N and 66W."
    """
    lines = [
        "",
        f"From starting GIS coordinates of \t{start.lat:3.0f} latitude and {start.lon:3.0f} longitude",
        f"with a range of \t\t\t{radar.range_km:.2f} kilometers",
        f"and a bearing of \t\t\t{radar.bearing_deg:.2f} degrees.",
        "The final coordinates are \t\t"
        f"{encode_coordinate(end.lat, 'lat')} and {encode_coordinate(end.lon, 'lon')}.",
        "",
    ]
    return "\n".join(lines)
