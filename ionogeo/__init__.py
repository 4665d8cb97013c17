"""
ionogeo - great-circle coordinate conversion and ionospheric time series tools

Pipelines
---------
geom_dist : GIS coordinates (latitude, longitude) <-> radar coordinates
    (range, bearing) on a spherical Earth
median_filter : median filtering of foF2/hmF2 ionosonde series, plotted with
    gnuplot
iri_profile : plasma frequency profile of an IRI electron density run

Main Functions
--------------
gis_to_radar : Range and bearing between two geographic points
radar_to_gis : Destination from a start point, range and bearing
decode_coordinate : Parse "37N"-style tokens
encode_coordinate : Format degrees as "37N"-style tokens
median_filter : Sliding-window median smoothing
"""

__version__ = "1.0.0"

# Spherical geometry kernel
from ionogeo.spherical import (
    GeoPoint,
    RadarVector,
    gis_to_radar,
    radar_to_gis,
    haversine_distance,
    initial_bearing,
    destination_point,
    normalize_longitude,
)

# Coordinate tokens
from ionogeo.coord_codec import (
    decode_coordinate,
    encode_coordinate,
)

# Time series
from ionogeo.median_filter import (
    median_filter,
    filter_channels,
)
from ionogeo.parse_iono import (
    IonoSeries,
    DensityProfile,
    read_iono_series,
    read_density_profile,
)
from ionogeo.plasma import plasma_frequency

# Errors
from ionogeo.errors import (
    IonoGeoError,
    ParseError,
    MissingHemisphere,
    BadNumber,
    OutOfRange,
    FilterError,
    BadWindow,
    DataIOError,
    OpenFailed,
    ReadFailed,
    PlotterUnavailable,
)

# Configuration
from ionogeo.config import (
    EARTH_RADIUS,
    MEDIAN_WINDOW,
)

__all__ = [
    "GeoPoint",
    "RadarVector",
    "gis_to_radar",
    "radar_to_gis",
    "haversine_distance",
    "initial_bearing",
    "destination_point",
    "normalize_longitude",
    "decode_coordinate",
    "encode_coordinate",
    "median_filter",
    "filter_channels",
    "IonoSeries",
    "DensityProfile",
    "read_iono_series",
    "read_density_profile",
    "plasma_frequency",
    "IonoGeoError",
    "ParseError",
    "MissingHemisphere",
    "BadNumber",
    "OutOfRange",
    "FilterError",
    "BadWindow",
    "DataIOError",
    "OpenFailed",
    "ReadFailed",
    "PlotterUnavailable",
    "EARTH_RADIUS",
    "MEDIAN_WINDOW",
]
