"""
Error taxonomy for ionogeo.

The geometry kernel is total and never raises. Everything below is raised at
the boundary (codec, file readers, plotter) and surfaced by the command-line
entry points.
"""


class IonoGeoError(Exception):
    """Base class of every error raised by ionogeo."""


# ============================================================================
# Parse Errors
# ============================================================================


class ParseError(IonoGeoError, ValueError):
    """A text token could not be turned into a value."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class MissingHemisphere(ParseError):
    """Token does not end in the expected hemisphere letter."""


class BadNumber(ParseError):
    """Token is not a valid number."""


class OutOfRange(ParseError):
    """Value is outside the range allowed for its axis."""


# ============================================================================
# Filter Errors
# ============================================================================


class FilterError(IonoGeoError, ValueError):
    """Invalid median filter configuration."""


class BadWindow(FilterError):
    """Window width is even, smaller than 1, or longer than the data."""


# ============================================================================
# I/O Errors
# ============================================================================


class DataIOError(IonoGeoError, OSError):
    """Input file or plotter failure."""


class OpenFailed(DataIOError):
    """Input file could not be opened."""


class ReadFailed(DataIOError):
    """Input file could not be read or has an unexpected structure."""


class PlotterUnavailable(DataIOError):
    """External plotting program could not be started."""
