"""
Ionospheric text file parsing.

Two formats are handled:

- Ionosonde exports for median filtering: a header row and a blank row,
  then whitespace separated rows of

      date  symbol  time  index  c0 c1 ... c10

  where c0 is foF2 and c5 is hmF2.
- Electron density profiles from an IRI model run: two whitespace separated
  columns, electron density (m^-3) and height (km). Blank lines and lines
  starting with '#' are ignored.
"""

from pathlib import Path
from typing import NamedTuple

import numpy as np

from ionogeo.config import IONO_HEADER_ROWS, IONO_LEADING_COLUMNS, NUM_CHANNELS
from ionogeo.errors import BadNumber, ReadFailed
from ionogeo.reader import read_lines


class IonoSeries(NamedTuple):
    """Ionosonde time series, sorted by timestamp."""

    timestamps: list[str]
    """Sort keys, "<date>.<time>" """
    symbols: list[str]
    """Per-row symbol token, e.g. day of year "(062)" """
    indices: np.ndarray
    """Integer index column"""
    channels: np.ndarray
    """Channel values, shape (n_samples, NUM_CHANNELS)"""


class DensityProfile(NamedTuple):
    """Electron density height profile."""

    electron_density: np.ndarray
    """Electron density in m^-3"""
    height: np.ndarray
    """Height in km"""


def _parse_number(token: str, line_number: int, cast=float):
    try:
        return cast(token)
    except ValueError as e:
        raise BadNumber(
            f"Line {line_number}: {token!r} is not a valid number", token
        ) from e


def _parse_iono_row(line: str, line_number: int) -> tuple[str, str, int, list[float]]:
    """Split one ionosonde row into (timestamp, symbol, index, channels)."""
    parts = line.split()
    n_required = IONO_LEADING_COLUMNS + NUM_CHANNELS
    if len(parts) < n_required:
        raise ReadFailed(
            f"Line {line_number}: expected {n_required} columns, got {len(parts)}"
        )
    date, symbol, time = parts[:3]
    index = _parse_number(parts[3], line_number, cast=int)
    values = [
        _parse_number(token, line_number)
        for token in parts[IONO_LEADING_COLUMNS:n_required]
    ]
    return f"{date}.{time}", symbol, index, values


def parse_iono_lines(lines: list[str]) -> IonoSeries:
    """
    Parse the lines of an ionosonde export.

    Parameters
    ----------
    lines : list[str]
        All lines of the file, including header and blank row

    Returns
    -------
    IonoSeries
        Rows sorted by "<date>.<time>" (stable for equal timestamps)

    Raises
    ------
    ReadFailed
        If a row has too few columns or there are no data rows
    BadNumber
        If the index or a channel value is not a number

    Notes
    -----
    Date and time are written largest unit first, so sorting the combined
    string sorts chronologically.
    """
    rows = [
        _parse_iono_row(line, line_number)
        for line_number, line in enumerate(lines, start=1)
        if line_number > IONO_HEADER_ROWS and line.strip()
    ]
    if not rows:
        raise ReadFailed("No data rows after the header")

    rows.sort(key=lambda row: row[0])
    timestamps, symbols, indices, values = zip(*rows)
    return IonoSeries(
        timestamps=list(timestamps),
        symbols=list(symbols),
        indices=np.array(indices, dtype=int),
        channels=np.array(values, dtype=float),
    )


def read_iono_series(filepath: Path) -> IonoSeries:
    """
    Read an ionosonde export file.

    Parameters
    ----------
    filepath : Path
        Whitespace separated export (header, blank row, data rows)

    Returns
    -------
    IonoSeries
        Sorted time series
    """
    return parse_iono_lines(read_lines(filepath))


def parse_profile_lines(lines: list[str]) -> DensityProfile:
    """
    Parse the lines of an electron density profile.

    Parameters
    ----------
    lines : list[str]
        "<electron density> <height>" rows; '#' comments and blanks ignored

    Returns
    -------
    DensityProfile
        Profile in file order

    Raises
    ------
    ReadFailed
        If a row has fewer than two columns or there are no rows
    BadNumber
        If a value is not a number
    """
    density = []
    height = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        parts = text.split()
        if len(parts) < 2:
            raise ReadFailed(f"Line {line_number}: expected density and height")
        density.append(_parse_number(parts[0], line_number))
        height.append(_parse_number(parts[1], line_number))

    if not density:
        raise ReadFailed("Profile has no data rows")
    return DensityProfile(
        electron_density=np.array(density), height=np.array(height)
    )


def read_density_profile(filepath: Path) -> DensityProfile:
    """Read an electron density profile file."""
    return parse_profile_lines(read_lines(filepath))
