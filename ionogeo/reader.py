"""
Text input file reading shared by the geom_dist, median_filter and
iri_profile inputs.
"""

from pathlib import Path

from ionogeo.errors import OpenFailed, ReadFailed


def read_lines(filepath: Path) -> list[str]:
    """
    Read a text file into a list of lines, newlines stripped.

    Parameters
    ----------
    filepath : Path
        Input file

    Returns
    -------
    list[str]
        File lines without line terminators

    Raises
    ------
    OpenFailed
        If the file cannot be opened
    ReadFailed
        If the file cannot be read or decoded as text
    """
    filepath = Path(filepath)
    try:
        f = open(filepath, "r", encoding="utf-8")
    except OSError as e:
        raise OpenFailed(f"Cannot open {filepath}: {e.strerror or e}") from e

    with f:
        try:
            return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailed(f"Cannot read {filepath}: {e}") from e
