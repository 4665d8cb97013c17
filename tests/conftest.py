"""
Pytest configuration and fixtures for ionogeo tests.
"""

import pytest
import numpy as np


def _iono_row(date, doy, time, index, fof2, hmf2):
    """One ionosonde export row with foF2 in c0 and hmF2 in c5."""
    channels = np.zeros(11)
    channels[0] = fof2
    channels[5] = hmf2
    values = " ".join(f"{value:.3f}" for value in channels)
    return f"{date} ({doy:03d}) {time} {index} {values}"


@pytest.fixture
def gis_input_file(tmp_path):
    """geom_dist -G input file."""
    path = tmp_path / "gis.txt"
    path.write_text(
        "Initial coordinates (latitude, longitude), Final coordinates (latitude, longitude)\n"
        "37N, 75W, 18N, 66W\n"
    )
    return path


@pytest.fixture
def radar_input_file(tmp_path):
    """geom_dist -R input file."""
    path = tmp_path / "radar.txt"
    path.write_text(
        "Initial coordinates (latitude, longitude), range (km), bearing (degrees)\n"
        "37N, 75W, 2288.66, 154.96\n"
    )
    return path


@pytest.fixture
def iono_lines():
    """Ionosonde export lines, deliberately out of time order."""
    rows = [
        _iono_row("2021-03-03", 62, "11:15:00", 3, 7.0, 300.0),
        _iono_row("2021-03-03", 62, "11:00:00", 1, 7.0, 280.0),
        _iono_row("2021-03-03", 62, "11:05:00", 2, 8.0, 900.0),
        _iono_row("2021-03-03", 62, "11:20:00", 4, 2.0, 310.0),
        _iono_row("2021-03-03", 62, "11:25:00", 5, 3.0, 305.0),
    ]
    return ["YYYY-MM-DD (DDD) HH:MM:SS IDX foF2 c1 c2 c3 c4 hmF2 c6 c7 c8 c9 c10", ""] + rows


@pytest.fixture
def iono_file(tmp_path, iono_lines):
    """Ionosonde export file."""
    path = tmp_path / "iono.txt"
    path.write_text("\n".join(iono_lines) + "\n")
    return path


@pytest.fixture
def profile_file(tmp_path):
    """IRI electron density profile file."""
    path = tmp_path / "profile.txt"
    path.write_text(
        "# Ne (m^-3)  height (km)\n"
        "1.0e10  100.0\n"
        "1.0e12  250.0\n"
        "\n"
        "4.0e11  400.0\n"
    )
    return path


@pytest.fixture
def rng():
    """Seeded random generator for property tests."""
    return np.random.default_rng(20210303)
