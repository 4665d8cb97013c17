"""
Electron density to plasma frequency conversion.

The IRI model reports electron density Ne per height; ionosondes measure
plasma frequency. The two are related by

    f_p = sqrt(Ne ⋅ e² / (4π² ε0 m_e)) ≈ 8.98 ⋅ sqrt(Ne)  [Hz, Ne in m^-3]
"""

import numpy as np
import astropy.units as u

from ionogeo.config import PLASMA_COEFFICIENT
from ionogeo.errors import OutOfRange


def plasma_frequency(electron_density) -> np.ndarray:
    """
    Plasma frequency for a given electron density.

    Parameters
    ----------
    electron_density : float, np.ndarray or Quantity
        Electron density; plain numbers are taken as m^-3

    Returns
    -------
    np.ndarray
        Plasma frequency in MHz

    Raises
    ------
    OutOfRange
        If any density is negative

    Examples
    --------
    >>> round(float(plasma_frequency(1e12)), 2)
    8.98
    """
    density = u.Quantity(electron_density, u.m**-3)
    if np.any(density.value < 0):
        raise OutOfRange("Electron density must be non-negative")
    return np.sqrt(PLASMA_COEFFICIENT * density).to_value(u.MHz)
