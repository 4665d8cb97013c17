"""
One-dimensional median filtering of ionospheric time series.

Each interior sample is replaced by the median of its window; samples closer
than half a window to either end are copied through unchanged.

Based on: https://en.wikipedia.org/wiki/Median_filter
"""

import numpy as np
from scipy.signal import medfilt

from ionogeo.config import FILTER_CHANNELS, MEDIAN_WINDOW, channel_name
from ionogeo.errors import BadWindow


def _check_window(window: int, n_samples: int) -> None:
    if window < 1 or window % 2 == 0:
        raise BadWindow(f"Median window must be odd and >= 1, got {window}")
    if window > n_samples:
        raise BadWindow(
            f"Median window {window} is longer than the data ({n_samples} samples)"
        )


def median_filter(data, window: int = MEDIAN_WINDOW) -> np.ndarray:
    """
    Apply a sliding-window median filter.

    Parameters
    ----------
    data : array_like
        1-D sequence of samples
    window : int, optional
        Odd window width, by default 3

    Returns
    -------
    np.ndarray
        Filtered samples, same length as `data`

    Raises
    ------
    BadWindow
        If `window` is even, smaller than 1 or longer than `data`

    Notes
    -----
    With e = window // 2, y[i] = median(x[i-e .. i+e]) for e <= i < n-e and
    y[i] = x[i] elsewhere. scipy's medfilt zero-pads the edges; the padding
    only reaches the boundary region, which is overwritten with the input.

    Examples
    --------
    >>> median_filter([7, 8, 2, 1, 3, 6, 5, 7, 4])
    array([7., 7., 2., 2., 3., 5., 6., 5., 4.])
    """
    samples = np.asarray(data, dtype=float)
    if samples.ndim != 1:
        raise ValueError(f"Median filter expects 1-D data, got shape {samples.shape}")
    _check_window(window, len(samples))

    filtered = medfilt(samples, kernel_size=window)
    edge = window // 2
    if edge:
        filtered[:edge] = samples[:edge]
        filtered[-edge:] = samples[-edge:]
    return filtered


def filter_channels(
    channels: np.ndarray,
    indices=FILTER_CHANNELS,
    window: int = MEDIAN_WINDOW,
) -> dict[str, tuple[np.ndarray, np.ndarray]]:
    """
    Median filter selected columns of a channel array.

    Parameters
    ----------
    channels : np.ndarray
        Channel array of shape (n_samples, n_channels)
    indices : sequence of int, optional
        Channel columns to filter, by default foF2 and hmF2
    window : int, optional
        Odd window width, by default 3

    Returns
    -------
    dict[str, tuple[np.ndarray, np.ndarray]]
        Mapping from channel name to (original, filtered)
    """
    result = {}
    for index in indices:
        name = channel_name(index)
        original = channels[:, index]
        result[name] = (original, median_filter(original, window))
    return result
