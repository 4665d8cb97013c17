"""
Plotting through an external gnuplot process.

Data is sent inline on gnuplot's stdin:

    plot '-' u 1:2 t '<label>' w lp
    <x> <y>
    ...
    e

The command stream can also be written to a script file (or stdout) so that
gnuplot is not needed.
"""

import shutil
import subprocess
import sys
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import NamedTuple

import numpy as np

from ionogeo.config import GNUPLOT_COMMAND, GNUPLOT_PAIR_FORMAT
from ionogeo.errors import OpenFailed, PlotterUnavailable


class PlotSeries(NamedTuple):
    """One inline data block of a plot command."""

    x: np.ndarray
    """Abscissa values"""
    y: np.ndarray
    """Ordinate values"""
    label: str
    """Legend title"""
    style: str = "lp"
    """gnuplot 'with' clause, e.g. "lp", "lines lt 2" """


def index_series(values, label: str, style: str = "lp") -> PlotSeries:
    """Series plotted against its sample index."""
    values = np.asarray(values, dtype=float)
    return PlotSeries(
        x=np.arange(len(values), dtype=float), y=values, label=label, style=style
    )


def _quote(text: str) -> str:
    """gnuplot single-quoted string; a quote is escaped by doubling it."""
    return "'" + text.replace("'", "''") + "'"


def format_plot_command(series: list[PlotSeries]) -> str:
    """
    Build the plot command for inline data blocks.

    The first block reads from '-', following blocks reuse it with ''.

    Examples
    --------
    >>> s = index_series([1.0, 2.0], "unfiltered")
    >>> format_plot_command([s])
    "plot '-' u 1:2 t 'unfiltered' w lp"
    """
    clauses = [
        f"{_quote('-' if i == 0 else '')} u 1:2 t {_quote(s.label)} w {s.style}"
        for i, s in enumerate(series)
    ]
    return "plot " + ", ".join(clauses)


def write_plot(stream, series: list[PlotSeries], title: str | None = None) -> None:
    """
    Write one plot with inline data to a gnuplot command stream.

    Parameters
    ----------
    stream : text file-like
        gnuplot stdin or a script file
    series : list[PlotSeries]
        Data blocks, in the order they appear in the plot command
    title : str, optional
        Plot title
    """
    if title is not None:
        stream.write(f"set title {_quote(title)}\n")
    stream.write(format_plot_command(series) + "\n")
    for s in series:
        for x, y in zip(s.x, s.y):
            stream.write(GNUPLOT_PAIR_FORMAT.format(x, y) + "\n")
        stream.write("e\n")


def write_multiplot(stream, plots: list[tuple[str, list[PlotSeries]]]) -> None:
    """
    Write several titled plots stacked in one window.

    Parameters
    ----------
    stream : text file-like
        gnuplot stdin or a script file
    plots : list[tuple[str, list[PlotSeries]]]
        (title, series) per plot
    """
    if len(plots) == 1:
        title, series = plots[0]
        write_plot(stream, series, title)
        return

    stream.write(f"set multiplot layout {len(plots)},1\n")
    for title, series in plots:
        write_plot(stream, series, title)
    stream.write("unset multiplot\n")


def check_plotter(command=GNUPLOT_COMMAND) -> str:
    """
    Locate the plotting program.

    Returns
    -------
    str
        Full path of the executable

    Raises
    ------
    PlotterUnavailable
        If the program is not on PATH
    """
    executable = shutil.which(command[0])
    if executable is None:
        raise PlotterUnavailable(f"Plotting program {command[0]!r} not found on PATH")
    return executable


@contextmanager
def open_gnuplot(command=GNUPLOT_COMMAND):
    """
    Start gnuplot and yield its stdin as a text stream.

    stdin is closed and the process waited for on every exit path.

    Raises
    ------
    PlotterUnavailable
        If the process cannot be started or stops reading its input
    """
    try:
        process = subprocess.Popen(list(command), stdin=subprocess.PIPE, text=True)
    except OSError as e:
        raise PlotterUnavailable(f"Cannot start {command[0]}: {e.strerror or e}") from e

    try:
        yield process.stdin
        process.stdin.flush()
    except BrokenPipeError as e:
        raise PlotterUnavailable(f"{command[0]} stopped reading commands") from e
    finally:
        # a broken pipe here was already reported above
        with suppress(BrokenPipeError):
            process.stdin.close()
        returncode = process.wait()

    if returncode:
        print(f"  Warning: {command[0]} exited with status {returncode}", file=sys.stderr)


@contextmanager
def open_plot_output(script: str | None = None, command=GNUPLOT_COMMAND):
    """
    Yield the destination for gnuplot commands.

    Parameters
    ----------
    script : str, optional
        None to pipe into gnuplot, "-" for stdout, otherwise a file path
    command : sequence of str, optional
        gnuplot command line, used when `script` is None

    Raises
    ------
    OpenFailed
        If the script file cannot be created
    PlotterUnavailable
        If gnuplot cannot be started
    """
    if script is None:
        with open_gnuplot(command) as stream:
            yield stream
    elif script == "-":
        yield sys.stdout
    else:
        try:
            f = open(Path(script), "w", encoding="utf-8")
        except OSError as e:
            raise OpenFailed(f"Cannot write {script}: {e.strerror or e}") from e
        with f:
            yield f
