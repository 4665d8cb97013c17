"""Command-line entry points: geom_dist, median_filter and iri_profile."""

import argparse
import sys
from pathlib import Path

from ionogeo.config import (
    FILTER_CHANNELS,
    MEDIAN_WINDOW,
    NUM_CHANNELS,
    PROFILE_TITLE,
)
from ionogeo.errors import IonoGeoError
from ionogeo.median_filter import filter_channels
from ionogeo.parse_geom import GIS_MODE, RADAR_MODE, read_geom_request
from ionogeo.parse_iono import read_density_profile, read_iono_series
from ionogeo.plasma import plasma_frequency
from ionogeo.plotting import (
    PlotSeries,
    check_plotter,
    index_series,
    open_plot_output,
    write_multiplot,
    write_plot,
)
from ionogeo.report import format_gis_report, format_radar_report
from ionogeo.spherical import gis_to_radar, radar_to_gis


def _report_error(prog: str, error: Exception) -> int:
    print(f"{prog}: error: {error}", file=sys.stderr)
    return 1


def _add_script_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--script",
        default=None,
        help="Write gnuplot commands to this file ('-' for stdout) instead of running gnuplot",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress")


# ============================================================================
# geom_dist
# ============================================================================


def _build_geom_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geom_dist",
        description=(
            "Convert GIS coordinates (latitude, longitude) to radar coordinates "
            "(range, bearing) and vice versa on a spherical Earth"
        ),
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-G",
        dest="mode",
        action="store_const",
        const=GIS_MODE,
        help="GIS coordinates to range and bearing; data line: 37N, 75W, 18N, 66W",
    )
    mode.add_argument(
        "-R",
        dest="mode",
        action="store_const",
        const=RADAR_MODE,
        help="Range and bearing to GIS coordinates; data line: 37N, 75W, 2288.66, 154.96",
    )
    parser.add_argument("input_file", type=Path, help="Header line plus one data line")
    return parser


def geom_dist_main(argv=None) -> int:
    parser = _build_geom_parser()
    args = parser.parse_args(argv)
    if args.mode is None:
        parser.print_help(sys.stderr)
        return 2

    try:
        request = read_geom_request(args.input_file, args.mode)
    except IonoGeoError as e:
        return _report_error(parser.prog, e)

    if request.mode == GIS_MODE:
        radar = gis_to_radar(request.start, request.end)
        print(format_gis_report(request.start, request.end, radar))
    else:
        end = radar_to_gis(request.start, request.radar)
        print(format_radar_report(request.start, request.radar, end))
    return 0


# ============================================================================
# median_filter
# ============================================================================


def _build_filter_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="median_filter",
        description="Median filter ionosonde channels and plot filtered over unfiltered data",
    )
    parser.add_argument(
        "data_file", type=Path, help="Ionosonde export (header, blank row, data rows)"
    )
    parser.add_argument(
        "--window", type=int, default=MEDIAN_WINDOW, help="Odd median window width"
    )
    parser.add_argument(
        "--channels",
        type=int,
        nargs="+",
        choices=range(NUM_CHANNELS),
        default=list(FILTER_CHANNELS),
        metavar="INDEX",
        help="Channel columns to filter (default: 0 5, i.e. foF2 and hmF2)",
    )
    _add_script_option(parser)
    return parser


def median_filter_main(argv=None) -> int:
    parser = _build_filter_parser()
    args = parser.parse_args(argv)

    try:
        if args.script is None:
            check_plotter()
        series = read_iono_series(args.data_file)
        if args.verbose:
            print(
                f"Read {len(series.timestamps)} samples from {args.data_file} "
                f"({series.timestamps[0]} to {series.timestamps[-1]})",
                file=sys.stderr,
            )

        channels = list(dict.fromkeys(args.channels))
        if len(channels) < len(args.channels):
            print(f"{parser.prog}: note: ignoring repeated channel indices", file=sys.stderr)

        filtered = filter_channels(series.channels, channels, args.window)
        plots = [
            (
                name,
                [
                    index_series(original, "unfiltered", "lp lt 0"),
                    index_series(smoothed, "filtered", "lines lt 2"),
                ],
            )
            for name, (original, smoothed) in filtered.items()
        ]
        with open_plot_output(args.script) as stream:
            write_multiplot(stream, plots)
    except IonoGeoError as e:
        return _report_error(parser.prog, e)

    if args.verbose:
        print(f"Plotted {', '.join(filtered)}", file=sys.stderr)
    return 0


# ============================================================================
# iri_profile
# ============================================================================


def _build_profile_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iri_profile",
        description="Plot the plasma frequency profile of an IRI electron density run",
    )
    parser.add_argument(
        "profile_file",
        type=Path,
        help="Two columns: electron density (m^-3) and height (km)",
    )
    parser.add_argument("--title", default=PROFILE_TITLE, help="Legend title")
    _add_script_option(parser)
    return parser


def iri_profile_main(argv=None) -> int:
    parser = _build_profile_parser()
    args = parser.parse_args(argv)

    try:
        if args.script is None:
            check_plotter()
        profile = read_density_profile(args.profile_file)
        if args.verbose:
            print(
                f"Read {len(profile.height)} heights from {args.profile_file}",
                file=sys.stderr,
            )
        frequency = plasma_frequency(profile.electron_density)
        with open_plot_output(args.script) as stream:
            write_plot(
                stream, [PlotSeries(x=frequency, y=profile.height, label=args.title)]
            )
    except IonoGeoError as e:
        return _report_error(parser.prog, e)
    return 0


if __name__ == "__main__":
    sys.exit(geom_dist_main())
