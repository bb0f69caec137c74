"""
Command-line interface for the application.

This module provides the main entry point for the CLI::

    species-map-marker make-marker "Bufo bufo"
"""

from __future__ import annotations

import argparse
import logging
import sys

from species_marker import __version__
from species_marker.config import get_settings
from species_marker.errors import SpeciesMarkerError
from species_marker.pipeline import make_marker


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="species-map-marker",
        description="A CLI tool for creating map markers for species",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    marker_parser = subparsers.add_parser("make-marker", help="Create a new marker")
    marker_parser.add_argument("species", help="Species name, e.g. 'Bufo bufo'")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Route log records to stderr; DEBUG with ``--debug``."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_make_marker(args: argparse.Namespace) -> int:
    """Handle the 'make-marker' command."""
    settings = get_settings()
    try:
        run = make_marker(args.species, settings.output_dir)
    except SpeciesMarkerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if run.results == 0:
        print("No results found for this species")
        return 0

    for failure in run.failures:
        print(f"Error processing {failure.title or failure.href}: {failure.error}", file=sys.stderr)

    if not run.success:
        print(f"Error: none of the {run.results} results produced a marker", file=sys.stderr)
        return 1

    for marker in run.markers:
        print(f"Marker: {marker}")
    print(
        f"Marker created successfully! "
        f"({len(run.silhouettes)} of {run.results} silhouettes processed)"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug or get_settings().debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-marker": cmd_make_marker,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
