"""
Command-line interface for chromaharmony.

    chromaharmony harmonies "#FF5733"
    chromaharmony convert 255,87,51 hsl
"""
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .formatting import format_color, format_harmonies
from .parsing import ColorParseError, parse_color
from .types.format_type import OutputFormat

logger = logging.getLogger(__name__)

COLOR_HELP = "Input color in hex (#RRGGBB/RRGGBB) or RGB (r,g,b) format"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromaharmony",
        description="Color manipulation utilities for scientific visualization",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-swatch",
        dest="swatch",
        action="store_false",
        help="Do not print ANSI color blocks next to the colors",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    harmonies_parser = subparsers.add_parser(
        "harmonies", help="Display color harmonies (complement, triads, tetrads)"
    )
    harmonies_parser.add_argument("color", help=COLOR_HELP)

    convert_parser = subparsers.add_parser("convert", help="Convert between color formats")
    convert_parser.add_argument("color", help=COLOR_HELP)
    convert_parser.add_argument(
        "format",
        type=str.lower,
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (hex, rgb, hsl)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        color = parse_color(args.color)
    except ColorParseError as e:
        print(f"Error parsing color: {e}", file=sys.stderr)
        return 1

    logger.debug("Running %s on %r", args.command, color)

    if args.command == "harmonies":
        lines = format_harmonies(color, swatch=args.swatch)
    else:
        lines = [format_color(color, OutputFormat(args.format), swatch=args.swatch)]

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
