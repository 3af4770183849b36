"""
SVG path thickener for pen plotters.

A pen plotter draws with a fixed width pen. Longer paths of an svg file are duplicated with
slight random offsets so that the drawn result appears thicker.
"""

import argparse
import sys

from .core.exceptions import ThickenError
from .core.patcher import (
    DEFAULT_COPIES,
    DEFAULT_OFFSET,
    DEFAULT_THRESHOLD,
    ThickenConfig,
    thicken_file,
)
from .kernel import Channel, Settings
from .tools.offsetpath import default_rng

APPLICATION_NAME = "penthicken"
APPLICATION_VERSION = "0.1.0"

SETTINGS_SECTION = "thicken"
SETTINGS_KEYS = ("threshold", "offset", "copies", "seed")

EPILOG = """\
Example:
  penthicken input.svg output.svg --threshold 150 --offset 0.8
"""


def copies_count(value):
    """Copy counts are truncated toward zero, "2.7" is 2."""
    try:
        count = int(float(value))
    except (ValueError, OverflowError):
        raise argparse.ArgumentTypeError(f"invalid copies value: {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"copies must not be negative: {value!r}")
    return count


def seed_value(value):
    try:
        seed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed value: {value!r}")
    if seed < 0:
        raise argparse.ArgumentTypeError(f"seed must not be negative: {value!r}")
    return seed


parser = argparse.ArgumentParser(
    prog=APPLICATION_NAME,
    description="Duplicates longer paths of an svg file with slight offsets "
    "to make them appear thicker when pen plotting.",
    epilog=EPILOG,
    formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument("input", nargs="?", help="input svg file")
parser.add_argument("output", nargs="?", help="output svg file")
parser.add_argument(
    "--threshold",
    type=float,
    default=None,
    help=f"minimum path length to thicken (default: {DEFAULT_THRESHOLD:g})",
)
parser.add_argument(
    "--offset",
    type=float,
    default=None,
    help=f"distance to offset duplicate paths (default: {DEFAULT_OFFSET:g})",
)
parser.add_argument(
    "--copies",
    type=copies_count,
    default=None,
    help=f"number of duplicate paths to create (default: {DEFAULT_COPIES})",
)
parser.add_argument(
    "--seed", type=seed_value, default=None, help="seed the random offsets for repeatable output"
)
parser.add_argument(
    "-c",
    "--config",
    type=str,
    default=None,
    help=f"ini file providing defaults in a [{SETTINGS_SECTION}] section",
)
parser.add_argument(
    "-q", "--quiet", action="store_true", help="do not report progress"
)
parser.add_argument("-V", "--version", action="store_true", help="penthicken version")


def _print_error(message):
    print(message, file=sys.stderr)


def resolve_settings(args, channel=None):
    """
    Merge command line values over the config file over the built-in defaults.

    @param args: parsed arguments
    @param channel: receives warnings about unusable config entries
    @return: (ThickenConfig, seed)
    """
    threshold, offset, copies, seed = args.threshold, args.offset, args.copies, args.seed
    if args.config is not None:
        settings = Settings(args.config)
        for key in settings.keylist(SETTINGS_SECTION):
            if key not in SETTINGS_KEYS and channel is not None:
                channel(f"Ignoring unknown setting '{key}' in {args.config}")
        if threshold is None:
            threshold = settings.read_persistent(float, SETTINGS_SECTION, "threshold")
        if offset is None:
            offset = settings.read_persistent(float, SETTINGS_SECTION, "offset")
        if copies is None:
            copies = settings.read_persistent(int, SETTINGS_SECTION, "copies")
            if copies is not None and copies < 0:
                if channel is not None:
                    channel(f"Ignoring negative copies setting in {args.config}")
                copies = None
        if seed is None:
            seed = settings.read_persistent(int, SETTINGS_SECTION, "seed")
            if seed is not None and seed < 0:
                if channel is not None:
                    channel(f"Ignoring negative seed setting in {args.config}")
                seed = None
    config = ThickenConfig(
        threshold=DEFAULT_THRESHOLD if threshold is None else threshold,
        offset_step=DEFAULT_OFFSET if offset is None else offset,
        copies=DEFAULT_COPIES if copies is None else copies,
    )
    return config, seed


def run(argv=None):
    """
    Run the command line tool.

    @param argv: arguments, sys.argv[1:] when omitted
    @return: process exit code
    """
    args = parser.parse_args(argv)
    if args.version:
        print(f"{APPLICATION_NAME} {APPLICATION_VERSION}")
        return 0
    if args.input is None or args.output is None:
        parser.print_help()
        return 0

    channel = Channel("info")
    if not args.quiet:
        channel.watch(print)
    error = Channel("error")
    error.watch(_print_error)

    config, seed = resolve_settings(args, channel=error)
    channel("Processing SVG with settings:", indent=False)
    channel(f"  Threshold: {config.threshold:g}", indent=False)
    channel(f"  Offset: {config.offset_step:g}", indent=False)
    channel(f"  Copies: {config.copies}", indent=False)
    if seed is not None:
        channel(f"  Seed: {seed}", indent=False)

    channel(f"\nReading {args.input}...", indent=False)
    try:
        thicken_file(
            args.input,
            args.output,
            config=config,
            rng=default_rng(seed),
            channel=channel,
        )
    except ThickenError as e:
        error(f"Error: {e}", indent=False)
        return 1
    channel(f"\nWrote processed SVG to {args.output}", indent=False)
    channel("Done!", indent=False)
    return 0


def main():
    sys.exit(run())
