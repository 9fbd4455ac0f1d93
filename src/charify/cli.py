import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import NoReturn

from PIL import Image, UnidentifiedImageError

from charify.charsets import PRESETS, build_charset
from charify.converter import convert, open_destination
from charify.errors import ConfigurationError
from charify.grid import load_image, parse_dimensions, to_brightness


def _version() -> str:
    try:
        return version("charify")
    except PackageNotFoundError:
        return "unknown"


def fail(message: str) -> NoReturn:
    print(f"[ERROR] {message}", file=sys.stderr)
    sys.exit(1)


def _resolve_paths(parser: argparse.ArgumentParser, args: argparse.Namespace) -> tuple[str, str]:
    """Fill IMAGE and DESTINATION from positionals or their -i/-d forms, in that order."""
    positionals = [p for p in (args.image, args.destination) if p is not None]
    image_path = args.image_path if args.image_path is not None else (positionals.pop(0) if positionals else None)
    destination = (
        args.destination_path if args.destination_path is not None else (positionals.pop(0) if positionals else None)
    )
    if positionals:
        parser.error(f"unrecognized arguments: {' '.join(positionals)}")
    if image_path is None:
        parser.error("the following arguments are required: image")
    if destination is None:
        parser.error("the following arguments are required: destination")
    return image_path, destination


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="charify", description="Render an image as text, one character per pixel")
    parser.add_argument("image", nargs="?", help="Path to an existing image")
    parser.add_argument("destination", nargs="?", help="Path to a newly created text file")
    parser.add_argument("-i", "--image", dest="image_path", help="Path to an existing image (instead of IMAGE)")
    parser.add_argument(
        "-d",
        "--destination",
        dest="destination_path",
        help="Path to a newly created text file (instead of DESTINATION)",
    )
    parser.add_argument(
        "-r", "--new_dimensions", metavar="WIDTHxHEIGHT", help="Resize source image to specified dimensions"
    )
    parser.add_argument("-c", "--charset", default=None, help="Set a new character set to use, darkest first")
    parser.add_argument(
        "-p",
        "--preset",
        default="blocks",
        choices=sorted(PRESETS),
        help="Named character set used when --charset is not given (default: blocks)",
    )
    parser.add_argument(
        "--fail-fast", action="store_true", default=False, help="Stop at the first failed write to the destination"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug information")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    args = parser.parse_args(argv)
    image_path, destination = _resolve_paths(parser, args)

    logging.basicConfig(format="%(levelname)s: %(message)s", level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        charset = build_charset(args.charset if args.charset is not None else PRESETS[args.preset])
    except ConfigurationError as e:
        fail(str(e))

    dimensions = None
    if args.new_dimensions is not None:
        try:
            dimensions = parse_dimensions(args.new_dimensions)
        except ValueError as e:
            fail(str(e))

    try:
        image = load_image(image_path)
    except (FileNotFoundError, IsADirectoryError) as e:
        fail(str(e))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        fail(f"error opening a source image: {e}")

    grid = to_brightness(image, dimensions)

    try:
        sink = open_destination(destination)
    except OSError as e:
        fail(f"could not create destination file: {e}")

    try:
        with sink:
            report = convert(charset, grid, sink, fail_fast=args.fail_fast)
    except OSError as e:
        fail(f"error writing to destination file: {e}")

    if not report.ok:
        fail(f"{len(report.failures)} write(s) to {destination} failed")
