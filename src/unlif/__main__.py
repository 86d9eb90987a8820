"""
Unlif CLI - Extract embedded images from LIF files.

Run 'python -m unlif help' for usage information.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from unlif.core.config import get_output_dir, set_output_dir, set_verbose, vprint
from unlif.core.constants import (
    BANNER,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    EXIT_CREATE_OUTPUT,
    EXIT_OK,
    EXIT_READ,
    VERSION,
)
from unlif.core.exceptions import LIFArgumentError, LIFEndOfStreamError, LIFError
from unlif.core.types import ImageGeometry


class Style:
    """Terminal styling with ANSI codes."""

    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    CYAN = "\033[36m"

    BRIGHT_BLACK = "\033[90m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all styling."""
        for attr in dir(cls):
            if attr.isupper() and not attr.startswith("_"):
                setattr(cls, attr, "")


class Icons:
    """Unicode icons."""

    CHECK = "✓"
    CROSS = "✗"
    CIRCLE = "○"

    @classmethod
    def disable(cls) -> None:
        """Replace unicode with ASCII fallbacks."""
        cls.CHECK = "+"
        cls.CROSS = "x"
        cls.CIRCLE = "o"


# Disable colors if not a TTY
if not sys.stdout.isatty():
    Style.disable()
    Icons.disable()


def _print_banner() -> None:
    """Print the version and license banner."""
    print(BANNER)


def _print_usage(prog: str = "python -m unlif") -> None:
    """Print usage information."""
    s = Style
    print(f"Please specify lif filename, for example: {prog} file.lif")
    print()
    print(f"  {s.BRIGHT_WHITE}{s.BOLD}USAGE{s.RESET}")
    print(f"  {s.DIM}${s.RESET} {prog} {s.BRIGHT_BLACK}[options]{s.RESET} {s.CYAN}<file.lif>{s.RESET}")
    print()
    print(f"  {s.BRIGHT_WHITE}{s.BOLD}OPTIONS{s.RESET}")
    print(f"    {s.CYAN}--width{s.RESET} {s.DIM}<N>{s.RESET}        Image width {s.BRIGHT_BLACK}(default: {DEFAULT_IMAGE_WIDTH}){s.RESET}")
    print(f"    {s.CYAN}--height{s.RESET} {s.DIM}<N>{s.RESET}       Image height {s.BRIGHT_BLACK}(default: {DEFAULT_IMAGE_HEIGHT}){s.RESET}")
    print(f"    {s.CYAN}--output-dir{s.RESET} {s.DIM}<DIR>{s.RESET} Directory for extracted images {s.BRIGHT_BLACK}(default: .){s.RESET}")
    print(f"    {s.CYAN}--tiff{s.RESET}           Also write a TIFF next to each image")
    print(f"    {s.CYAN}-v, --verbose{s.RESET}    Report every marker found")
    print()


def _print_error(message: str) -> None:
    """Print an error message to stderr."""
    s = Style
    i = Icons
    print(f"  {s.RED}{i.CROSS}{s.RESET} {s.RED}{s.BOLD}Error{s.RESET} {message}", file=sys.stderr)


def _print_step(message: str, status: str = "done") -> None:
    """Print a step in a process."""
    s = Style
    i = Icons
    if status == "done":
        print(f"  {s.GREEN}{i.CHECK}{s.RESET} {message}")
    elif status == "info":
        print(f"  {s.BRIGHT_BLACK}{i.CIRCLE}{s.RESET} {s.DIM}{message}{s.RESET}")


def _parse_positive(option: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise LIFArgumentError(f"{option} expects an integer, got {value!r}") from None
    if number <= 0:
        raise LIFArgumentError(f"{option} must be positive, got {number}")
    return number


def _parse_args(args: list[str]) -> dict:
    """Parse command-line options into a settings dict."""
    settings: dict = {
        "input": None,
        "width": DEFAULT_IMAGE_WIDTH,
        "height": DEFAULT_IMAGE_HEIGHT,
        "output_dir": None,
        "tiff": False,
        "verbose": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--width", "--height", "--output-dir"):
            if i + 1 >= len(args):
                raise LIFArgumentError(f"{arg} requires a value")
            value = args[i + 1]
            if arg == "--output-dir":
                settings["output_dir"] = value
            else:
                settings[arg[2:]] = _parse_positive(arg, value)
            i += 2
        elif arg == "--tiff":
            settings["tiff"] = True
            i += 1
        elif arg in ("-v", "--verbose"):
            settings["verbose"] = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            raise LIFArgumentError(f"Unknown option: {arg}")
        elif settings["input"] is None:
            settings["input"] = arg
            i += 1
        else:
            # Only the first file is processed
            i += 1

    return settings


def _extract(settings: dict) -> int:
    """Run the extraction and map its terminal exception to an exit code."""
    from unlif.processing.export import export_to_tiff
    from unlif.processing.extract import extract_lif

    geometry = ImageGeometry(width=settings["width"], height=settings["height"])
    input_path = settings["input"]
    count = 0

    vprint(f"Input: {input_path}")
    vprint(f"Geometry: {geometry.width}x{geometry.height}, {geometry.image_size} bytes/image")
    vprint(f"Output: {get_output_dir()}")

    try:
        for image in extract_lif(input_path, geometry):
            print(f'Extracted "{image.path.name}" from offset {image.offset}.')
            count += 1
            if settings["tiff"]:
                tiff_path = export_to_tiff(image.path)
                _print_step(f"Wrote {tiff_path.name}", "info")
    except LIFEndOfStreamError as e:
        # Every complete scan ends here
        _print_error(str(e))
        _print_step(f"Extracted {count} image(s)")
        return EXIT_READ
    except LIFError as e:
        _print_error(str(e))
        return e.exit_code
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else list(argv)

    if args and args[0].lower() in ("help", "-h", "--help", "-?"):
        _print_banner()
        _print_usage()
        return EXIT_OK

    if args and args[0].lower() in ("version", "--version"):
        s = Style
        print(f"{s.BRIGHT_CYAN}unlif{s.RESET} {s.DIM}v{VERSION}{s.RESET}")
        return EXIT_OK

    _print_banner()

    try:
        settings = _parse_args(args)
        if settings["input"] is None:
            raise LIFArgumentError("Missing input file")
    except LIFArgumentError as e:
        if args:
            _print_error(str(e))
        _print_usage()
        return e.exit_code

    if settings["verbose"]:
        set_verbose(True)
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if settings["output_dir"] is not None:
        output_dir = Path(settings["output_dir"])
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            _print_error(f"Unable to create output directory: {e}")
            return EXIT_CREATE_OUTPUT
        set_output_dir(output_dir)

    return _extract(settings)


if __name__ == "__main__":
    sys.exit(main())
