"""Command-line entry point.

Usage:
  vd2svg ic_launcher.xml ic_launcher.svg
  python -m vd2svg res/drawable/ic_star.xml out/ic_star.svg
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from vd2svg.config import settings
from vd2svg.errors import DrawableParseError, SvgWriteError
from vd2svg.pipeline import convert_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PRECONDITION = 1
EXIT_PARSE_ERROR = 2
EXIT_WRITE_ERROR = 3

DESCRIPTION = "Convert Android VectorDrawable XML resource file to SVG"


def print_usage(prog: str = "vd2svg") -> None:
    print(DESCRIPTION)
    print()
    print(f"Usage: {prog} [INPUT] [OUTPUT]")


def check_paths(input_path: Path, output_path: Path) -> str | None:
    """Return the first failing precondition as '<reason>: <path>', or None."""
    if not input_path.is_file():
        return f"Input is not a file: {input_path}"
    if not input_path.name.endswith(".xml"):
        return f"Input does not end with .xml: {input_path}"
    if not output_path.parent.is_dir():
        return f"Output directory does not exist: {output_path}"
    if not output_path.name.endswith(".svg"):
        return f"Output file does not end with .svg: {output_path}"
    return None


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.vd2svg_log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    _configure_logging()

    args = sys.argv[1:] if argv is None else argv
    # Only the count matters; a leading "-" is still a path
    if len(args) != 2:
        print_usage()
        return EXIT_OK

    input_path = Path(args[0]).absolute()
    output_path = Path(args[1]).absolute()
    print(f"output={output_path}")

    problem = check_paths(input_path, output_path)
    if problem:
        print(problem, file=sys.stderr)
        return EXIT_PRECONDITION

    try:
        convert_file(input_path, output_path)
    except DrawableParseError as e:
        logger.debug("Parse failed for %s", input_path, exc_info=True)
        print(f"{e}: {input_path}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except SvgWriteError as e:
        logger.debug("Write failed for %s", output_path, exc_info=True)
        print(f"{e}: {output_path}", file=sys.stderr)
        return EXIT_WRITE_ERROR

    return EXIT_OK


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
