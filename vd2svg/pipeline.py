"""Parse → translate → serialize, in one pass."""

from __future__ import annotations

import logging
import os

from vd2svg.config import settings
from vd2svg.models.drawable import Drawable
from vd2svg.svg.serializer import svg_to_string, write_svg
from vd2svg.svg.translator import build_svg
from vd2svg.vector.parser import load_drawable, parse_drawable

logger = logging.getLogger(__name__)


def convert_string(xml_text: str | bytes, indent: int | None = None) -> str:
    """Convert an in-memory VectorDrawable document to SVG text."""
    drawable = parse_drawable(xml_text)
    return svg_to_string(build_svg(drawable), indent=_indent(indent))


def convert_file(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    indent: int | None = None,
) -> Drawable:
    """Convert the drawable at `input_path` and write the SVG to `output_path`."""
    drawable = load_drawable(input_path)
    write_svg(build_svg(drawable), output_path, indent=_indent(indent))
    logger.info("Converted %s → %s (%d paths)", os.fspath(input_path), os.fspath(output_path), drawable.path_count)
    return drawable


def _indent(indent: int | None) -> int:
    return settings.vd2svg_indent if indent is None else indent
