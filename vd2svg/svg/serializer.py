"""Write indented SVG output."""

from __future__ import annotations

import copy
import logging
import os
import xml.etree.ElementTree as ET

from vd2svg.errors import SvgWriteError

logger = logging.getLogger(__name__)


def _indented(svg: ET.Element, indent: int) -> ET.ElementTree:
    tree = ET.ElementTree(copy.deepcopy(svg))
    ET.indent(tree, space=" " * indent)
    return tree


def svg_to_string(svg: ET.Element, indent: int = 2) -> str:
    """Serialize an <svg> tree to text, with an XML prolog."""
    tree = _indented(svg, indent)
    data = ET.tostring(tree.getroot(), encoding="utf-8", xml_declaration=True)
    return data.decode("utf-8") + "\n"


def write_svg(svg: ET.Element, path: str | os.PathLike[str], indent: int = 2) -> None:
    """Write an <svg> tree to `path` as UTF-8.

    A partially written file is removed if writing fails.
    """
    tree = _indented(svg, indent)
    opened = False
    try:
        with open(path, "wb") as f:
            opened = True
            tree.write(f, encoding="utf-8", xml_declaration=True)
            f.write(b"\n")
    except OSError as e:
        if opened:
            _discard(path)
        raise SvgWriteError(f"Cannot write output: {e.strerror or e}") from e
    logger.debug("Wrote %s", os.fspath(path))


def _discard(path: str | os.PathLike[str]) -> None:
    try:
        os.unlink(path)
    except OSError:
        logger.warning("Could not remove partial output %s", os.fspath(path))
