"""VectorDrawable parser — minidom facade.

Converts a raw <vector> resource → Drawable with bare paths and groups populated.
Only the attributes that have an SVG counterpart are read; everything else
(group transforms, alpha, gradients, resource references) is dropped here.

Names are matched literally as written (``android:pathData``), without namespace
processing, so a document that never declares ``xmlns:android`` still parses.
"""

from __future__ import annotations

import io
import logging
import os
import re
import xml.sax
from xml.dom import minidom

from vd2svg.errors import DrawableParseError
from vd2svg.models.drawable import Drawable, Group, VectorPath

logger = logging.getLogger(__name__)

_VIEWPORT_WIDTH = "android:viewportWidth"
_VIEWPORT_HEIGHT = "android:viewportHeight"

# android:* attribute -> (VectorPath field, value must be a literal "#" color)
_PATH_ATTRS: dict[str, tuple[str, bool]] = {
    "android:pathData": ("path_data", False),
    "android:fillColor": ("fill_color", True),
    "android:strokeColor": ("stroke_color", True),
    "android:strokeWidth": ("stroke_width", False),
}

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_dom(stream) -> minidom.Document:
    # SAX readers default to feature_namespaces off: prefixes stay part of the name
    try:
        return minidom.parse(stream, parser=xml.sax.make_parser())
    except xml.sax.SAXException as e:
        raise DrawableParseError(f"Malformed XML: {e}") from e


def parse_drawable(xml_text: str | bytes) -> Drawable:
    """Parse a VectorDrawable document held in memory."""
    stream = io.BytesIO(xml_text) if isinstance(xml_text, bytes) else io.StringIO(xml_text)
    return _read_vector(_parse_dom(stream))


def load_drawable(path: str | os.PathLike[str]) -> Drawable:
    """Parse a VectorDrawable document from a file."""
    try:
        with open(path, "rb") as f:
            document = _parse_dom(f)
    except OSError as e:
        raise DrawableParseError(f"Cannot read input: {e.strerror or e}") from e
    return _read_vector(document)


def _child_elements(node: minidom.Node) -> list[minidom.Element]:
    return [n for n in node.childNodes if n.nodeType == n.ELEMENT_NODE]


def _read_vector(document: minidom.Document) -> Drawable:
    vectors = document.getElementsByTagName("vector")
    if not vectors:
        raise DrawableParseError("No <vector> element found")
    vector = vectors[0]

    width = _viewport_dimension(vector, _VIEWPORT_WIDTH)
    height = _viewport_dimension(vector, _VIEWPORT_HEIGHT)

    paths: list[VectorPath] = []
    groups: list[Group] = []

    for child in _child_elements(vector):
        if child.tagName == "group":
            group_paths = [p for p in map(extract_path, _child_elements(child)) if p is not None]
            if group_paths:
                groups.append(Group(paths=group_paths))
            else:
                logger.debug("Dropping <group> with no usable paths")
        elif child.tagName == "path":
            path = extract_path(child)
            if path is not None:
                paths.append(path)
        else:
            logger.debug("Ignoring <%s> under <vector>", child.tagName)

    drawable = Drawable(width=width, height=height, paths=paths, groups=groups)
    logger.info(
        "Parsed drawable: %d groups, %d paths, viewport %d×%d",
        len(drawable.groups),
        drawable.path_count,
        drawable.width,
        drawable.height,
    )
    return drawable


def _viewport_dimension(vector: minidom.Element, name: str) -> int:
    """Read an integer viewport attribute; absent means 0."""
    if not vector.hasAttribute(name):
        return 0
    raw = vector.getAttribute(name)
    if not _INT_RE.fullmatch(raw):
        raise DrawableParseError(f"Viewport dimension is not an integer: {raw!r}")
    value = int(raw)
    if value < 0:
        raise DrawableParseError(f"Viewport dimension is negative: {raw!r}")
    return value


def extract_path(element: minidom.Element) -> VectorPath | None:
    """Build a VectorPath from a <path> element, or None if it has no path data.

    Non-path elements (nested groups, clip-paths, ...) also yield None.
    """
    if element.tagName != "path":
        return None

    fields: dict[str, str] = {}
    for name, value in element.attributes.items():
        target = _PATH_ATTRS.get(name)
        if target is None:
            continue
        field, hex_only = target
        if hex_only and not value.startswith("#"):
            logger.debug("Dropping non-literal color %s=%r", name, value)
            continue
        fields[field] = value

    if not fields.get("path_data"):
        return None
    return VectorPath(**fields)
