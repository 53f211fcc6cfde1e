"""Build an SVG element tree from a parsed Drawable."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from vd2svg.models.drawable import Drawable, VectorPath

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def build_svg(drawable: Drawable) -> ET.Element:
    """Translate a Drawable into a fresh <svg> tree.

    All <g> elements come first, then the bare paths, each in source order.
    """
    svg = ET.Element("svg")
    svg.set("viewBox", f"0 0 {drawable.width} {drawable.height}")
    svg.set("xmlns", SVG_NS)
    svg.set("xmlns:xlink", XLINK_NS)

    for group in drawable.groups:
        g = ET.SubElement(svg, "g")
        for path in group.paths:
            g.append(path_element(path))

    for path in drawable.paths:
        svg.append(path_element(path))

    return svg


def path_element(path: VectorPath) -> ET.Element:
    """Emit a <path>; optional attributes only when present, `d` always last."""
    element = ET.Element("path")
    if path.fill_color is not None:
        element.set("fill", path.fill_color)
    if path.stroke_color is not None:
        element.set("stroke", path.stroke_color)
    if path.stroke_width is not None:
        element.set("stroke-width", path.stroke_width)
    element.set("d", path.path_data)
    return element
