"""vd2svg — Android VectorDrawable to SVG converter."""

from vd2svg.errors import ConversionError, DrawableParseError, SvgWriteError
from vd2svg.models.drawable import Drawable, Group, VectorPath
from vd2svg.pipeline import convert_file, convert_string

__all__ = [
    "ConversionError",
    "DrawableParseError",
    "SvgWriteError",
    "Drawable",
    "Group",
    "VectorPath",
    "convert_file",
    "convert_string",
]
