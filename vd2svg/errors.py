"""Exception types raised by the conversion pipeline."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for failures while converting a drawable."""


class DrawableParseError(ConversionError):
    """Input is not a readable VectorDrawable document."""


class SvgWriteError(ConversionError):
    """The SVG document could not be written."""
