"""Immutable configuration objects for searching and rendering."""

from styledsearch.options.base import CloneFrozenMixin
from styledsearch.options.environment import ColorScheme, DynamicColor, TextEnvironment
from styledsearch.options.html import HtmlRendererOptions
from styledsearch.options.search import SearchOptions

__all__ = [
    "CloneFrozenMixin",
    "ColorScheme",
    "DynamicColor",
    "HtmlRendererOptions",
    "SearchOptions",
    "TextEnvironment",
]
