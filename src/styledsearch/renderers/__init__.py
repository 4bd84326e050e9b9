#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers and text properties that present highlighted styled text."""

from styledsearch.renderers.base import BaseRenderer
from styledsearch.renderers.html import HtmlRenderer
from styledsearch.renderers.property import SearchHighlightProperty

__all__ = ["BaseRenderer", "HtmlRenderer", "SearchHighlightProperty"]
