#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/renderers/html.py
"""Inline HTML rendering of styled text.

Each run becomes one HTML fragment. Formatting attributes map to their usual
inline elements, and runs carrying a search highlight are wrapped in
``<mark>`` with the background color resolved from the renderer's
:class:`~styledsearch.options.environment.TextEnvironment`.

Examples
--------
    >>> from styledsearch.highlight import apply_highlights
    >>> from styledsearch.text import StyledText
    >>> result = apply_highlights(StyledText("a < b"), "b", current_match_index=0)
    >>> HtmlRenderer().render_to_string(result.highlighted)  # doctest: +ELLIPSIS
    'a &lt; <mark class="search-match search-match-current" style="background-color: ...">b</mark>'

"""

from __future__ import annotations

import logging
from html import escape as _html_escape

from styledsearch.constants import SEARCH_MATCH_CSS_CLASS, SEARCH_MATCH_CURRENT_CSS_CLASS
from styledsearch.highlight.attribute import get_search_highlight
from styledsearch.options.html import HtmlRendererOptions
from styledsearch.renderers.base import BaseRenderer
from styledsearch.renderers.property import SearchHighlightProperty
from styledsearch.text.attributes import (
    BACKGROUND_COLOR,
    CODE,
    EMPHASIS,
    FOREGROUND_COLOR,
    LINK,
    STRIKETHROUGH,
    STRONG,
    AttributeContainer,
)
from styledsearch.text.styled import Run, StyledText

logger = logging.getLogger(__name__)

# Innermost first
_FORMAT_TAGS = (
    (CODE, "code"),
    (STRIKETHROUGH, "del"),
    (EMPHASIS, "em"),
    (STRONG, "strong"),
)


class HtmlRenderer(BaseRenderer):
    """Render styled text to an inline HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        resolved = options or HtmlRendererOptions()
        super().__init__(resolved)
        self.options: HtmlRendererOptions = resolved

    def _escape(self, text: str) -> str:
        return _html_escape(text) if self.options.escape_html else text

    def render_to_string(self, text: StyledText) -> str:
        """Render ``text`` as HTML."""
        fragments = [self._render_run(run) for run in text.runs]
        logger.debug("Rendered %d run(s) to HTML", len(fragments))
        return "".join(fragments)

    def _render_run(self, run: Run) -> str:
        html = self._escape(run.text).replace("\n", "<br>\n")
        attributes = run.attributes

        for key, tag in _FORMAT_TAGS:
            if attributes.get(key):
                html = f"<{tag}>{html}</{tag}>"

        styles = []
        if FOREGROUND_COLOR in attributes:
            styles.append(f"color: {self._escape(attributes[FOREGROUND_COLOR])}")
        if BACKGROUND_COLOR in attributes:
            styles.append(f"background-color: {self._escape(attributes[BACKGROUND_COLOR])}")
        if styles:
            html = f'<span style="{"; ".join(styles)}">{html}</span>'

        html = self._wrap_highlight(html, attributes)

        if LINK in attributes:
            html = f'<a href="{self._escape(attributes[LINK])}">{html}</a>'
        return html

    def _wrap_highlight(self, html: str, attributes: AttributeContainer) -> str:
        highlight = get_search_highlight(attributes)
        if highlight is None:
            return html

        parts = []
        if self.options.highlight_classes:
            classes = [SEARCH_MATCH_CSS_CLASS]
            if highlight.is_current:
                classes.append(SEARCH_MATCH_CURRENT_CSS_CLASS)
            parts.append(f' class="{" ".join(classes)}"')
        if self.options.highlight_styles:
            resolved = SearchHighlightProperty.for_attribute(highlight).apply(
                AttributeContainer(), self.options.environment
            )
            parts.append(f' style="background-color: {self._escape(resolved[BACKGROUND_COLOR])}"')
        return f"<mark{''.join(parts)}>{html}</mark>"


__all__ = ["HtmlRenderer"]
