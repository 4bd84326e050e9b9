#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Locate search matches in styled text and annotate them as highlights."""

from styledsearch.highlight.applicator import (
    Highlightable,
    HighlightResult,
    annotate,
    apply_highlights,
    highlighted_ranges,
    remove_highlights,
)
from styledsearch.highlight.attribute import (
    SEARCH_HIGHLIGHT,
    SearchHighlightAttribute,
    get_search_highlight,
    with_search_highlight,
)
from styledsearch.highlight.locator import iter_matches, locate

__all__ = [
    "Highlightable",
    "HighlightResult",
    "SEARCH_HIGHLIGHT",
    "SearchHighlightAttribute",
    "annotate",
    "apply_highlights",
    "get_search_highlight",
    "highlighted_ranges",
    "iter_matches",
    "locate",
    "remove_highlights",
    "with_search_highlight",
]
