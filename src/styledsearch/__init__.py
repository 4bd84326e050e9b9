#  Copyright (c) 2025 Tom Villani, Ph.D.
"""styledsearch - search-match highlighting for styled text.

Search the plain-text projection of a :class:`StyledText`, map each match back
onto the styled text and annotate it with a :class:`SearchHighlightAttribute`,
leaving all existing formatting intact.

Examples
--------
    >>> from styledsearch import StyledText, apply_highlights
    >>> result = apply_highlights(StyledText("café cafe CAFÉ"), "cafe", current_match_index=1)
    >>> result.match_count
    3

"""

from __future__ import annotations

from styledsearch.exceptions import InvalidRangeError, SerializationError, StyledSearchError, ValidationError
from styledsearch.highlight import (
    SEARCH_HIGHLIGHT,
    HighlightResult,
    SearchHighlightAttribute,
    apply_highlights,
    highlighted_ranges,
    locate,
    remove_highlights,
)
from styledsearch.options import SearchOptions
from styledsearch.text import (
    BACKGROUND_COLOR,
    CODE,
    EMPHASIS,
    FOREGROUND_COLOR,
    LINK,
    STRIKETHROUGH,
    STRONG,
    AttributeContainer,
    AttributeKey,
    MergePolicy,
    StyledText,
    TextRange,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "StyledSearchError",
    "ValidationError",
    "InvalidRangeError",
    "SerializationError",
    # Styled text
    "StyledText",
    "TextRange",
    "AttributeContainer",
    "AttributeKey",
    "MergePolicy",
    "STRONG",
    "EMPHASIS",
    "CODE",
    "STRIKETHROUGH",
    "LINK",
    "FOREGROUND_COLOR",
    "BACKGROUND_COLOR",
    # Highlighting
    "SearchOptions",
    "SearchHighlightAttribute",
    "SEARCH_HIGHLIGHT",
    "HighlightResult",
    "apply_highlights",
    "highlighted_ranges",
    "locate",
    "remove_highlights",
]
