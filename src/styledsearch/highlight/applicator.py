#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/highlight/applicator.py
"""Search styled text and annotate every match with a highlight attribute.

This implements "search on rendered text": the plain-text projection of the
styled text is searched, and each hit is mapped back onto the styled text and
annotated in place. Repeated words each get their own highlight, and matches
that straddle formatting changes (``**Hel**lo``) are found like any other.

Existing attributes are never disturbed. The highlight is merged with
:attr:`MergePolicy.KEEP_NEW`, so only an earlier search highlight on the same
characters is replaced; bold, links, colors and so on survive.

Examples
--------
    >>> from styledsearch.text import StyledText, STRONG
    >>> doc = StyledText.from_runs([("Hello", {STRONG: True}), (" world, hello!", None)])
    >>> result = apply_highlights(doc, "hello", current_match_index=0)
    >>> result.match_count
    2
    >>> result.matches[0]
    TextRange(start=0, end=5)

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

from styledsearch.highlight.attribute import SEARCH_HIGHLIGHT, SearchHighlightAttribute
from styledsearch.highlight.locator import iter_matches
from styledsearch.options.search import SearchOptions
from styledsearch.text.attributes import AttributeContainer, MergePolicy
from styledsearch.text.styled import StyledText, TextRange

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class Highlightable(Protocol):
    """Capabilities the highlighter needs from a styled text type.

    :class:`~styledsearch.text.StyledText` implements it; any other immutable
    rich text type with the same three members can be highlighted too.
    """

    @property
    def plain_text(self) -> str: ...

    def range_for(self, start_offset: int, end_offset: int) -> TextRange | None: ...

    def merging_attributes(
        self, text_range: Optional[TextRange], attributes: AttributeContainer, policy: MergePolicy = ...
    ) -> Self: ...


DocumentT = TypeVar("DocumentT", bound=Highlightable)


@dataclass(frozen=True)
class HighlightResult(Generic[DocumentT]):
    """Result of applying search highlights to styled text.

    Parameters
    ----------
    highlighted : Highlightable
        The styled text with search highlights applied, of the input's type
    matches : tuple of TextRange
        Character ranges of all matches, in document order

    """

    highlighted: DocumentT
    matches: tuple[TextRange, ...] = ()

    @property
    def match_count(self) -> int:
        """Return the number of matches found."""
        return len(self.matches)


def annotate(
    document: DocumentT, start_offset: int, end_offset: int, is_current: bool
) -> tuple[DocumentT, TextRange] | None:
    """Map a plain-text match onto ``document`` and merge a highlight over it.

    Parameters
    ----------
    document : Highlightable
        Styled text to annotate
    start_offset, end_offset : int
        Plain-text code point offsets of the match
    is_current : bool
        Value for :attr:`SearchHighlightAttribute.is_current`

    Returns
    -------
    tuple of (Highlightable, TextRange) or None
        The annotated text and the match's character range, or None when the
        offsets do not fall on character boundaries of ``document``

    """
    text_range = document.range_for(start_offset, end_offset)
    if text_range is None:
        return None
    highlight = AttributeContainer({SEARCH_HIGHLIGHT: SearchHighlightAttribute(is_current=is_current)})
    return document.merging_attributes(text_range, highlight, MergePolicy.KEEP_NEW), text_range


def apply_highlights(
    document: DocumentT,
    query: str,
    current_match_index: Optional[int] = None,
    options: Optional[SearchOptions] = None,
) -> HighlightResult[DocumentT]:
    """Find every occurrence of ``query`` in ``document`` and highlight it.

    Parameters
    ----------
    document : Highlightable
        The styled text to search, usually a :class:`StyledText`; it is not
        modified
    query : str
        Search query. An empty query returns ``document`` unchanged with no
        matches.
    current_match_index : int, optional
        Zero-based index of the match to mark as current. None, or an index
        outside ``[0, match_count)``, marks no match as current.
    options : SearchOptions, optional
        Case and diacritic sensitivity; defaults to :meth:`SearchOptions.default`

    Returns
    -------
    HighlightResult
        The highlighted styled text and the match ranges

    Notes
    -----
    A match whose offsets split a grapheme cluster of ``document`` (possible
    with decomposed accents and diacritic-sensitive search) is dropped: it
    gets no highlight and does not count toward ``match_count``. The index
    used for ``current_match_index`` counts kept matches only.

    """
    if not query:
        return HighlightResult(highlighted=document, matches=())

    options = options or SearchOptions.default()
    highlighted: DocumentT = document
    matches: list[TextRange] = []

    for start_offset, end_offset in iter_matches(document.plain_text, query, options):
        is_current = current_match_index is not None and len(matches) == current_match_index
        annotated = annotate(highlighted, start_offset, end_offset, is_current)
        if annotated is None:
            logger.debug("Dropping match at offsets [%d, %d): not on a character boundary", start_offset, end_offset)
            continue
        highlighted, text_range = annotated
        matches.append(text_range)

    logger.debug("Found %d match(es) for query %r", len(matches), query)
    return HighlightResult(highlighted=highlighted, matches=tuple(matches))


def remove_highlights(document: StyledText) -> StyledText:
    """Return ``document`` without any search highlight attributes."""
    return document.removing_attribute(SEARCH_HIGHLIGHT)


def highlighted_ranges(document: StyledText) -> list[tuple[TextRange, SearchHighlightAttribute]]:
    """Return the highlighted spans of ``document`` and their attributes.

    Adjacent matches with the same ``is_current`` value touch without a gap
    and are reported as a single span; use :attr:`HighlightResult.matches`
    for the individual match ranges.
    """
    return document.runs_for(SEARCH_HIGHLIGHT)


__all__ = [
    "Highlightable",
    "HighlightResult",
    "annotate",
    "apply_highlights",
    "remove_highlights",
    "highlighted_ranges",
]
