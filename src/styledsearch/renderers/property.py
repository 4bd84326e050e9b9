#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/renderers/property.py
"""Text property that turns a search highlight into a background color."""

from __future__ import annotations

from dataclasses import dataclass

from styledsearch.highlight.attribute import SearchHighlightAttribute
from styledsearch.options.environment import TextEnvironment
from styledsearch.text.attributes import BACKGROUND_COLOR, AttributeContainer


@dataclass(frozen=True)
class SearchHighlightProperty:
    """Applies the search highlight background for one match.

    Parameters
    ----------
    is_current : bool, default False
        Use the current-match color instead of the ordinary match color

    """

    is_current: bool = False

    @classmethod
    def search_highlight(cls) -> "SearchHighlightProperty":
        """Property for matches that are not current."""
        return cls(is_current=False)

    @classmethod
    def search_highlight_current(cls) -> "SearchHighlightProperty":
        """Property for the currently selected match."""
        return cls(is_current=True)

    @classmethod
    def for_attribute(cls, highlight: SearchHighlightAttribute) -> "SearchHighlightProperty":
        """Property matching a highlight attribute found on a run."""
        return cls(is_current=highlight.is_current)

    def apply(self, attributes: AttributeContainer, environment: TextEnvironment) -> AttributeContainer:
        """Return ``attributes`` with the resolved highlight background set."""
        color = (
            environment.search_match_current_background if self.is_current else environment.search_match_background
        )
        return attributes.updated(BACKGROUND_COLOR, color.resolve(environment.color_scheme))


__all__ = ["SearchHighlightProperty"]
