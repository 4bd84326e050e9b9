#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/highlight/attribute.py
"""The search highlight attribute attached to matched ranges.

``SearchHighlightAttribute`` marks a range of styled text as a search match.
Its only field, ``is_current``, distinguishes the match selected for
navigation from the others; renderers turn it into a background color.

Examples
--------
    >>> from styledsearch.text import StyledText, TextRange
    >>> doc = StyledText("Hello world")
    >>> doc = doc.with_attribute(SEARCH_HIGHLIGHT, SearchHighlightAttribute(is_current=True), TextRange(6, 11))
    >>> doc.value(SEARCH_HIGHLIGHT, TextRange(6, 11))
    SearchHighlightAttribute(is_current=True)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from styledsearch.constants import SEARCH_HIGHLIGHT_ATTRIBUTE_NAME
from styledsearch.text.attributes import AttributeContainer, AttributeKey, register_attribute_key


@dataclass(frozen=True)
class SearchHighlightAttribute:
    """Marks a range of text as a search match.

    Parameters
    ----------
    is_current : bool
        True for the active/selected match, False for every other match

    """

    is_current: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dictionary."""
        return {"is_current": self.is_current}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchHighlightAttribute":
        """Rebuild the attribute from :meth:`to_dict` output.

        Raises
        ------
        ValueError
            If ``is_current`` is missing or not a boolean

        """
        is_current = data.get("is_current") if isinstance(data, Mapping) else None
        if not isinstance(is_current, bool):
            raise ValueError(f"Search highlight requires a boolean 'is_current', got {data!r}")
        return cls(is_current=is_current)


SEARCH_HIGHLIGHT = register_attribute_key(
    AttributeKey(
        SEARCH_HIGHLIGHT_ATTRIBUTE_NAME,
        SearchHighlightAttribute,
        encode=SearchHighlightAttribute.to_dict,
        decode=SearchHighlightAttribute.from_dict,
    )
)


def get_search_highlight(attributes: AttributeContainer) -> SearchHighlightAttribute | None:
    """Return the search highlight stored in ``attributes``, if any."""
    return attributes.get(SEARCH_HIGHLIGHT)


def with_search_highlight(
    attributes: AttributeContainer, highlight: SearchHighlightAttribute | None
) -> AttributeContainer:
    """Return ``attributes`` with the search highlight set (or cleared when None)."""
    return attributes.updated(SEARCH_HIGHLIGHT, highlight)


__all__ = [
    "SearchHighlightAttribute",
    "SEARCH_HIGHLIGHT",
    "get_search_highlight",
    "with_search_highlight",
]
