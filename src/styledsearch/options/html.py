"""Configuration options for the HTML renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from styledsearch.options.base import CloneFrozenMixin
from styledsearch.options.environment import TextEnvironment


@dataclass(frozen=True)
class HtmlRendererOptions(CloneFrozenMixin):
    """Options for rendering styled text as inline HTML.

    Parameters
    ----------
    escape_html : bool, default True
        Escape HTML special characters in text and attribute values
    highlight_classes : bool, default True
        Add ``search-match`` / ``search-match-current`` classes to highlights
    highlight_styles : bool, default True
        Add an inline ``background-color`` style to highlights
    environment : TextEnvironment
        Color scheme and highlight colors

    """

    escape_html: bool = field(
        default=True,
        metadata={"help": "Escape HTML special characters in text and attribute values", "importance": "security"},
    )
    highlight_classes: bool = field(
        default=True,
        metadata={"help": "Emit search-match CSS classes on highlighted runs", "importance": "core"},
    )
    highlight_styles: bool = field(
        default=True,
        metadata={"help": "Emit inline background-color styles on highlighted runs", "importance": "core"},
    )
    environment: TextEnvironment = field(
        default_factory=TextEnvironment,
        metadata={"help": "Color scheme and highlight colors used to resolve backgrounds", "importance": "advanced"},
    )


__all__ = ["HtmlRendererOptions"]
