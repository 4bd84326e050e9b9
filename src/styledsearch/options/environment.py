#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/options/environment.py
"""Ambient rendering environment: color scheme and highlight colors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from styledsearch.constants import (
    DEFAULT_COLOR_SCHEME,
    DEFAULT_SEARCH_MATCH_BACKGROUND_DARK,
    DEFAULT_SEARCH_MATCH_BACKGROUND_LIGHT,
    DEFAULT_SEARCH_MATCH_CURRENT_BACKGROUND_DARK,
    DEFAULT_SEARCH_MATCH_CURRENT_BACKGROUND_LIGHT,
)
from styledsearch.options.base import CloneFrozenMixin


class ColorScheme(Enum):
    """Light or dark appearance."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class DynamicColor:
    """A color with separate values for light and dark appearance.

    Colors are CSS color strings (``"#ffcc00"``, ``"rgba(255, 255, 0, 0.5)"``).
    """

    light: str
    dark: str

    @classmethod
    def uniform(cls, color: str) -> "DynamicColor":
        """Return a dynamic color that uses ``color`` in both schemes."""
        return cls(light=color, dark=color)

    def resolve(self, scheme: ColorScheme) -> str:
        """Return the color for ``scheme``."""
        return self.dark if scheme is ColorScheme.DARK else self.light


ColorLike = Union[str, DynamicColor]


def _as_dynamic(color: ColorLike) -> DynamicColor:
    return color if isinstance(color, DynamicColor) else DynamicColor.uniform(color)


@dataclass(frozen=True)
class TextEnvironment(CloneFrozenMixin):
    """Environment values consulted when styled text is rendered.

    Parameters
    ----------
    color_scheme : ColorScheme, default LIGHT
        Appearance used to resolve dynamic colors
    search_match_background : DynamicColor
        Background for search matches that are not current
    search_match_current_background : DynamicColor
        Background for the current search match

    """

    color_scheme: ColorScheme = field(
        default=ColorScheme(DEFAULT_COLOR_SCHEME),
        metadata={"help": "Appearance used to resolve light/dark colors", "importance": "core"},
    )
    search_match_background: DynamicColor = field(
        default=DynamicColor(
            light=DEFAULT_SEARCH_MATCH_BACKGROUND_LIGHT,
            dark=DEFAULT_SEARCH_MATCH_BACKGROUND_DARK,
        ),
        metadata={"help": "Background color for search matches that are not current", "importance": "core"},
    )
    search_match_current_background: DynamicColor = field(
        default=DynamicColor(
            light=DEFAULT_SEARCH_MATCH_CURRENT_BACKGROUND_LIGHT,
            dark=DEFAULT_SEARCH_MATCH_CURRENT_BACKGROUND_DARK,
        ),
        metadata={"help": "Background color for the currently selected search match", "importance": "core"},
    )

    def with_search_highlight_colors(self, match: ColorLike, current_match: ColorLike) -> "TextEnvironment":
        """Return a copy using the given highlight colors.

        Plain strings apply to both light and dark appearance.
        """
        return self.create_updated(
            search_match_background=_as_dynamic(match),
            search_match_current_background=_as_dynamic(current_match),
        )


__all__ = ["ColorScheme", "DynamicColor", "TextEnvironment"]
