#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the styledsearch library.

This module centralizes the hardcoded values used across styledsearch so
they can be discovered and overridden in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Search Defaults - Default search option values
3. Attribute Names - Registered names of built-in attribute keys
4. Highlight Colors - Default light/dark highlight backgrounds
5. Unicode Segmentation - Code point classes used to find grapheme clusters
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ColorSchemeName = Literal["light", "dark"]

# =============================================================================
# Search Defaults
# =============================================================================

DEFAULT_CASE_INSENSITIVE = True
DEFAULT_DIACRITIC_INSENSITIVE = True

# =============================================================================
# Attribute Names
# =============================================================================

SEARCH_HIGHLIGHT_ATTRIBUTE_NAME = "styledsearch.SearchHighlight"

STRONG_ATTRIBUTE_NAME = "styledsearch.Strong"
EMPHASIS_ATTRIBUTE_NAME = "styledsearch.Emphasis"
CODE_ATTRIBUTE_NAME = "styledsearch.Code"
STRIKETHROUGH_ATTRIBUTE_NAME = "styledsearch.Strikethrough"
LINK_ATTRIBUTE_NAME = "styledsearch.Link"
FOREGROUND_COLOR_ATTRIBUTE_NAME = "styledsearch.ForegroundColor"
BACKGROUND_COLOR_ATTRIBUTE_NAME = "styledsearch.BackgroundColor"

# =============================================================================
# Highlight Colors
# =============================================================================

# Yellow at 50% / 40% opacity for ordinary matches
DEFAULT_SEARCH_MATCH_BACKGROUND_LIGHT = "rgba(255, 255, 0, 0.5)"
DEFAULT_SEARCH_MATCH_BACKGROUND_DARK = "rgba(255, 255, 0, 0.4)"

# Orange at 60% / 50% opacity for the current match
DEFAULT_SEARCH_MATCH_CURRENT_BACKGROUND_LIGHT = "rgba(255, 165, 0, 0.6)"
DEFAULT_SEARCH_MATCH_CURRENT_BACKGROUND_DARK = "rgba(255, 165, 0, 0.5)"

DEFAULT_COLOR_SCHEME: ColorSchemeName = "light"

SEARCH_MATCH_CSS_CLASS = "search-match"
SEARCH_MATCH_CURRENT_CSS_CLASS = "search-match-current"

# =============================================================================
# Unicode Segmentation
# =============================================================================

ZERO_WIDTH_JOINER = "\u200d"

# Emoji modifier Fitzpatrick types 1-2 through 6
EMOJI_MODIFIER_RANGE = (0x1F3FB, 0x1F3FF)

# Variation selectors (VS1-VS16, VS17-VS256)
VARIATION_SELECTOR_RANGES = ((0xFE00, 0xFE0F), (0xE0100, 0xE01EF))

ZERO_WIDTH_NON_JOINER = "\u200c"

# Regional indicator symbols; two of them form one flag
REGIONAL_INDICATOR_RANGE = (0x1F1E6, 0x1F1FF)

# Tag characters that follow an emoji in subdivision flag sequences
TAG_CHARACTER_RANGE = (0xE0020, 0xE007F)

# Conjoining Hangul jamo: leading consonants, vowels and trailing consonants
HANGUL_L_RANGES = ((0x1100, 0x115F), (0xA960, 0xA97C))
HANGUL_V_RANGES = ((0x1160, 0x11A7), (0xD7B0, 0xD7C6))
HANGUL_T_RANGES = ((0x11A8, 0x11FF), (0xD7CB, 0xD7FB))

# Precomposed Hangul syllables; every 28th one has no trailing consonant
HANGUL_SYLLABLE_RANGE = (0xAC00, 0xD7A3)
HANGUL_T_COUNT = 28

# Blocks holding Extended_Pictographic code points. Regional indicators and
# emoji modifiers fall inside the first block but are classified first.
EXTENDED_PICTOGRAPHIC_RANGES = (
    (0x1F000, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
    (0x2600, 0x27BF),
    (0x2300, 0x23FF),
    (0x2B00, 0x2BFF),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
)
