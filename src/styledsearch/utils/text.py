#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/utils/text.py
"""Unicode text utilities shared by the styled text type and the locator.

Functions
---------
grapheme_boundaries : Code point offsets where user-perceived characters start
strip_diacritics : Remove non-spacing marks after canonical decomposition
fold_character : Fold one code point for comparison
canonical_reorder : Put combining marks in canonical order, keeping a tag per mark
fold_text : Fold a whole string for comparison

Examples
--------
Segmentation keeps combining marks with their base letter and pairs
regional indicators into flags:

    >>> grapheme_boundaries("cafe\\u0301!")
    (0, 1, 2, 3, 5, 6)
    >>> grapheme_boundaries("\\U0001F1FA\\U0001F1F8\\U0001F1EB\\U0001F1F7")
    (0, 2, 4)

Folding under the default search options:

    >>> fold_text("CAF\\u00c9", case_insensitive=True, diacritic_insensitive=True)
    'cafe'

"""

from __future__ import annotations

import unicodedata
from typing import Iterable, TypeVar

from styledsearch.constants import (
    EMOJI_MODIFIER_RANGE,
    EXTENDED_PICTOGRAPHIC_RANGES,
    HANGUL_L_RANGES,
    HANGUL_SYLLABLE_RANGE,
    HANGUL_T_COUNT,
    HANGUL_T_RANGES,
    HANGUL_V_RANGES,
    REGIONAL_INDICATOR_RANGE,
    TAG_CHARACTER_RANGE,
    VARIATION_SELECTOR_RANGES,
    ZERO_WIDTH_JOINER,
    ZERO_WIDTH_NON_JOINER,
)

TagT = TypeVar("TagT")

# Grapheme cluster break classes
_CR = "CR"
_LF = "LF"
_CONTROL = "Control"
_EXTEND = "Extend"
_ZWJ = "ZWJ"
_REGIONAL_INDICATOR = "RI"
_L = "L"
_V = "V"
_T = "T"
_LV = "LV"
_LVT = "LVT"
_PICTOGRAPHIC = "Pictographic"
_OTHER = "Other"

_BREAK_AFTER = frozenset({_CR, _LF, _CONTROL})


def _in_ranges(codepoint: int, ranges: Iterable[tuple[int, int]]) -> bool:
    return any(low <= codepoint <= high for low, high in ranges)


def _break_class(char: str) -> str:
    """Classify ``char`` for grapheme cluster segmentation."""
    if char == "\r":
        return _CR
    if char == "\n":
        return _LF
    if char == ZERO_WIDTH_JOINER:
        return _ZWJ

    codepoint = ord(char)
    category = unicodedata.category(char)
    if (
        category.startswith("M")
        or char == ZERO_WIDTH_NON_JOINER
        or _in_ranges(codepoint, (EMOJI_MODIFIER_RANGE, TAG_CHARACTER_RANGE))
        or _in_ranges(codepoint, VARIATION_SELECTOR_RANGES)
    ):
        return _EXTEND
    if category in ("Cc", "Cf", "Zl", "Zp"):
        return _CONTROL
    if _in_ranges(codepoint, (REGIONAL_INDICATOR_RANGE,)):
        return _REGIONAL_INDICATOR
    if _in_ranges(codepoint, HANGUL_L_RANGES):
        return _L
    if _in_ranges(codepoint, HANGUL_V_RANGES):
        return _V
    if _in_ranges(codepoint, HANGUL_T_RANGES):
        return _T
    if _in_ranges(codepoint, (HANGUL_SYLLABLE_RANGE,)):
        return _LV if (codepoint - HANGUL_SYLLABLE_RANGE[0]) % HANGUL_T_COUNT == 0 else _LVT
    if _in_ranges(codepoint, EXTENDED_PICTOGRAPHIC_RANGES):
        return _PICTOGRAPHIC
    return _OTHER


def _joins_hangul(previous: str, current: str) -> bool:
    if previous == _L:
        return current in (_L, _V, _LV, _LVT)
    if previous in (_LV, _V):
        return current in (_V, _T)
    if previous in (_LVT, _T):
        return current == _T
    return False


def grapheme_boundaries(text: str) -> tuple[int, ...]:
    """Return the code point offsets at which each grapheme cluster starts.

    The returned tuple always ends with ``len(text)`` so that cluster ``i``
    spans ``text[bounds[i]:bounds[i + 1]]``.

    Segmentation follows the extended grapheme cluster rules of UAX #29:

    - CR LF stays together; any other control character stands alone
    - conjoining Hangul jamo join into syllables
    - combining marks, variation selectors, emoji modifiers and joiners
      attach to the preceding character
    - a zero width joiner glues two pictographs into one emoji sequence
    - regional indicators pair up into flags

    Prepend characters are not recognized, and pictographs are detected by
    Unicode block rather than from the emoji data files.

    Parameters
    ----------
    text : str
        Text to segment

    Returns
    -------
    tuple of int
        Cluster start offsets followed by ``len(text)``

    """
    bounds: list[int] = []
    previous = _OTHER
    # Regional indicators seen in a row, and whether the cluster so far is
    # a pictograph followed only by extenders (then "zwj" once a joiner follows)
    indicator_run = 0
    emoji_state = ""
    for offset, char in enumerate(text):
        current = _break_class(char)
        if offset == 0:
            joins = False
        elif previous == _CR and current == _LF:
            joins = True
        elif previous in _BREAK_AFTER or current in _BREAK_AFTER:
            joins = False
        elif _joins_hangul(previous, current):
            joins = True
        elif current in (_EXTEND, _ZWJ):
            joins = True
        elif emoji_state == "zwj" and current == _PICTOGRAPHIC:
            joins = True
        elif previous == _REGIONAL_INDICATOR and current == _REGIONAL_INDICATOR:
            joins = indicator_run % 2 == 1
        else:
            joins = False

        if not joins:
            bounds.append(offset)

        indicator_run = indicator_run + 1 if current == _REGIONAL_INDICATOR else 0
        if current == _PICTOGRAPHIC:
            emoji_state = "pictograph"
        elif current == _EXTEND and emoji_state == "pictograph":
            pass
        elif current == _ZWJ and emoji_state == "pictograph":
            emoji_state = "zwj"
        else:
            emoji_state = ""
        previous = current
    bounds.append(len(text))
    return tuple(bounds)


def strip_diacritics(text: str) -> str:
    """Decompose ``text`` (NFD) and drop non-spacing marks (category ``Mn``)."""
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")


def fold_character(char: str, *, case_insensitive: bool, diacritic_insensitive: bool) -> str:
    """Fold a single code point into its comparison form.

    The order is fixed: canonical decomposition (NFD), then case folding when
    ``case_insensitive``, then decomposition again and removal of non-spacing
    marks when ``diacritic_insensitive``.

    The result is decomposed but a code point does not see its neighbours,
    so marks contributed by adjacent code points may still be out of
    canonical order. :func:`canonical_reorder` fixes that for a sequence of
    folded code points.

    Parameters
    ----------
    char : str
        A single code point
    case_insensitive : bool
        Apply ``str.casefold``
    diacritic_insensitive : bool
        Remove combining marks

    Returns
    -------
    str
        Folded form; may be empty (a stripped mark) or longer than one code
        point (``"ß"`` folds to ``"ss"``)

    """
    folded = unicodedata.normalize("NFD", char)
    if case_insensitive:
        folded = folded.casefold()
    if diacritic_insensitive:
        folded = strip_diacritics(folded)
    elif case_insensitive:
        folded = unicodedata.normalize("NFD", folded)
    return folded


def canonical_reorder(items: list[tuple[str, TagT]]) -> list[tuple[str, TagT]]:
    """Sort each run of combining marks by canonical combining class.

    ``items`` pairs decomposed code points with a tag (such as a source
    offset) that travels with its code point. The sort is stable, so marks
    of equal class keep their order, which is the canonical ordering step
    of Unicode normalization.

    Examples
    --------
        >>> marks = canonical_reorder([("e", 0), ("\\u0302", 1), ("\\u0323", 2)])
        >>> [offset for _, offset in marks]
        [0, 2, 1]

    """
    ordered: list[tuple[str, TagT]] = []
    run: list[tuple[str, TagT]] = []
    for item in items:
        if unicodedata.combining(item[0]):
            run.append(item)
            continue
        if run:
            ordered.extend(sorted(run, key=lambda mark: unicodedata.combining(mark[0])))
            run = []
        ordered.append(item)
    if run:
        ordered.extend(sorted(run, key=lambda mark: unicodedata.combining(mark[0])))
    return ordered


def fold_text(text: str, *, case_insensitive: bool, diacritic_insensitive: bool) -> str:
    """Fold every code point of ``text`` and put the marks in canonical order."""
    chars = [
        (folded_char, offset)
        for offset, char in enumerate(text)
        for folded_char in fold_character(
            char, case_insensitive=case_insensitive, diacritic_insensitive=diacritic_insensitive
        )
    ]
    return "".join(char for char, _ in canonical_reorder(chars))


__all__ = [
    "grapheme_boundaries",
    "strip_diacritics",
    "fold_character",
    "canonical_reorder",
    "fold_text",
]
