#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/highlight/locator.py
"""Locate query occurrences in plain text.

The locator folds the text one code point at a time (see
:func:`styledsearch.utils.text.fold_character`) while recording which source
code point produced each folded character, then puts combining marks into
canonical order so that equivalent spellings compare equal. The folded query
is found with ``str.find`` and every hit is mapped back to code point offsets
of the original text. Because folding can change lengths (``"\\u00c9"``
becomes ``"e"`` under the default options, ``"\\u00df"`` becomes ``"ss"``),
offsets returned here always refer to the unfolded text.

Matches are leftmost-first and non-overlapping: after a hit the search
resumes at its end, so ``"aa"`` is found twice, not three times, in
``"aaaa"``.
"""

from __future__ import annotations

import logging
from itertools import accumulate
from typing import Iterator, NamedTuple

from styledsearch.options.search import SearchOptions
from styledsearch.utils.text import canonical_reorder, fold_character, fold_text

logger = logging.getLogger(__name__)


class FoldedText(NamedTuple):
    """Folded text plus the source offset of every folded character."""

    text: str
    origins: list[int]
    widths: list[int]


def fold_with_origins(plain_text: str, options: SearchOptions) -> FoldedText:
    """Fold ``plain_text`` for comparison, keeping a map back to source offsets.

    Parameters
    ----------
    plain_text : str
        Text to fold
    options : SearchOptions
        Case and diacritic sensitivity

    Returns
    -------
    FoldedText
        ``text`` is the folded string, ``origins[k]`` is the source offset of
        folded character ``k`` and ``widths[i]`` is the number of folded
        characters source code point ``i`` produced (0 when it folded away)

    """
    chars: list[tuple[str, int]] = []
    widths: list[int] = []
    for offset, char in enumerate(plain_text):
        folded = fold_character(
            char,
            case_insensitive=options.case_insensitive,
            diacritic_insensitive=options.diacritic_insensitive,
        )
        chars.extend((folded_char, offset) for folded_char in folded)
        widths.append(len(folded))
    chars = canonical_reorder(chars)
    return FoldedText("".join(char for char, _ in chars), [offset for _, offset in chars], widths)


def iter_matches(plain_text: str, query: str, options: SearchOptions | None = None) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` code point offsets of each match, left to right.

    A hit must account for whole source code points: when it takes only part
    of the folded form of a code point (``"s"`` against ``"\\u00df"``, or one
    of two reordered marks) it is skipped and the search continues one
    folded character later. A hit is extended over any following code points
    that folded away, so a decomposed accent stays with its base letter.

    Parameters
    ----------
    plain_text : str
        Text to search
    query : str
        Text to look for; an empty query (or one that folds to nothing)
        yields no matches
    options : SearchOptions, optional
        Comparison mode; defaults to :meth:`SearchOptions.default`

    Yields
    ------
    tuple of (int, int)
        Non-empty, non-overlapping half-open offset ranges

    """
    if not query or not plain_text:
        return
    options = options or SearchOptions.default()

    folded_query = fold_text(
        query,
        case_insensitive=options.case_insensitive,
        diacritic_insensitive=options.diacritic_insensitive,
    )
    if not folded_query:
        logger.debug("Query %r folds to an empty string; no matches", query)
        return

    folded = fold_with_origins(plain_text, options)
    origins = folded.origins
    # folded characters produced by source code points [0, i)
    produced = list(accumulate(folded.widths, initial=0))
    cursor = 0
    while cursor < len(folded.text):
        found = folded.text.find(folded_query, cursor)
        if found < 0:
            break
        end = found + len(folded_query)

        hit = origins[found:end]
        start_offset = min(hit)
        end_offset = max(hit) + 1
        if produced[end_offset] - produced[start_offset] != end - found:
            cursor = found + 1
            continue

        while end_offset < len(plain_text) and not folded.widths[end_offset]:
            end_offset += 1
        yield start_offset, end_offset

        cursor = end


def locate(plain_text: str, query: str, options: SearchOptions | None = None) -> list[tuple[int, int]]:
    """Return all match offsets of ``query`` in ``plain_text``.

    See :func:`iter_matches` for the matching rules.
    """
    return list(iter_matches(plain_text, query, options))


__all__ = ["FoldedText", "fold_with_origins", "iter_matches", "locate"]
