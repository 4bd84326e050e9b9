"""Property-based tests for search highlighting.

This test module uses Hypothesis to generate styled text, queries and current
match indices, and checks the invariants every highlight result must satisfy.

Test Coverage:
- Property: Empty query returns the document unchanged
- Property: match_count equals the number of match ranges
- Property: Matches are non-empty, ordered, non-overlapping and in bounds
- Property: At most one match is current, and only the selected one
- Property: Unrelated attributes survive highlighting
- Property: Re-applying the same highlights changes nothing
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from styledsearch.highlight import SEARCH_HIGHLIGHT, apply_highlights, locate, remove_highlights
from styledsearch.options import SearchOptions
from styledsearch.text import FOREGROUND_COLOR, STRONG, StyledText

# Small alphabet with case pairs, precomposed and decomposed accents, and "ß"
# so that matches are frequent and folding edge cases are exercised.
ALPHABET = st.sampled_from(["a", "b", "A", "B", " ", "e", "E", "\u00e9", "\u00c9", "\u0301", "\u00df", "s"])

texts = st.text(alphabet=ALPHABET, max_size=40)
queries = st.text(alphabet=ALPHABET, min_size=1, max_size=4)
options = st.builds(SearchOptions, case_insensitive=st.booleans(), diacritic_insensitive=st.booleans())
indices = st.one_of(st.none(), st.integers(min_value=-2, max_value=12))


@st.composite
def styled_texts(draw):
    """Build styled text from a few pieces, some of them bold."""
    pieces = draw(st.lists(st.tuples(texts, st.booleans()), max_size=4))
    return StyledText.from_runs([(text, {STRONG: True} if bold else None) for text, bold in pieces])


@pytest.mark.unit
@pytest.mark.fuzzing
class TestHighlightProperties:
    """Property-based tests for apply_highlights using Hypothesis."""

    @given(styled_texts(), indices, options)
    def test_empty_query_returns_document_unchanged(self, document, index, search_options):
        """Property: An empty query yields the input document and no matches."""
        result = apply_highlights(document, "", current_match_index=index, options=search_options)

        assert result.highlighted == document
        assert result.matches == ()

    @given(styled_texts(), queries, indices, options)
    def test_matches_are_ordered_and_disjoint(self, document, query, index, search_options):
        """Property: Matches are non-empty, in bounds and strictly left to right."""
        result = apply_highlights(document, query, current_match_index=index, options=search_options)

        assert result.match_count == len(result.matches)
        for match in result.matches:
            assert 0 <= match.start < match.end <= len(document)
        for previous, following in zip(result.matches, result.matches[1:]):
            assert previous.end <= following.start

    @given(styled_texts(), queries, indices, options)
    def test_current_match_is_exclusive(self, document, query, index, search_options):
        """Property: Exactly the selected match is current, or none when out of range."""
        result = apply_highlights(document, query, current_match_index=index, options=search_options)

        flags = [result.highlighted.value(SEARCH_HIGHLIGHT, match).is_current for match in result.matches]
        if index is not None and 0 <= index < result.match_count:
            assert flags.count(True) == 1
            assert flags[index] is True
        else:
            assert True not in flags

    @given(texts, queries, options)
    def test_unrelated_attributes_survive(self, text, query, search_options):
        """Property: A foreground color covering the text is still there afterwards."""
        document = StyledText(text, {FOREGROUND_COLOR: "red"})
        result = apply_highlights(document, query, options=search_options)

        for run in result.highlighted.runs:
            assert run.attributes[FOREGROUND_COLOR] == "red"

    @given(styled_texts(), queries, indices, options)
    def test_reapplying_is_idempotent(self, document, query, index, search_options):
        """Property: Highlighting twice with the same inputs equals highlighting once."""
        once = apply_highlights(document, query, current_match_index=index, options=search_options)
        twice = apply_highlights(once.highlighted, query, current_match_index=index, options=search_options)

        assert twice.highlighted == once.highlighted
        assert twice.matches == once.matches

    @given(styled_texts(), queries, options)
    def test_removing_highlights_restores_document(self, document, query, search_options):
        """Property: Highlighting only ever adds the search highlight attribute."""
        result = apply_highlights(document, query, options=search_options)

        assert remove_highlights(result.highlighted) == document

    @given(texts, queries, options)
    def test_kept_matches_never_exceed_located(self, text, query, search_options):
        """Property: Dropping unmappable matches can only shrink the match list."""
        located = locate(text, query, search_options)
        result = apply_highlights(StyledText(text), query, options=search_options)

        assert result.match_count <= len(located)
