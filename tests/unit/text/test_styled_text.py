#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/text/test_styled_text.py
"""Unit tests for the StyledText type.

Tests cover:
- Construction, runs and coalescing
- Grapheme cluster indexing and offset mapping
- Attribute merge, replace, set and remove
- Slicing, concatenation, equality and immutability

"""

import pytest

from styledsearch.exceptions import InvalidRangeError, ValidationError
from styledsearch.text import (
    EMPHASIS,
    FOREGROUND_COLOR,
    LINK,
    STRONG,
    AttributeContainer,
    MergePolicy,
    StyledText,
    TextRange,
)


@pytest.mark.unit
class TestTextRange:
    """Tests for TextRange."""

    def test_length_and_empty(self):
        """Test range length and emptiness."""
        assert len(TextRange(2, 5)) == 3
        assert TextRange(3, 3).is_empty
        assert not TextRange(0, 1).is_empty

    def test_invalid_bounds(self):
        """Test that negative or inverted ranges are rejected."""
        with pytest.raises(ValidationError):
            TextRange(3, 1)
        with pytest.raises(ValidationError):
            TextRange(-1, 2)

    def test_overlaps_and_contains(self):
        """Test overlap and containment checks."""
        assert TextRange(0, 4).overlaps(TextRange(3, 6))
        assert not TextRange(0, 3).overlaps(TextRange(3, 6))
        assert TextRange(2, 4).contains(2)
        assert not TextRange(2, 4).contains(4)

    def test_ordering(self):
        """Test that ranges sort by start, then end."""
        assert sorted([TextRange(5, 9), TextRange(0, 4)]) == [TextRange(0, 4), TextRange(5, 9)]


@pytest.mark.unit
class TestConstruction:
    """Tests for building styled text."""

    def test_plain_text(self):
        """Test a single-run styled text."""
        doc = StyledText("hello")

        assert doc.plain_text == "hello"
        assert str(doc) == "hello"
        assert len(doc) == 5
        assert len(doc.runs) == 1
        assert doc.runs[0].attributes == AttributeContainer()

    def test_empty_text(self):
        """Test empty styled text has no runs."""
        doc = StyledText("")

        assert len(doc) == 0
        assert doc.runs == ()

    def test_rejects_non_string(self):
        """Test that only strings are accepted."""
        with pytest.raises(ValidationError):
            StyledText(123)

    def test_from_runs(self, bold_document):
        """Test building styled text from pieces."""
        runs = bold_document.runs

        assert bold_document.plain_text == "bold text here"
        assert len(runs) == 2
        assert runs[0].range == TextRange(0, 4)
        assert runs[0].text == "bold"
        assert runs[0].attributes[STRONG] is True
        assert runs[1].range == TextRange(4, 14)
        assert STRONG not in runs[1].attributes

    def test_adjacent_equal_runs_coalesce(self):
        """Test that pieces with equal attributes merge into one run."""
        doc = StyledText.from_runs([("a", {STRONG: True}), ("b", {STRONG: True}), ("", {EMPHASIS: True})])

        assert len(doc.runs) == 1
        assert doc == StyledText("ab", {STRONG: True})

    def test_combining_mark_at_piece_start_joins_previous_cluster(self):
        """Test that a cluster split across pieces takes the first piece's attributes."""
        doc = StyledText.from_runs([("e", {STRONG: True}), ("\u0301x", None)])

        assert len(doc) == 2
        assert doc.runs[0].text == "e\u0301"
        assert doc.runs[0].attributes[STRONG] is True
        assert doc.runs[1].text == "x"


@pytest.mark.unit
class TestCharacters:
    """Tests for grapheme cluster indexing."""

    def test_combining_mark_is_one_character(self):
        """Test that a decomposed accent counts as one character."""
        doc = StyledText("e\u0301x")

        assert len(doc) == 2
        assert doc.characters == ("e\u0301", "x")

    def test_crlf_is_one_character(self):
        """Test that CRLF is a single character."""
        assert len(StyledText("a\r\nb")) == 3

    def test_zwj_sequence_is_one_character(self):
        """Test that a zero width joiner sequence is a single character."""
        assert len(StyledText("\U0001f469\u200d\U0001f4bb")) == 1

    def test_skin_tone_modifier_is_one_character(self):
        """Test that an emoji modifier attaches to its base."""
        assert len(StyledText("\U0001f44d\U0001f3fd!")) == 2

    def test_index_access(self):
        """Test indexing single characters."""
        doc = StyledText("e\u0301xy")

        assert doc[0] == "e\u0301"
        assert doc[-1] == "y"
        with pytest.raises(IndexError):
            doc[10]


@pytest.mark.unit
class TestOffsetMapping:
    """Tests for mapping plain-text offsets to character indices."""

    def test_index_for_offset(self):
        """Test mapping offsets on and off cluster boundaries."""
        doc = StyledText("e\u0301x")

        assert doc.index_for_offset(0) == 0
        assert doc.index_for_offset(1) is None
        assert doc.index_for_offset(2) == 1
        assert doc.index_for_offset(3) == 2
        assert doc.index_for_offset(4) is None
        assert doc.index_for_offset(-1) is None

    def test_offset_for_index(self):
        """Test mapping character indices back to offsets."""
        doc = StyledText("e\u0301x")

        assert doc.offset_for_index(1) == 2
        assert doc.offset_for_index(2) == 3
        with pytest.raises(InvalidRangeError):
            doc.offset_for_index(3)

    def test_range_for(self):
        """Test mapping offset pairs to ranges."""
        doc = StyledText("e\u0301x")

        assert doc.range_for(0, 2) == TextRange(0, 1)
        assert doc.range_for(0, 3) == TextRange(0, 2)
        assert doc.range_for(0, 1) is None
        assert doc.range_for(2, 0) is None

    def test_plain_range(self):
        """Test converting a character range to offsets."""
        assert StyledText("e\u0301xy").plain_range(TextRange(1, 3)) == (2, 4)


@pytest.mark.unit
class TestAttributeUpdates:
    """Tests for merging and replacing attributes."""

    def test_merge_preserves_other_attributes(self):
        """Test that a merge leaves unrelated attributes in place."""
        doc = StyledText("hello world", {FOREGROUND_COLOR: "red"})
        merged = doc.merging_attributes(TextRange(0, 5), {STRONG: True})

        assert merged.value(FOREGROUND_COLOR) == "red"
        assert merged.value(STRONG, TextRange(0, 5)) is True
        assert merged.value(STRONG, TextRange(6, 11)) is None
        assert doc.value(STRONG) is None

    def test_merge_policy(self):
        """Test keep-new and keep-current conflict resolution."""
        doc = StyledText("link", {LINK: "https://a.test"})

        keep_new = doc.merging_attributes(None, {LINK: "https://b.test"}, MergePolicy.KEEP_NEW)
        keep_current = doc.merging_attributes(None, {LINK: "https://b.test"}, MergePolicy.KEEP_CURRENT)

        assert keep_new.value(LINK) == "https://b.test"
        assert keep_current.value(LINK) == "https://a.test"

    def test_setting_attributes_replaces_everything(self):
        """Test that setting attributes drops what was there."""
        doc = StyledText("hello", {FOREGROUND_COLOR: "red"})
        updated = doc.setting_attributes(TextRange(0, 2), {STRONG: True})

        assert updated.value(FOREGROUND_COLOR, TextRange(0, 2)) is None
        assert updated.value(FOREGROUND_COLOR, TextRange(2, 5)) == "red"
        assert updated.value(STRONG, TextRange(0, 2)) is True

    def test_with_and_removing_attribute(self):
        """Test setting and removing a single attribute."""
        doc = StyledText("hello").with_attribute(EMPHASIS, True, TextRange(1, 4))

        assert doc.value(EMPHASIS, TextRange(1, 4)) is True
        assert len(doc.runs) == 3
        assert doc.removing_attribute(EMPHASIS) == StyledText("hello")
        assert doc.with_attribute(EMPHASIS, None) == StyledText("hello")

    def test_empty_range_is_a_no_op(self):
        """Test that updating an empty range returns the same value."""
        doc = StyledText("hello")

        assert doc.merging_attributes(TextRange(2, 2), {STRONG: True}) is doc

    def test_out_of_bounds_range_raises(self):
        """Test that ranges past the end are rejected."""
        with pytest.raises(InvalidRangeError):
            StyledText("hello").merging_attributes(TextRange(0, 99), {STRONG: True})

    def test_value_is_none_when_not_uniform(self):
        """Test reading an attribute that varies over the range."""
        doc = StyledText.from_runs([("ab", {LINK: "https://a.test"}), ("cd", {LINK: "https://b.test"})])

        assert doc.value(LINK, TextRange(0, 2)) == "https://a.test"
        assert doc.value(LINK) is None
        assert doc.value(LINK, TextRange(1, 1)) is None

    def test_attributes_at(self, bold_document):
        """Test reading the attributes of one character."""
        assert bold_document.attributes_at(0)[STRONG] is True
        assert STRONG not in bold_document.attributes_at(5)
        with pytest.raises(InvalidRangeError):
            bold_document.attributes_at(99)

    def test_runs_for_joins_runs_with_same_value(self):
        """Test per-attribute spans ignore changes in other attributes."""
        doc = (
            StyledText("abcdefg")
            .with_attribute(STRONG, True, TextRange(0, 4))
            .with_attribute(EMPHASIS, True, TextRange(2, 3))
            .with_attribute(STRONG, True, TextRange(5, 7))
        )

        assert doc.runs_for(STRONG) == [(TextRange(0, 4), True), (TextRange(5, 7), True)]


@pytest.mark.unit
class TestValueSemantics:
    """Tests for slicing, concatenation, equality and immutability."""

    def test_slicing(self, bold_document):
        """Test that slices keep their attributes."""
        assert bold_document[0:4] == StyledText("bold", {STRONG: True})
        assert bold_document[2:6] == StyledText.from_runs([("ld", {STRONG: True}), (" t", None)])
        assert bold_document[5:2] == StyledText("")

    def test_slicing_with_step_raises(self, bold_document):
        """Test that stepped slices are rejected."""
        with pytest.raises(ValidationError):
            bold_document[::2]

    def test_concatenation(self):
        """Test joining two styled texts."""
        doc = StyledText("ab") + StyledText("cd", {STRONG: True})

        assert doc.plain_text == "abcd"
        assert doc.value(STRONG, TextRange(2, 4)) is True
        assert doc.value(STRONG, TextRange(0, 2)) is None

    def test_equality_and_hash(self):
        """Test structural equality independent of construction history."""
        built = StyledText("ab").with_attribute(STRONG, True)
        direct = StyledText("ab", {STRONG: True})

        assert built == direct
        assert hash(built) == hash(direct)
        assert len({built, direct}) == 1
        assert built != StyledText("ab")

    def test_immutable(self):
        """Test that attributes cannot be assigned."""
        doc = StyledText("hello")
        with pytest.raises(AttributeError):
            doc._text = "changed"

    def test_repr(self, bold_document):
        """Test that repr shows runs."""
        assert repr(bold_document).startswith("StyledText.from_runs([('bold', AttributeContainer(")
