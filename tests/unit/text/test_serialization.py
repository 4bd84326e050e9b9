#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for styled text JSON serialization."""

import json

import pytest

from styledsearch.exceptions import SerializationError
from styledsearch.highlight import apply_highlights
from styledsearch.text import FOREGROUND_COLOR, LINK, STRONG, StyledText
from styledsearch.text.serialization import (
    dict_to_styled_text,
    json_to_styled_text,
    styled_text_to_dict,
    styled_text_to_json,
)


@pytest.mark.unit
class TestSerialization:
    """Tests for converting styled text to dictionaries and JSON."""

    def test_to_dict(self, bold_document):
        """Test the dictionary layout."""
        assert styled_text_to_dict(bold_document) == {
            "runs": [
                {"text": "bold", "attributes": {"styledsearch.Strong": True}},
                {"text": " text here", "attributes": {}},
            ]
        }

    def test_empty_text(self):
        """Test serializing empty styled text."""
        assert styled_text_to_dict(StyledText("")) == {"runs": []}
        assert dict_to_styled_text({"runs": []}) == StyledText("")

    def test_search_highlight_encoding(self):
        """Test that highlights are written as objects."""
        result = apply_highlights(StyledText("a b"), "b", current_match_index=0)
        data = styled_text_to_dict(result.highlighted)

        assert data["runs"][1] == {"text": "b", "attributes": {"styledsearch.SearchHighlight": {"is_current": True}}}

    def test_json_round_trip_with_highlights(self):
        """Test that highlighted, formatted text survives JSON."""
        document = StyledText.from_runs(
            [("caf\u00e9 ", {STRONG: True}), ("menu", {LINK: "https://a.test", FOREGROUND_COLOR: "#333"})]
        )
        highlighted = apply_highlights(document, "e", current_match_index=1).highlighted

        assert json_to_styled_text(styled_text_to_json(highlighted)) == highlighted

    def test_json_keeps_non_ascii(self):
        """Test that JSON output is not ASCII-escaped."""
        assert "caf\u00e9" in styled_text_to_json(StyledText("caf\u00e9"))

    def test_json_indent(self, bold_document):
        """Test pretty-printed output."""
        output = styled_text_to_json(bold_document, indent=2)

        assert "\n  " in output
        assert json.loads(output) == styled_text_to_dict(bold_document)


@pytest.mark.unit
class TestDeserializationErrors:
    """Tests for rejecting malformed serialized data."""

    def test_invalid_json(self):
        """Test that unparsable JSON raises SerializationError."""
        with pytest.raises(SerializationError, match="Invalid JSON") as exc_info:
            json_to_styled_text("{not json")

        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    @pytest.mark.parametrize("data", [[], {}, {"runs": "text"}])
    def test_missing_runs(self, data):
        """Test that the top-level structure is checked."""
        with pytest.raises(SerializationError):
            dict_to_styled_text(data)

    def test_malformed_run(self):
        """Test that each run needs text."""
        with pytest.raises(SerializationError, match="Malformed run"):
            dict_to_styled_text({"runs": [{"attributes": {}}]})

    def test_attributes_must_be_object(self):
        """Test that run attributes must be a mapping."""
        with pytest.raises(SerializationError):
            dict_to_styled_text({"runs": [{"text": "a", "attributes": ["bold"]}]})

    def test_unknown_attribute(self):
        """Test that unregistered attribute names are rejected."""
        with pytest.raises(SerializationError, match="Unknown attribute key: tests.Nope"):
            dict_to_styled_text({"runs": [{"text": "a", "attributes": {"tests.Nope": True}}]})

    def test_wrong_value_type(self):
        """Test that values failing validation are wrapped."""
        with pytest.raises(SerializationError):
            dict_to_styled_text({"runs": [{"text": "a", "attributes": {"styledsearch.Strong": "yes"}}]})

    def test_bad_highlight_value(self):
        """Test that a malformed highlight value is wrapped."""
        with pytest.raises(SerializationError) as exc_info:
            dict_to_styled_text({"runs": [{"text": "a", "attributes": {"styledsearch.SearchHighlight": {}}}]})

        assert isinstance(exc_info.value.original_error, ValueError)
