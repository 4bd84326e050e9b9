#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/text/serialization.py
"""JSON serialization and deserialization for styled text.

The JSON format stores the runs of a styled text in order:

    {
      "runs": [
        {"text": "Hello", "attributes": {"styledsearch.Strong": true}},
        {"text": " world", "attributes": {}}
      ]
    }

Attribute values are written with their key's ``encode`` hook when it has one
(the search highlight writes ``{"is_current": true}``) and must otherwise be
JSON-native. Decoding looks keys up by name in the attribute key registry.

Examples
--------
    >>> from styledsearch.text import StyledText, STRONG
    >>> from styledsearch.text.serialization import styled_text_to_json, json_to_styled_text
    >>> doc = StyledText("Hello", {STRONG: True})
    >>> json_to_styled_text(styled_text_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
from typing import Any

from styledsearch.exceptions import SerializationError, StyledSearchError
from styledsearch.text.attributes import AttributeContainer, get_attribute_key
from styledsearch.text.styled import StyledText


def _encode_attributes(attributes: AttributeContainer) -> dict[str, Any]:
    return {key.name: key.encode(value) if key.encode else value for key, value in attributes.items()}


def _decode_attributes(data: Any) -> AttributeContainer:
    if not isinstance(data, dict):
        raise SerializationError(f"Run attributes must be an object, got {type(data).__name__}")

    values = {}
    for name, raw in data.items():
        key = get_attribute_key(name)
        if key is None:
            raise SerializationError(f"Unknown attribute key: {name}")
        try:
            values[key] = key.decode(raw) if key.decode else raw
        except (TypeError, ValueError, KeyError) as e:
            raise SerializationError(f"Invalid value for attribute {name}: {raw!r}", original_error=e) from e

    try:
        return AttributeContainer(values)
    except StyledSearchError as e:
        raise SerializationError(e.message, original_error=e) from e


def styled_text_to_dict(text: StyledText) -> dict[str, Any]:
    """Convert styled text to a JSON-compatible dictionary.

    Parameters
    ----------
    text : StyledText
        Styled text to serialize

    Returns
    -------
    dict
        Dictionary with a ``runs`` list

    """
    return {"runs": [{"text": run.text, "attributes": _encode_attributes(run.attributes)} for run in text.runs]}


def dict_to_styled_text(data: dict[str, Any]) -> StyledText:
    """Rebuild styled text from :func:`styled_text_to_dict` output.

    Raises
    ------
    SerializationError
        If the structure is malformed or names an unregistered attribute

    """
    if not isinstance(data, dict) or not isinstance(data.get("runs"), list):
        raise SerializationError("Serialized styled text must be an object with a 'runs' list")

    parts = []
    for run in data["runs"]:
        if not isinstance(run, dict) or not isinstance(run.get("text"), str):
            raise SerializationError(f"Malformed run: {run!r}")
        parts.append((run["text"], _decode_attributes(run.get("attributes", {}))))
    return StyledText.from_runs(parts)


def styled_text_to_json(text: StyledText, indent: int | None = None) -> str:
    """Serialize styled text to a JSON string."""
    return json.dumps(styled_text_to_dict(text), indent=indent, ensure_ascii=False)


def json_to_styled_text(json_str: str) -> StyledText:
    """Deserialize styled text from a JSON string.

    Raises
    ------
    SerializationError
        If the string is not valid JSON or does not describe styled text

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}", original_error=e) from e
    return dict_to_styled_text(data)


__all__ = [
    "styled_text_to_dict",
    "dict_to_styled_text",
    "styled_text_to_json",
    "json_to_styled_text",
]
