#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Styled text: characters plus typed attribute runs."""

from styledsearch.text.attributes import (
    BACKGROUND_COLOR,
    CODE,
    EMPHASIS,
    FOREGROUND_COLOR,
    LINK,
    STRIKETHROUGH,
    STRONG,
    AttributeContainer,
    AttributeKey,
    MergePolicy,
    get_attribute_key,
    register_attribute_key,
    registered_attribute_keys,
)
from styledsearch.text.styled import Run, StyledText, TextRange

__all__ = [
    "AttributeContainer",
    "AttributeKey",
    "MergePolicy",
    "Run",
    "StyledText",
    "TextRange",
    "get_attribute_key",
    "register_attribute_key",
    "registered_attribute_keys",
    "STRONG",
    "EMPHASIS",
    "CODE",
    "STRIKETHROUGH",
    "LINK",
    "FOREGROUND_COLOR",
    "BACKGROUND_COLOR",
]
