"""Pytest configuration and shared fixtures for the styledsearch test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from styledsearch.text import FOREGROUND_COLOR, STRONG, StyledText

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def bold_document() -> StyledText:
    """Provide styled text with a bold word followed by plain text.

    Returns
    -------
    StyledText
        ``"bold text here"`` with ``"bold"`` marked strong

    """
    return StyledText.from_runs([("bold", {STRONG: True}), (" text here", None)])


@pytest.fixture
def colored_document() -> StyledText:
    """Provide styled text whose every character carries a foreground color."""
    return StyledText("test text", {FOREGROUND_COLOR: "red"})
