"""Configuration options for locating search matches."""

from __future__ import annotations

from dataclasses import dataclass, field

from styledsearch.constants import DEFAULT_CASE_INSENSITIVE, DEFAULT_DIACRITIC_INSENSITIVE
from styledsearch.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class SearchOptions(CloneFrozenMixin):
    """Text comparison toggles used when locating matches.

    Both flags are independent; every combination is a distinct comparison
    mode. Two options values are equal when their flags are equal.

    Parameters
    ----------
    case_insensitive : bool, default True
        Treat any casing of the query as equivalent (``str.casefold``).
    diacritic_insensitive : bool, default True
        Treat base letters as equivalent regardless of attached combining marks.

    """

    case_insensitive: bool = field(
        default=DEFAULT_CASE_INSENSITIVE,
        metadata={
            "help": "Ignore case differences when comparing the query with the text",
            "importance": "core",
        },
    )
    diacritic_insensitive: bool = field(
        default=DEFAULT_DIACRITIC_INSENSITIVE,
        metadata={
            "help": "Ignore accents and other combining marks when comparing the query with the text",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate flag types at construction time."""
        if not isinstance(self.case_insensitive, bool):
            raise TypeError(f"case_insensitive must be a bool, got {type(self.case_insensitive).__name__}")
        if not isinstance(self.diacritic_insensitive, bool):
            raise TypeError(f"diacritic_insensitive must be a bool, got {type(self.diacritic_insensitive).__name__}")

    @classmethod
    def default(cls) -> "SearchOptions":
        """Return the default options: case- and diacritic-insensitive."""
        return _DEFAULT_SEARCH_OPTIONS


_DEFAULT_SEARCH_OPTIONS = SearchOptions()


__all__ = ["SearchOptions"]
