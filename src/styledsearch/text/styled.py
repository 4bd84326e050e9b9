#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/text/styled.py
"""Immutable styled ("attributed") text.

A :class:`StyledText` is a string plus a partition of its characters into
runs, each run carrying one :class:`AttributeContainer`. Two index spaces
are involved:

- **Plain-text offsets** are ordinary Python code point offsets into
  :attr:`StyledText.plain_text`.
- **Character indices** (the native index space) count grapheme clusters,
  so ``"e\\u0301"`` is a single character. Attribute ranges and
  :class:`TextRange` values are expressed in character indices.

Converting an offset to an index fails (returns None) when the offset falls
inside a grapheme cluster; callers decide how to degrade.

Every operation returns a new value. Adjacent runs with equal attributes are
coalesced, so two styled texts with the same characters and the same
per-character attributes compare equal however they were built.

Examples
--------
    >>> from styledsearch.text import StyledText, TextRange, STRONG
    >>> doc = StyledText.from_runs([("bold", {STRONG: True}), (" text", None)])
    >>> doc.plain_text
    'bold text'
    >>> doc.value(STRONG, TextRange(0, 4))
    True
    >>> doc.range_for(5, 9)
    TextRange(start=5, end=9)

"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union

from styledsearch.exceptions import InvalidRangeError, ValidationError
from styledsearch.text.attributes import AttributeContainer, AttributeKey, MergePolicy
from styledsearch.utils.text import grapheme_boundaries

AttributesLike = Union[AttributeContainer, Mapping[AttributeKey, Any], None]


@dataclass(frozen=True, order=True)
class TextRange:
    """Half-open range ``[start, end)`` of character indices.

    Parameters
    ----------
    start : int
        First character index in the range
    end : int
        Index one past the last character

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Reject negative or inverted bounds."""
        if self.start < 0 or self.end < self.start:
            raise ValidationError(
                f"Invalid text range [{self.start}, {self.end})",
                parameter_name="range",
                parameter_value=(self.start, self.end),
            )

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Return True when the range covers no characters."""
        return self.start == self.end

    def overlaps(self, other: "TextRange") -> bool:
        """Return True when both ranges share at least one character."""
        return self.start < other.end and other.start < self.end

    def contains(self, index: int) -> bool:
        """Return True when ``index`` lies inside the range."""
        return self.start <= index < self.end


@dataclass(frozen=True)
class Run:
    """A maximal span of characters sharing one set of attributes."""

    range: TextRange
    text: str
    attributes: AttributeContainer


class StyledText:
    """Immutable text with attribute runs.

    Parameters
    ----------
    text : str, default ""
        The characters of the styled text
    attributes : AttributeContainer or mapping, optional
        Attributes applied to the whole text

    """

    __slots__ = ("_text", "_bounds", "_runs")

    _text: str
    _bounds: tuple[int, ...]
    _runs: tuple[tuple[int, AttributeContainer], ...]

    def __init__(self, text: str = "", attributes: AttributesLike = None):
        """Create styled text with a single run."""
        if not isinstance(text, str):
            raise ValidationError(
                f"StyledText expects str, got {type(text).__name__}", parameter_name="text", parameter_value=text
            )
        bounds = grapheme_boundaries(text)
        container = AttributeContainer.coerce(attributes)
        self._init(text, bounds, ((len(bounds) - 1, container),))

    def _init(self, text: str, bounds: tuple[int, ...], runs: Iterable[tuple[int, AttributeContainer]]) -> None:
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_bounds", bounds)
        object.__setattr__(self, "_runs", _coalesce(runs))

    @classmethod
    def _from_parts(
        cls, text: str, bounds: tuple[int, ...], runs: Iterable[tuple[int, AttributeContainer]]
    ) -> "StyledText":
        instance = cls.__new__(cls)
        instance._init(text, bounds, runs)
        return instance

    @classmethod
    def from_runs(cls, parts: Iterable[tuple[str, AttributesLike]]) -> "StyledText":
        """Build styled text by concatenating ``(text, attributes)`` pieces.

        Grapheme clusters are computed over the joined text. When a piece
        boundary falls inside a cluster (a combining mark opening the next
        piece), the whole cluster takes the attributes of the piece its first
        code point belongs to.

        Parameters
        ----------
        parts : iterable of (str, attributes)
            Text pieces and the attributes to apply to each

        Returns
        -------
        StyledText
            The concatenated styled text

        """
        pieces = [(text, AttributeContainer.coerce(attributes)) for text, attributes in parts]
        text = "".join(piece for piece, _ in pieces)
        bounds = grapheme_boundaries(text)
        cluster_count = len(bounds) - 1

        runs: list[tuple[int, AttributeContainer]] = []
        piece_start = 0
        for piece, attributes in pieces:
            piece_end = piece_start + len(piece)
            first = bisect_left(bounds, piece_start, 0, cluster_count)
            last = bisect_left(bounds, piece_end, 0, cluster_count)
            runs.append((last - first, attributes))
            piece_start = piece_end
        return cls._from_parts(text, bounds, runs)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("StyledText is immutable")

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def plain_text(self) -> str:
        """Return the characters with all styling stripped."""
        return self._text

    @property
    def characters(self) -> tuple[str, ...]:
        """Return the grapheme clusters of the text."""
        bounds = self._bounds
        return tuple(self._text[bounds[i] : bounds[i + 1]] for i in range(len(bounds) - 1))

    @property
    def runs(self) -> tuple[Run, ...]:
        """Return the maximal attribute runs in order."""
        return tuple(self._iter_runs())

    def _iter_runs(self) -> Iterator[Run]:
        start = 0
        for length, attributes in self._runs:
            end = start + length
            text = self._text[self._bounds[start] : self._bounds[end]]
            yield Run(TextRange(start, end), text, attributes)
            start = end

    def __len__(self) -> int:
        return len(self._bounds) - 1

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        parts = ", ".join(f"({run.text!r}, {run.attributes!r})" for run in self._iter_runs())
        return f"StyledText.from_runs([{parts}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._text == other._text and self._runs == other._runs

    def __hash__(self) -> int:
        return hash((self._text, self._runs))

    def __add__(self, other: "StyledText") -> "StyledText":
        if not isinstance(other, StyledText):
            return NotImplemented
        parts = [(run.text, run.attributes) for run in self._iter_runs()]
        parts.extend((run.text, run.attributes) for run in other._iter_runs())
        return StyledText.from_runs(parts)

    def __getitem__(self, key: Union[int, slice]) -> Union[str, "StyledText"]:
        if isinstance(key, slice):
            start, stop, step = key.indices(len(self))
            if step != 1:
                raise ValidationError("StyledText slicing does not support a step", parameter_name="step")
            return self.substring(TextRange(start, max(start, stop)))
        index = key + len(self) if key < 0 else key
        if not 0 <= index < len(self):
            raise IndexError("StyledText index out of range")
        return self._text[self._bounds[index] : self._bounds[index + 1]]

    def substring(self, text_range: TextRange) -> "StyledText":
        """Return the styled text covering ``text_range``."""
        self._check_range(text_range)
        segments = [
            (min(end, text_range.end) - max(start, text_range.start), attributes)
            for start, end, attributes in self._segments()
            if start < text_range.end and end > text_range.start
        ]
        low = self._bounds[text_range.start]
        high = self._bounds[text_range.end]
        bounds = tuple(offset - low for offset in self._bounds[text_range.start : text_range.end + 1])
        return StyledText._from_parts(self._text[low:high], bounds, segments)

    def attributes_at(self, index: int) -> AttributeContainer:
        """Return the attributes of the character at ``index``."""
        if not 0 <= index < len(self):
            raise InvalidRangeError(index, index + 1, len(self))
        for start, end, attributes in self._segments():
            if start <= index < end:
                return attributes
        raise AssertionError("runs do not cover the text")  # pragma: no cover

    def value(self, key: AttributeKey, text_range: Optional[TextRange] = None) -> Any:
        """Return the value of ``key`` if it is uniform over ``text_range``.

        Parameters
        ----------
        key : AttributeKey
            Attribute to read
        text_range : TextRange, optional
            Range to inspect; the whole text when omitted

        Returns
        -------
        Any
            The shared value, or None when the range is empty, the attribute
            is absent somewhere in it, or its value varies

        """
        text_range = self._resolve_range(text_range)
        if text_range.is_empty:
            return None
        values = [
            attributes.get(key)
            for start, end, attributes in self._segments()
            if start < text_range.end and end > text_range.start
        ]
        if not values:
            return None
        first = values[0]
        if all(value == first for value in values[1:]):
            return first
        return None

    def runs_for(self, key: AttributeKey) -> list[tuple[TextRange, Any]]:
        """Return the maximal ranges over which ``key`` has one non-None value.

        Adjacent runs that differ only in other attributes are joined, so
        each entry describes one contiguous span of a single value.
        """
        spans: list[tuple[TextRange, Any]] = []
        for start, end, attributes in self._segments():
            value = attributes.get(key)
            if value is None:
                continue
            if spans and spans[-1][0].end == start and spans[-1][1] == value:
                spans[-1] = (TextRange(spans[-1][0].start, end), value)
            else:
                spans.append((TextRange(start, end), value))
        return spans

    # ------------------------------------------------------------------
    # Offset mapping
    # ------------------------------------------------------------------

    def index_for_offset(self, offset: int) -> int | None:
        """Map a plain-text code point offset to a character index.

        Returns None when ``offset`` is outside ``[0, len(plain_text)]`` or
        falls inside a grapheme cluster.
        """
        if not 0 <= offset <= len(self._text):
            return None
        index = bisect_left(self._bounds, offset)
        if index < len(self._bounds) and self._bounds[index] == offset:
            return index
        return None

    def offset_for_index(self, index: int) -> int:
        """Map a character index (``0..len(self)``) to its plain-text offset."""
        if not 0 <= index <= len(self):
            raise InvalidRangeError(index, index, len(self))
        return self._bounds[index]

    def range_for(self, start_offset: int, end_offset: int) -> TextRange | None:
        """Map plain-text offsets ``[start_offset, end_offset)`` to a character range.

        Returns None when either endpoint cannot be mapped or the offsets are
        inverted.
        """
        if end_offset < start_offset:
            return None
        start = self.index_for_offset(start_offset)
        if start is None:
            return None
        end = self.index_for_offset(end_offset)
        if end is None:
            return None
        return TextRange(start, end)

    def plain_range(self, text_range: TextRange) -> tuple[int, int]:
        """Return the plain-text offsets covered by ``text_range``."""
        self._check_range(text_range)
        return self._bounds[text_range.start], self._bounds[text_range.end]

    # ------------------------------------------------------------------
    # Attribute updates (all return new values)
    # ------------------------------------------------------------------

    def merging_attributes(
        self,
        text_range: Optional[TextRange],
        attributes: AttributesLike,
        policy: MergePolicy = MergePolicy.KEEP_NEW,
    ) -> "StyledText":
        """Merge ``attributes`` onto every run overlapping ``text_range``.

        Keys absent from ``attributes`` are left untouched; ``policy`` decides
        which value wins for keys present on both sides.

        Parameters
        ----------
        text_range : TextRange or None
            Characters to update; the whole text when None
        attributes : AttributeContainer or mapping
            Attributes to merge in
        policy : MergePolicy, default KEEP_NEW
            Conflict policy for keys already present

        Returns
        -------
        StyledText
            A new styled text; this one is unchanged

        Raises
        ------
        InvalidRangeError
            If ``text_range`` extends past the end of the text

        """
        incoming = AttributeContainer.coerce(attributes)
        return self._map_range(text_range, lambda current: current.merged(incoming, policy))

    def setting_attributes(self, text_range: Optional[TextRange], attributes: AttributesLike) -> "StyledText":
        """Replace all attributes over ``text_range`` with ``attributes``."""
        replacement = AttributeContainer.coerce(attributes)
        return self._map_range(text_range, lambda current: replacement)

    def with_attribute(self, key: AttributeKey, value: Any, text_range: Optional[TextRange] = None) -> "StyledText":
        """Set ``key`` to ``value`` over ``text_range`` (None clears it)."""
        return self._map_range(text_range, lambda current: current.updated(key, value))

    def removing_attribute(self, key: AttributeKey, text_range: Optional[TextRange] = None) -> "StyledText":
        """Remove ``key`` from every run overlapping ``text_range``."""
        return self._map_range(text_range, lambda current: current.removing(key))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _segments(self) -> Iterator[tuple[int, int, AttributeContainer]]:
        start = 0
        for length, attributes in self._runs:
            yield start, start + length, attributes
            start += length

    def _check_range(self, text_range: TextRange) -> None:
        if text_range.end > len(self):
            raise InvalidRangeError(text_range.start, text_range.end, len(self))

    def _resolve_range(self, text_range: Optional[TextRange]) -> TextRange:
        if text_range is None:
            return TextRange(0, len(self))
        self._check_range(text_range)
        return text_range

    def _map_range(
        self, text_range: Optional[TextRange], transform: Callable[[AttributeContainer], AttributeContainer]
    ) -> "StyledText":
        text_range = self._resolve_range(text_range)
        if text_range.is_empty:
            return self

        runs: list[tuple[int, AttributeContainer]] = []
        for start, end, attributes in self._segments():
            if end <= text_range.start or start >= text_range.end:
                runs.append((end - start, attributes))
                continue
            inner_start = max(start, text_range.start)
            inner_end = min(end, text_range.end)
            runs.append((inner_start - start, attributes))
            runs.append((inner_end - inner_start, transform(attributes)))
            runs.append((end - inner_end, attributes))
        return StyledText._from_parts(self._text, self._bounds, runs)


def _coalesce(runs: Iterable[tuple[int, AttributeContainer]]) -> tuple[tuple[int, AttributeContainer], ...]:
    """Drop empty runs and join neighbours with equal attributes."""
    merged: list[tuple[int, AttributeContainer]] = []
    for length, attributes in runs:
        if length <= 0:
            continue
        if merged and merged[-1][1] == attributes:
            merged[-1] = (merged[-1][0] + length, merged[-1][1])
        else:
            merged.append((length, attributes))
    return tuple(merged)


__all__ = ["TextRange", "Run", "StyledText"]
