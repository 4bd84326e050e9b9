#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/text/attributes.py
"""Typed attributes and attribute containers for styled text.

An :class:`AttributeKey` names one kind of attribute (bold, link target,
search highlight, ...) and declares the Python type of its values. An
:class:`AttributeContainer` is an immutable mapping from keys to values; it is
what every run of a :class:`~styledsearch.text.StyledText` carries.

Keys are registered in a process-wide registry so serialized styled text can
be decoded by attribute name. Registration happens at import time of the
module that defines the key.

Examples
--------
    >>> from styledsearch.text.attributes import STRONG, LINK, AttributeContainer
    >>> attrs = AttributeContainer({STRONG: True})
    >>> attrs = attrs.updated(LINK, "https://example.com")
    >>> attrs[STRONG], attrs[LINK]
    (True, 'https://example.com')
    >>> STRONG in attrs.updated(STRONG, None)
    False

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union

from styledsearch.constants import (
    BACKGROUND_COLOR_ATTRIBUTE_NAME,
    CODE_ATTRIBUTE_NAME,
    EMPHASIS_ATTRIBUTE_NAME,
    FOREGROUND_COLOR_ATTRIBUTE_NAME,
    LINK_ATTRIBUTE_NAME,
    STRIKETHROUGH_ATTRIBUTE_NAME,
    STRONG_ATTRIBUTE_NAME,
)
from styledsearch.exceptions import ValidationError


class MergePolicy(Enum):
    """Conflict policy used when merging one container into another.

    ``KEEP_NEW`` lets the incoming value win for keys present on both sides;
    ``KEEP_CURRENT`` keeps the existing value. Keys present on only one side
    are always kept.
    """

    KEEP_NEW = "keep_new"
    KEEP_CURRENT = "keep_current"


@dataclass(frozen=True)
class AttributeKey:
    """Identifies one kind of attribute and the type of its values.

    Parameters
    ----------
    name : str
        Unique, stable name used for registration and serialization
    value_type : type or tuple of type
        Accepted value type(s), checked with ``isinstance``. Values must be
        hashable because containers and styled text are hashable, so types
        such as ``list`` or ``dict`` are rejected
    encode : callable, optional
        Converts a value to a JSON-compatible object for serialization
    decode : callable, optional
        Inverse of ``encode``

    Notes
    -----
    Equality and hashing use ``name`` and ``value_type`` only.

    """

    name: str
    value_type: Union[type, tuple[type, ...]]
    encode: Optional[Callable[[Any], Any]] = field(default=None, compare=False, repr=False)
    decode: Optional[Callable[[Any], Any]] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the key name and value type."""
        if not self.name:
            raise ValidationError("Attribute key name cannot be empty", parameter_name="name", parameter_value=self.name)
        types = self.value_type if isinstance(self.value_type, tuple) else (self.value_type,)
        for value_type in types:
            if getattr(value_type, "__hash__", None) is None:
                raise ValidationError(
                    f"Attribute {self.name!r} value type {value_type.__name__} is not hashable",
                    parameter_name="value_type",
                    parameter_value=value_type,
                )

    def validate(self, value: Any) -> None:
        """Raise :class:`ValidationError` if ``value`` is not of this key's type."""
        if not isinstance(value, self.value_type):
            raise ValidationError(
                f"Attribute {self.name!r} expects {self._type_name()}, got {type(value).__name__}",
                parameter_name=self.name,
                parameter_value=value,
            )
        try:
            hash(value)
        except TypeError as e:
            raise ValidationError(
                f"Attribute {self.name!r} value must be hashable",
                parameter_name=self.name,
                parameter_value=value,
            ) from e

    def _type_name(self) -> str:
        if isinstance(self.value_type, tuple):
            return " or ".join(t.__name__ for t in self.value_type)
        return self.value_type.__name__


_ATTRIBUTE_KEYS: dict[str, AttributeKey] = {}


def register_attribute_key(key: AttributeKey) -> AttributeKey:
    """Register ``key`` by name and return it.

    Registering the same key twice is a no-op; registering a different key
    under an existing name raises :class:`ValidationError`.
    """
    existing = _ATTRIBUTE_KEYS.get(key.name)
    if existing is not None and existing != key:
        raise ValidationError(
            f"Attribute key {key.name!r} is already registered with a different value type",
            parameter_name="name",
            parameter_value=key.name,
        )
    _ATTRIBUTE_KEYS[key.name] = key
    return key


def get_attribute_key(name: str) -> AttributeKey | None:
    """Return the registered key called ``name``, or None."""
    return _ATTRIBUTE_KEYS.get(name)


def registered_attribute_keys() -> list[AttributeKey]:
    """Return all registered keys sorted by name."""
    return sorted(_ATTRIBUTE_KEYS.values(), key=lambda key: key.name)


class AttributeContainer(Mapping[AttributeKey, Any]):
    """Immutable mapping of attribute keys to values.

    ``None`` values are treated as "attribute absent" and are dropped at
    construction, which is how :meth:`updated` clears a key. Containers
    compare equal when they hold the same keys with equal values.

    Parameters
    ----------
    values : mapping or iterable of (AttributeKey, value) pairs, optional
        Initial attribute values

    Raises
    ------
    ValidationError
        If a key is not an AttributeKey or a value does not match its key's type

    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[AttributeKey, Any] | Iterable[tuple[AttributeKey, Any]] | None = None):
        """Build the container, validating every key/value pair."""
        validated: dict[AttributeKey, Any] = {}
        for key, value in dict(values or {}).items():
            if not isinstance(key, AttributeKey):
                raise ValidationError(
                    f"Attribute keys must be AttributeKey instances, got {type(key).__name__}",
                    parameter_name="key",
                    parameter_value=key,
                )
            if value is None:
                continue
            key.validate(value)
            validated[key] = value
        self._values = validated

    @classmethod
    def coerce(cls, value: "AttributeContainer | Mapping[AttributeKey, Any] | None") -> "AttributeContainer":
        """Return ``value`` as a container, building one from a mapping or None."""
        if isinstance(value, AttributeContainer):
            return value
        return cls(value)

    def __getitem__(self, key: AttributeKey) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[AttributeKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeContainer):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{key.name}={value!r}" for key, value in self._values.items())
        return f"AttributeContainer({inner})"

    def updated(self, key: AttributeKey, value: Any) -> "AttributeContainer":
        """Return a copy with ``key`` set to ``value``, or removed when ``value`` is None."""
        values = dict(self._values)
        values[key] = value
        return AttributeContainer(values)

    def removing(self, key: AttributeKey) -> "AttributeContainer":
        """Return a copy without ``key``."""
        return self.updated(key, None)

    def merged(self, other: "AttributeContainer", policy: MergePolicy = MergePolicy.KEEP_NEW) -> "AttributeContainer":
        """Merge ``other`` into a copy of this container.

        Only keys present in ``other`` can change; every other key keeps its
        current value.

        Parameters
        ----------
        other : AttributeContainer
            Incoming attributes
        policy : MergePolicy, default KEEP_NEW
            Which side wins when a key is present in both containers

        Returns
        -------
        AttributeContainer
            The merged container

        """
        values = dict(self._values)
        for key, value in other.items():
            if policy is MergePolicy.KEEP_CURRENT and key in values:
                continue
            values[key] = value
        return AttributeContainer(values)


# Built-in inline formatting keys, mirroring the inline nodes of a markdown AST
STRONG = register_attribute_key(AttributeKey(STRONG_ATTRIBUTE_NAME, bool))
EMPHASIS = register_attribute_key(AttributeKey(EMPHASIS_ATTRIBUTE_NAME, bool))
CODE = register_attribute_key(AttributeKey(CODE_ATTRIBUTE_NAME, bool))
STRIKETHROUGH = register_attribute_key(AttributeKey(STRIKETHROUGH_ATTRIBUTE_NAME, bool))
LINK = register_attribute_key(AttributeKey(LINK_ATTRIBUTE_NAME, str))
FOREGROUND_COLOR = register_attribute_key(AttributeKey(FOREGROUND_COLOR_ATTRIBUTE_NAME, str))
BACKGROUND_COLOR = register_attribute_key(AttributeKey(BACKGROUND_COLOR_ATTRIBUTE_NAME, str))


__all__ = [
    "MergePolicy",
    "AttributeKey",
    "AttributeContainer",
    "register_attribute_key",
    "get_attribute_key",
    "registered_attribute_keys",
    "STRONG",
    "EMPHASIS",
    "CODE",
    "STRIKETHROUGH",
    "LINK",
    "FOREGROUND_COLOR",
    "BACKGROUND_COLOR",
]
