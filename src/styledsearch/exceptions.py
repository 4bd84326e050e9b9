#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the styledsearch library.

This module defines the exception classes raised by the styled text type and
its serialization helpers. The highlight engine itself never raises for a
well-typed input: empty queries and unmappable matches degrade to "no match".

Exception Hierarchy
-------------------
- StyledSearchError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidRangeError (out-of-bounds or inverted text ranges)

  - SerializationError (malformed or unknown serialized data)

"""

from typing import Any


class StyledSearchError(Exception):
    """Base exception class for all styledsearch-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(StyledSearchError):
    """Exception raised for invalid input parameters or attribute values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidRangeError(ValidationError):
    """Exception raised when a text range does not fit the styled text.

    Parameters
    ----------
    start : int
        Start index of the offending range
    end : int
        End index of the offending range
    length : int
        Length of the styled text the range was applied to

    """

    def __init__(self, start: int, end: int, length: int):
        """Initialize the range error with the offending bounds."""
        super().__init__(
            f"Range [{start}, {end}) is invalid for styled text of length {length}",
            parameter_name="range",
            parameter_value=(start, end),
        )
        self.start = start
        self.end = end
        self.length = length


class SerializationError(StyledSearchError):
    """Exception raised when serialized styled text cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the decoding failure
    original_error : Exception, optional
        The underlying JSON or type error, if any

    """

    pass


__all__ = [
    "StyledSearchError",
    "ValidationError",
    "InvalidRangeError",
    "SerializationError",
]
