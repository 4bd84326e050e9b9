#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/styledsearch/renderers/base.py
"""Base class for styled text renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from styledsearch.text.styled import StyledText


class BaseRenderer(ABC):
    """Abstract base class for all styled text renderers.

    Subclasses implement :meth:`render_to_string`; :meth:`render` writes that
    string to a path or text stream.

    Parameters
    ----------
    options : Any, optional
        Renderer-specific options

    """

    def __init__(self, options: Any = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, text: StyledText) -> str:
        """Render ``text`` and return the output as a string."""

    def render(self, text: StyledText, output: Union[str, Path, IO[str]]) -> None:
        """Render ``text`` to a file path or writable text stream.

        Parameters
        ----------
        text : StyledText
            Styled text to render
        output : str, Path, or IO[str]
            Destination path or stream

        """
        content = self.render_to_string(text)
        if isinstance(output, (str, Path)):
            Path(output).write_text(content, encoding="utf-8")
        else:
            output.write(content)
