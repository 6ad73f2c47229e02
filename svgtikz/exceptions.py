"""Translation errors.

Every failure surfaces as a subclass of TranslationError so callers can tell
bad documents, unsupported drawing features and I/O problems apart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgtikz.models.path_command import PathCommand


class TranslationError(Exception):
    """Base class for all svgtikz errors."""


class InputReadError(TranslationError):
    """The input stream could not be read in full."""


class DocumentParseError(TranslationError):
    """The input is not a well-formed SVG/XML document."""


class MissingPathDataError(TranslationError):
    """A <path> element has no ``d`` attribute."""


class PathDataSyntaxError(TranslationError):
    """The ``d`` attribute value is not valid path data."""


class UnsupportedCommandError(TranslationError):
    """A path command has no TikZ counterpart in the supported set."""

    def __init__(self, command: PathCommand) -> None:
        self.command = command
        super().__init__(
            f"Unsupported path command {command.letter!r} "
            f"({command.kind.value}, {'relative' if command.relative else 'absolute'}): "
            f"{command.params}"
        )
