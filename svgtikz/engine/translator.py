"""Translate orchestrator — SVG document bytes to a TikZ ``\\draw`` statement.

Only the first <path> element of a document is translated; any later path
elements are skipped.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from svgtikz.config import Settings
from svgtikz.engine.adapter import section_from_command
from svgtikz.exceptions import InputReadError, MissingPathDataError
from svgtikz.svg.path_data import parse_path_data
from svgtikz.svg.scanner import iter_nodes
from svgtikz.tikz.attributes import Attribute
from svgtikz.tikz.draw import TikzDraw

logger = logging.getLogger(__name__)

# Emitted for every drawing; not derived from the SVG styling.
DEFAULT_ATTRIBUTES: tuple[Attribute, ...] = (
    Attribute.setting("fill"),
    Attribute.setting("even odd rule"),
    Attribute.param("line width", "1"),
)


def parse_svg(stream: BinaryIO, config: Settings | None = None) -> TikzDraw:
    """Read an SVG document and build the draw statement for its first path."""
    data = _read_all(stream)

    draw = TikzDraw(attributes=list(DEFAULT_ATTRIBUTES))

    found = False
    for node in iter_nodes(data, config):
        if not node.is_path:
            continue

        d = node.attributes.get("d")
        if d is None:
            logger.warning("<path> element on line %s has no 'd' attribute", node.line)
            raise MissingPathDataError(f"<path> element on line {node.line} has no 'd' attribute")

        draw.path_sections = [section_from_command(cmd) for cmd in parse_path_data(d)]
        found = True
        break

    if found:
        logger.info("Translated path: %d sections", len(draw.path_sections))
    else:
        logger.info("No <path> element found; emitting empty draw statement")
    return draw


def translate(stream: BinaryIO, config: Settings | None = None) -> str:
    """Translate an SVG document stream to TikZ source text."""
    return str(parse_svg(stream, config))


def translate_string(svg_text: str, config: Settings | None = None) -> str:
    """Translate SVG markup held in a string."""
    return translate(io.BytesIO(svg_text.encode("utf-8")), config)


def _read_all(stream: BinaryIO) -> bytes:
    """Read the whole stream up front; scanning happens in memory."""
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        # ValueError: read from a closed stream
        logger.warning("Failed to read SVG input: %s", e)
        raise InputReadError(f"Failed to read SVG input: {e}") from e

    if not isinstance(data, bytes):
        logger.warning("SVG input stream returned %s, expected bytes", type(data).__name__)
        raise InputReadError(f"SVG input stream returned {type(data).__name__}, expected bytes")
    return data
