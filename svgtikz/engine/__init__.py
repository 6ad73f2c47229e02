"""SVG path to TikZ translation engine."""

from svgtikz.engine.adapter import section_from_command
from svgtikz.engine.translator import DEFAULT_ATTRIBUTES, parse_svg, translate, translate_string

__all__ = [
    "section_from_command",
    "DEFAULT_ATTRIBUTES",
    "parse_svg",
    "translate",
    "translate_string",
]
