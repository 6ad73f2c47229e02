"""svgtikz: translate SVG path data into a TikZ \\draw statement.

Example:
    >>> from svgtikz import translate_string
    >>> print(translate_string('<svg><path d="M0,0 L10,10 Z"/></svg>'))
    \\draw[fill,even odd rule,line width=1] (0.0000, 0.0000) --(10.0000, 10.0000) --cycle ;
"""

from svgtikz.config import Settings, configure_logging
from svgtikz.engine.translator import parse_svg, translate, translate_string
from svgtikz.exceptions import (
    DocumentParseError,
    InputReadError,
    MissingPathDataError,
    PathDataSyntaxError,
    TranslationError,
    UnsupportedCommandError,
)
from svgtikz.tikz import TikzDraw

__version__ = "0.1.0"

__all__ = [
    # Main API
    "parse_svg",
    "translate",
    "translate_string",
    "TikzDraw",
    # Configuration
    "Settings",
    "configure_logging",
    # Exceptions
    "TranslationError",
    "InputReadError",
    "DocumentParseError",
    "MissingPathDataError",
    "PathDataSyntaxError",
    "UnsupportedCommandError",
    # Metadata
    "__version__",
]
