"""TikZ draw-statement model and text rendering."""

from svgtikz.tikz.attributes import Attribute, Param, Setting, attributes_to_tikz
from svgtikz.tikz.draw import TikzDraw
from svgtikz.tikz.primitives import Curve, Cycle, Line, Move, PathSection, Point

__all__ = [
    "Attribute",
    "Setting",
    "Param",
    "attributes_to_tikz",
    "TikzDraw",
    "Point",
    "PathSection",
    "Move",
    "Line",
    "Curve",
    "Cycle",
]
