"""Pydantic models for scanned SVG content."""

from svgtikz.models.path_command import CommandKind, PathCommand
from svgtikz.models.svg_node import SvgNode

__all__ = ["CommandKind", "PathCommand", "SvgNode"]
