"""SVG scanning and path-data parsing facades."""

from svgtikz.svg.path_data import parse_path_data
from svgtikz.svg.scanner import iter_nodes

__all__ = ["iter_nodes", "parse_path_data"]
