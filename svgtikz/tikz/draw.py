"""The TikZ ``\\draw`` statement."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgtikz.tikz.attributes import Attribute, attributes_to_tikz
from svgtikz.tikz.primitives import PathSection


@dataclass
class TikzDraw:
    """A single ``\\draw[options] path ;`` statement."""

    attributes: list[Attribute] = field(default_factory=list)
    path_sections: list[PathSection] = field(default_factory=list)

    def __str__(self) -> str:
        attrs = attributes_to_tikz(self.attributes)
        path = " ".join(str(s) for s in self.path_sections)
        # An empty path still renders; "\draw[...]  ;" is legal TikZ.
        return f"\\draw[{attrs}] {path} ;"
