"""Typed path-data command model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CommandKind(str, Enum):
    MOVE = "move"
    LINE = "line"
    HORIZONTAL_LINE = "horizontal_line"
    VERTICAL_LINE = "vertical_line"
    CUBIC_CURVE = "cubic_curve"
    SMOOTH_CUBIC_CURVE = "smooth_cubic_curve"
    QUADRATIC_CURVE = "quadratic_curve"
    SMOOTH_QUADRATIC_CURVE = "smooth_quadratic_curve"
    ARC = "arc"
    CLOSE = "close"


_LETTERS: dict[CommandKind, str] = {
    CommandKind.MOVE: "M",
    CommandKind.LINE: "L",
    CommandKind.HORIZONTAL_LINE: "H",
    CommandKind.VERTICAL_LINE: "V",
    CommandKind.CUBIC_CURVE: "C",
    CommandKind.SMOOTH_CUBIC_CURVE: "S",
    CommandKind.QUADRATIC_CURVE: "Q",
    CommandKind.SMOOTH_QUADRATIC_CURVE: "T",
    CommandKind.ARC: "A",
    CommandKind.CLOSE: "Z",
}


class PathCommand(BaseModel):
    """A single drawing command from an SVG ``d`` attribute.

    ``params`` hold canvas coordinates as resolved by the path-data parser,
    even for relative commands; ``relative`` records the case of the original
    command letter.
    """

    kind: CommandKind
    relative: bool = False
    params: list[float] = Field(default_factory=list)

    @property
    def letter(self) -> str:
        letter = _LETTERS[self.kind]
        return letter.lower() if self.relative else letter
