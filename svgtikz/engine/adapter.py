"""Command adapter — one SVG path command in, one TikZ path section out.

Only absolute move, line and cubic-curve commands plus close are supported.
"""

from __future__ import annotations

import logging

from svgtikz.exceptions import UnsupportedCommandError
from svgtikz.models.path_command import CommandKind, PathCommand
from svgtikz.tikz.primitives import Curve, Cycle, Line, Move, PathSection, Point

logger = logging.getLogger(__name__)


def section_from_command(cmd: PathCommand) -> PathSection:
    """Map a PathCommand to its TikZ section, or raise UnsupportedCommandError."""
    # Close has no coordinates, so its letter case carries no meaning.
    if cmd.kind is CommandKind.CLOSE:
        return Cycle()

    if cmd.relative:
        raise _unsupported(cmd)

    p = cmd.params
    if cmd.kind is CommandKind.MOVE:
        return Move(Point(p[0], p[1]))
    if cmd.kind is CommandKind.LINE:
        return Line(Point(p[0], p[1]))
    if cmd.kind is CommandKind.CUBIC_CURVE:
        return Curve(Point(p[0], p[1]), Point(p[2], p[3]), Point(p[4], p[5]))

    raise _unsupported(cmd)


def _unsupported(cmd: PathCommand) -> UnsupportedCommandError:
    err = UnsupportedCommandError(cmd)
    logger.warning("%s", err)
    return err
