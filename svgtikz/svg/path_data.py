"""Path-data parser — facade over svg.path.

Converts a ``d`` attribute string into typed PathCommands, keeping the
command kind and absolute/relative mode that svg.path records per segment.
"""

from __future__ import annotations

import logging
import re

from svg.path import Arc, Close, CubicBezier, Line, Move, QuadraticBezier, parse_path

from svgtikz.exceptions import PathDataSyntaxError
from svgtikz.models.path_command import CommandKind, PathCommand

logger = logging.getLogger(__name__)

_COMMAND_RE = re.compile(r"([MmZzLlHhVvCcSsQqTtAa])")
_NUMBER_RE = re.compile(r"[\s,]*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_FLAG_RE = re.compile(r"[\s,]*([01])")

# Parameters per repetition of each command.
_ARITY = {"M": 2, "L": 2, "T": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "A": 7, "Z": 0}


def parse_path_data(d: str) -> list[PathCommand]:
    """Parse path data into commands, in source order."""
    if not d.strip():
        return []

    _check_arity(d)

    try:
        path = parse_path(d)
    except (ValueError, AssertionError) as e:
        logger.warning("Failed to parse path data %r: %s", d, e)
        raise PathDataSyntaxError(f"Invalid path data {d!r}: {e}") from e

    return [_to_command(seg) for seg in path]


def _check_arity(d: str) -> None:
    """Reject commands whose parameter count is not a whole number of repetitions.

    svg.path silently drops trailing coordinates, so "M0 0 10" would otherwise
    lose the dangling value.
    """
    parts = _COMMAND_RE.split(d)
    # Text before the first command is reported by parse_path itself.
    for letter, args in zip(parts[1::2], parts[2::2]):
        arity = _ARITY[letter.upper()]
        count = _count_params(args, is_arc=letter.upper() == "A")
        if (arity == 0 and count) or (arity and (count == 0 or count % arity)):
            logger.warning("Bad parameter count for %r in path data %r: %d", letter, d, count)
            raise PathDataSyntaxError(
                f"Invalid path data {d!r}: command {letter!r} takes a multiple of {arity} "
                f"parameters, got {count}"
            )


def _count_params(args: str, is_arc: bool) -> int:
    """Count leading parameters; arc flags are single 0/1 characters."""
    count = 0
    pos = 0
    while True:
        if is_arc and count % 7 in (3, 4):
            m = _FLAG_RE.match(args, pos)
        else:
            m = _NUMBER_RE.match(args, pos)
        if not m:
            return count
        count += 1
        pos = m.end()


def _to_command(seg) -> PathCommand:
    """Describe one svg.path segment as a PathCommand."""
    relative = bool(getattr(seg, "relative", False))

    if isinstance(seg, Move):
        return PathCommand(kind=CommandKind.MOVE, relative=relative, params=_xy(seg.end))

    if isinstance(seg, Close):
        return PathCommand(kind=CommandKind.CLOSE, relative=relative)

    if isinstance(seg, Line):
        if getattr(seg, "horizontal", False):
            return PathCommand(
                kind=CommandKind.HORIZONTAL_LINE, relative=relative, params=[seg.end.real]
            )
        if getattr(seg, "vertical", False):
            return PathCommand(
                kind=CommandKind.VERTICAL_LINE, relative=relative, params=[seg.end.imag]
            )
        return PathCommand(kind=CommandKind.LINE, relative=relative, params=_xy(seg.end))

    if isinstance(seg, CubicBezier):
        if getattr(seg, "smooth", False):
            return PathCommand(
                kind=CommandKind.SMOOTH_CUBIC_CURVE,
                relative=relative,
                params=_xy(seg.control2) + _xy(seg.end),
            )
        return PathCommand(
            kind=CommandKind.CUBIC_CURVE,
            relative=relative,
            params=_xy(seg.control1) + _xy(seg.control2) + _xy(seg.end),
        )

    if isinstance(seg, QuadraticBezier):
        if getattr(seg, "smooth", False):
            return PathCommand(
                kind=CommandKind.SMOOTH_QUADRATIC_CURVE, relative=relative, params=_xy(seg.end)
            )
        return PathCommand(
            kind=CommandKind.QUADRATIC_CURVE,
            relative=relative,
            params=_xy(seg.control) + _xy(seg.end),
        )

    if isinstance(seg, Arc):
        return PathCommand(
            kind=CommandKind.ARC,
            relative=relative,
            params=[
                seg.radius.real,
                seg.radius.imag,
                float(seg.rotation),
                float(seg.arc),
                float(seg.sweep),
                *_xy(seg.end),
            ],
        )

    logger.warning("Unrecognized path segment: %r", seg)
    raise PathDataSyntaxError(f"Unrecognized path segment: {seg!r}")


def _xy(p: complex) -> list[float]:
    return [p.real, p.imag]
