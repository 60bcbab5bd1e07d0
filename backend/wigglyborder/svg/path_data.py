"""Path commands → SVG ``d`` attribute text."""

from __future__ import annotations

from collections.abc import Iterable

from wigglyborder.engine.shapes import ClosePath, CurveTo, MoveTo, PathCommand, Point


def format_number(value: float, precision: int | None = None) -> str:
    """Shortest text for ``value``: ``8`` rather than ``8.0``, otherwise repr."""
    v = float(value)
    if precision is not None:
        v = round(v, precision)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def _xy(p: Point, precision: int | None) -> str:
    return f"{format_number(p.x, precision)} {format_number(p.y, precision)}"


def to_path_data(commands: Iterable[PathCommand], precision: int | None = None) -> str:
    """``M x y C c1x c1y, c2x c2y, x y ... Z``"""
    parts: list[str] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {_xy(cmd.point, precision)}")
        elif isinstance(cmd, CurveTo):
            parts.append(
                f"C {_xy(cmd.control1, precision)}, {_xy(cmd.control2, precision)}, {_xy(cmd.end, precision)}"
            )
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
        else:
            raise TypeError(f"Unsupported path command: {type(cmd).__name__}")
    return " ".join(parts)
