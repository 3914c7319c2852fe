# topmark:header:start
#
#   project      : PhpGen
#   file         : rendering.py
#   file_relpath : src/phpgen/rendering.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Flattening of line trees into physical output lines.

These helpers are the last stage before text is joined: `flatten` walks the
`Group` tree, `collapse_blank_lines` and `strip_blank_edges` normalize
vertical whitespace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phpgen.constants import DEFAULT_INDENT
from phpgen.lines import Group, resolve_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from phpgen.lines import Line, LineSource


def _walk(lines: Iterable[Line], depth: int, indent_unit: str, out: list[str]) -> None:
    for line in lines:
        if isinstance(line, Group):
            _walk(line.lines, depth + line.depth, indent_unit, out)
            continue
        pad: str = indent_unit * max(depth, 0)
        for physical in line.split("\n"):
            out.append(pad + physical if physical.strip() else "")


def flatten(data: LineSource, indent_unit: str = DEFAULT_INDENT) -> list[str]:
    """Flatten a line tree into indented physical lines.

    The absolute depth of a line is the sum of the depths of all enclosing
    groups, clamped at zero. Text containing newlines is split and every
    physical line is indented. Whitespace-only lines become ``""``.

    Args:
        data (LineSource): The lines to flatten.
        indent_unit (str): Text emitted once per indentation level.

    Returns:
        list[str]: Physical lines without line terminators.
    """
    out: list[str] = []
    _walk(resolve_lines(data), 0, indent_unit, out)
    return out


def collapse_blank_lines(lines: Iterable[str]) -> list[str]:
    """Replace every run of blank lines with a single blank line."""
    out: list[str] = []
    previous_blank: bool = False
    for line in lines:
        blank: bool = line.strip() == ""
        if blank and previous_blank:
            continue
        out.append("" if blank else line)
        previous_blank = blank
    return out


def strip_blank_edges(lines: Iterable[str]) -> list[str]:
    """Drop leading and trailing blank lines; indentation of other lines is kept."""
    result: list[str] = list(lines)
    start: int = 0
    end: int = len(result)
    while start < end and not result[start].strip():
        start += 1
    while end > start and not result[end - 1].strip():
        end -= 1
    return result[start:end]
