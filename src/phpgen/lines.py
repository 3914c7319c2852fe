# topmark:header:start
#
#   project      : PhpGen
#   file         : lines.py
#   file_relpath : src/phpgen/lines.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Line and Group model, and the lazy line resolver.

A *line* is either a plain ``str`` or a `Group`. A `Group` owns an ordered tuple
of lines plus a relative indentation depth; groups nest to form a strict tree.

Callers rarely build concrete lists by hand. Anything accepted as *line source*
may be:

* a ``str`` (one line),
* a `Group` (one line),
* a sequence or iterator of lines (lists, tuples, generators),
* a zero-argument callable returning any of the above.

`resolve_lines` normalizes such a source into a concrete ``list`` of lines.
Nested lazy sequences (a generator yielded from a generator, a list inside a
list, a callable inside a list) are expanded in place one level deep. Groups are
opaque to the resolver and are never flattened.

Resolution is eager: combinators need random access to the first and last
element and may iterate more than once.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from phpgen.config.logging import get_logger
from phpgen.errors import UsageError

if TYPE_CHECKING:
    from phpgen.config.logging import PhpgenLogger

logger: PhpgenLogger = get_logger(__name__)

Line = Union[str, "Group"]
"""A single unit of output: raw text or an indentation group."""

LineSource = Union[str, "Group", Iterable[object], Callable[[], object]]
"""Anything `resolve_lines` accepts."""


@dataclass(frozen=True, slots=True, init=False)
class Group:
    """An ordered collection of lines sharing a relative indentation offset.

    The lines are resolved eagerly at construction time; a group never contains
    an unresolved producer. Nested groups are preserved as `Group` values.

    Attributes:
        lines (tuple[Line, ...]): The resolved lines of this group.
        depth (int): Indentation levels added to every line reachable inside the
            group. May be zero or negative.
    """

    lines: tuple[Line, ...]
    depth: int

    def __init__(self, lines: LineSource = (), depth: int = 0) -> None:
        # bool is an int subclass but never a meaningful depth
        if not isinstance(depth, int) or isinstance(depth, bool):
            raise UsageError(f"Group depth must be an integer, got {type(depth).__name__}")
        object.__setattr__(self, "lines", tuple(resolve_lines(lines)))
        object.__setattr__(self, "depth", depth)

    @classmethod
    def indent(cls, lines: LineSource, depth: int = 1) -> Group:
        """Return a group of ``lines`` indented by ``depth`` levels.

        Args:
            lines (LineSource): Lines to place inside the group.
            depth (int): Relative indentation depth (default one level).

        Returns:
            Group: The new group.
        """
        return cls(lines, depth)

    def is_empty(self) -> bool:
        """Return True if the group holds no lines."""
        return not self.lines


def _is_nested_source(item: object) -> bool:
    if isinstance(item, (str, bytes, Group)):
        return False
    return callable(item) or isinstance(item, Iterable)


def resolve_lines(data: LineSource) -> list[Line]:
    """Resolve a line source into a concrete list of lines.

    Args:
        data (LineSource): Text, a group, a sequence/iterator of lines, or a
            zero-argument callable producing one of those.

    Returns:
        list[Line]: The materialized lines, in order.

    Raises:
        UsageError: If the source, or an element of it, is not a supported line type.
    """
    if callable(data) and not isinstance(data, Group):
        data = data()

    if isinstance(data, str):
        return [data]
    if isinstance(data, Group):
        return [data]
    if not isinstance(data, Iterable) or isinstance(data, bytes):
        raise UsageError(f"Cannot resolve lines from {type(data).__name__}")

    resolved: list[Line] = []
    for item in data:
        if isinstance(item, (str, Group)):
            resolved.append(item)
            continue
        if not _is_nested_source(item):
            raise UsageError(f"Unsupported line type: {type(item).__name__}")

        nested: object = item() if callable(item) else item
        if isinstance(nested, (str, Group)):
            resolved.append(nested)
            continue
        if not isinstance(nested, Iterable) or isinstance(nested, bytes):
            raise UsageError(f"Unsupported line type: {type(nested).__name__}")
        for inner in nested:
            if not isinstance(inner, (str, Group)):
                raise UsageError(f"Unsupported nested line type: {type(inner).__name__}")
            resolved.append(inner)

    logger.trace("Resolved %d line(s)", len(resolved))
    return resolved
