# topmark:header:start
#
#   project      : PhpGen
#   file         : combinators.py
#   file_relpath : src/phpgen/combinators.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Line-transformation combinators.

Every combinator accepts any line source understood by
`phpgen.lines.resolve_lines` and returns a new ``list`` of lines (``join`` and the
string helpers return ``str``). Inputs are never mutated.

Group awareness:
    Combinators that target the first or last line do not decorate a `Group`
    itself. They rebuild the group with the same depth and apply the operation to
    the group's inner first/last line, recursively.

Empty input:
    No combinator raises on empty or single-element input. They degrade to an
    identity or an empty result so callers can pass optional trailing elements
    without guarding them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phpgen.constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_LINE_PREFIX,
    BLOCK_COMMENT_OPEN,
    DEFAULT_INDENT,
    DOC_COMMENT_OPEN,
    LINE_COMMENT_MARKER,
    LINE_COMMENT_PREFIX,
    NOWDOC_DEFAULT_TAG,
    STATEMENT_TERMINATOR,
)
from phpgen.lines import Group, resolve_lines

if TYPE_CHECKING:
    from phpgen.lines import Line, LineSource


# ---- First / last line decoration ------------------------------------------


def suffix_last(suffix: str, data: LineSource) -> list[Line]:
    """Append ``suffix`` to the last line.

    A trailing `Group` is rebuilt with the same depth and its inner last line
    receives the suffix.
    """
    lines: list[Line] = resolve_lines(data)
    if not lines:
        return []

    last: Line = lines[-1]
    if isinstance(last, Group):
        lines[-1] = Group(suffix_last(suffix, last.lines), last.depth)
    else:
        lines[-1] = last + suffix
    return lines


def prefix_first(prefix: str, data: LineSource) -> list[Line]:
    """Prepend ``prefix`` to the first line, recursing into a leading `Group`."""
    lines: list[Line] = resolve_lines(data)
    if not lines:
        return []

    first: Line = lines[0]
    if isinstance(first, Group):
        lines[0] = Group(prefix_first(prefix, first.lines), first.depth)
    else:
        lines[0] = prefix + first
    return lines


def suffix_first(suffix: str, data: LineSource) -> list[Line]:
    """Append ``suffix`` to the first line, recursing into a leading `Group`."""
    lines: list[Line] = resolve_lines(data)
    if not lines:
        return []

    first: Line = lines[0]
    if isinstance(first, Group):
        lines[0] = Group(suffix_first(suffix, first.lines), first.depth)
    else:
        lines[0] = first + suffix
    return lines


def wrap(prefix: str, data: LineSource, suffix: str | None = None) -> list[Line]:
    """Prefix the first line and, when ``suffix`` is given, suffix the last line.

    Args:
        prefix (str): Text prepended to the first line.
        data (LineSource): Lines to wrap.
        suffix (str | None): Optional text appended to the last line.

    Returns:
        list[Line]: The wrapped lines.
    """
    return prefix_first(prefix, suffix_last(suffix, data) if suffix is not None else data)


def maybe_wrap(
    condition: bool,
    prefix: str,
    data: LineSource,
    suffix: str | None = None,
) -> list[Line]:
    """Apply `wrap` only when ``condition`` is true; otherwise return the resolved lines."""
    lines: list[Line] = resolve_lines(data)
    if condition:
        return wrap(prefix, lines, suffix)
    return lines


def statement(data: LineSource) -> list[Line]:
    """Terminate the lines as a statement (``;`` after the last line)."""
    return suffix_last(STATEMENT_TERMINATOR, data)


# ---- Whole-sequence transforms ---------------------------------------------


def prefix(marker: str, data: LineSource) -> list[Line]:
    """Prepend ``marker`` to every text line.

    Multi-line strings are split on newlines first so that each physical line is
    prefixed. Groups are rebuilt with the same depth and their contents prefixed.
    """
    out: list[Line] = []
    for line in resolve_lines(data):
        if isinstance(line, Group):
            out.append(Group(prefix(marker, line.lines), line.depth))
            continue
        out.extend(marker + part for part in line.split("\n"))
    return out


def all_suffix(suffix: str, data: LineSource) -> list[Line]:
    """Append ``suffix`` to every line except comments.

    Lines starting with ``//`` (after leading whitespace) pass through untouched.
    A `Group` keeps its depth and has the suffix applied to its own inner last
    line only.
    """
    out: list[Line] = []
    for line in resolve_lines(data):
        if isinstance(line, Group):
            out.append(Group(suffix_last(suffix, line.lines), line.depth))
            continue
        if line.lstrip().startswith(LINE_COMMENT_MARKER):
            out.append(line)
            continue
        out.append(line + suffix)
    return out


def join(delimiter: str, data: LineSource) -> str:
    """Join lines into a single string; a `Group` contributes an empty string."""
    return delimiter.join("" if isinstance(line, Group) else line for line in resolve_lines(data))


def join_first_pair(data: LineSource) -> list[Line]:
    """Merge the first two lines into one.

    When the second line is a `Group`, the first line's text (or ``""`` if the
    first line is itself a group) is prefixed onto the group's inner first line and
    the rebuilt group replaces both. When that group is empty there is no inner line
    to receive the text, so the first line disappears.
    """
    lines: list[Line] = resolve_lines(data)
    if len(lines) < 2:
        return lines

    first, second, rest = lines[0], lines[1], lines[2:]
    head: str = "" if isinstance(first, Group) else first
    if isinstance(second, Group):
        return [Group(prefix_first(head, second.lines), second.depth), *rest]
    return [head + second, *rest]


def trim(data: LineSource) -> list[Line]:
    """Drop leading and trailing whitespace-only text lines.

    Groups are never considered blank, even when empty. Lines between the first
    and last non-blank line are kept as is.
    """
    lines: list[Line] = resolve_lines(data)

    def _blank(line: Line) -> bool:
        return not isinstance(line, Group) and line.strip() == ""

    start: int = 0
    end: int = len(lines)
    while start < end and _blank(lines[start]):
        start += 1
    while end > start and _blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


def indent(data: LineSource, *, depth: int = 1, trim_edges: bool = True) -> list[Line]:
    """Wrap ``data`` in a single indented `Group`.

    Args:
        data (LineSource): Lines to indent.
        depth (int): Relative indentation depth of the group.
        trim_edges (bool): Drop leading/trailing blank lines first (see `trim`).

    Returns:
        list[Line]: A one-element list holding the group.
    """
    return [Group(trim(data) if trim_edges else data, depth)]


def maybe_dump(
    before: LineSource | None,
    data: LineSource,
    after: LineSource | None,
) -> list[Line]:
    """Surround ``data`` with ``before``/``after`` lines, but only if it is non-empty."""
    lines: list[Line] = resolve_lines(data)
    if not lines:
        return []

    out: list[Line] = []
    if before is not None:
        out.extend(resolve_lines(before))
    out.extend(lines)
    if after is not None:
        out.extend(resolve_lines(after))
    return out


# ---- Comments ----------------------------------------------------------------


def comment(data: LineSource) -> list[Line]:
    """Render ``data`` as ``//`` line comments."""
    return prefix(LINE_COMMENT_PREFIX, data)


def _framed_comment(opener: str, data: LineSource) -> list[Line]:
    lines: list[Line] = resolve_lines(data)
    if not lines:
        return []
    return [opener, *prefix(BLOCK_COMMENT_LINE_PREFIX, lines), BLOCK_COMMENT_CLOSE]


def block_comment(data: LineSource) -> list[Line]:
    """Render ``data`` as a ``/* ... */`` block comment; empty input yields nothing."""
    return _framed_comment(BLOCK_COMMENT_OPEN, data)


def doc_comment(data: LineSource) -> list[Line]:
    """Render ``data`` as a ``/** ... */`` doc comment; empty input yields nothing."""
    return _framed_comment(DOC_COMMENT_OPEN, data)


# ---- String literals ----------------------------------------------------------


def php_string(text: str) -> str:
    """Return ``text`` as a single-quoted PHP string literal."""
    escaped: str = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def maybe_now_doc(text: str, tag: str = NOWDOC_DEFAULT_TAG) -> str:
    """Return a PHP literal for ``text``.

    Single-line text becomes a quoted string (see `php_string`). Multi-line text
    becomes a nowdoc whose body and closing tag are indented one level.

    Args:
        text (str): The literal's content.
        tag (str): Nowdoc delimiter.

    Returns:
        str: The PHP expression (may contain newlines).
    """
    if "\n" not in text:
        return php_string(text)

    body: list[str] = [DEFAULT_INDENT + line for line in [*text.split("\n"), tag]]
    return f"<<<'{tag}'\n" + "\n".join(body)
