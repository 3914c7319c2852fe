# topmark:header:start
#
#   project      : PhpGen
#   file         : strategies_phpgen.py
#   file_relpath : tests/strategies_phpgen.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for PhpGen line trees and symbol references.

The generated text never contains newlines so that one input line maps to one
rendered line; multi-line text is covered by example tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from phpgen.lines import Group, Line
from phpgen.symbols import FullyQualified, FunctionName, Importable, NamespaceName

Draw = Callable[[st.SearchStrategy[Any]], Any]

IDENT_RE: str = r"[A-Za-z_][A-Za-z0-9_]{0,11}"

BLANKS: tuple[str, ...] = ("", " ", "    ", "\t")


def s_identifier() -> st.SearchStrategy[str]:
    """PHP-like identifiers (no separators, never empty)."""
    return st.from_regex(IDENT_RE, fullmatch=True)


def s_text_line() -> st.SearchStrategy[str]:
    """A single physical line: either blank-ish or printable code-like text."""
    code: st.SearchStrategy[str] = st.text(
        alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E),
        min_size=1,
        max_size=24,
    )
    return st.one_of(st.sampled_from(BLANKS), code)


def s_lines(max_leaves: int = 12) -> st.SearchStrategy[list[Line]]:
    """Line sequences with nested groups of small (possibly negative) depth."""
    leaf: st.SearchStrategy[Line] = s_text_line()

    def extend(children: st.SearchStrategy[Line]) -> st.SearchStrategy[Line]:
        return st.builds(
            Group,
            st.lists(children, max_size=4),
            st.integers(min_value=-1, max_value=2),
        )

    tree: st.SearchStrategy[Line] = st.recursive(leaf, extend, max_leaves=max_leaves)
    return st.lists(tree, max_size=6)


@st.composite
def s_namespace(draw: Draw, min_parts: int = 1, max_parts: int = 4) -> NamespaceName:
    """A namespace of a few identifier segments."""
    parts: list[str] = draw(st.lists(s_identifier(), min_size=min_parts, max_size=max_parts))
    return NamespaceName(*parts)


@st.composite
def s_reference(draw: Draw) -> Importable:
    """A class or function reference, optionally namespaced."""
    namespace: NamespaceName | None = draw(st.one_of(st.none(), s_namespace()))
    leaf: str = draw(s_identifier())
    if draw(st.booleans()):
        return FunctionName(*(namespace.parts if namespace else ()), leaf)
    return FullyQualified(*(namespace.parts if namespace else ()), leaf)
