# topmark:header:start
#
#   project      : PhpGen
#   file         : test_properties.py
#   file_relpath : tests/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Property-based tests for combinators, rendering and the import registry."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from phpgen.combinators import join_first_pair, suffix_last, trim
from phpgen.generator import CodeGenerator
from phpgen.imports import ImportRegistry
from phpgen.lines import Group, Line
from phpgen.rendering import collapse_blank_lines, flatten, strip_blank_edges
from phpgen.symbols import Importable
from tests.conftest import mark_hypothesis
from tests.strategies_phpgen import s_identifier, s_lines, s_reference, s_text_line

PROPERTY_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)


@mark_hypothesis
@PROPERTY_SETTINGS
@given(lines=s_lines())
def test_trim_is_idempotent(lines: list[Line]) -> None:
    """Trimming twice equals trimming once."""
    once = trim(lines)
    assert trim(once) == once


@mark_hypothesis
@PROPERTY_SETTINGS
@given(lines=s_lines(), last=s_text_line(), sfx=s_identifier())
def test_suffix_last_ends_output(lines: list[Line], last: str, sfx: str) -> None:
    """When the sequence ends in text, the last rendered line ends with the suffix."""
    assert suffix_last(sfx, []) == []
    rendered = flatten(suffix_last(sfx, [*lines, last]))
    assert rendered[-1].endswith(sfx)


@mark_hypothesis
@PROPERTY_SETTINGS
@given(line=s_text_line())
def test_join_first_pair_single(line: str) -> None:
    """A single line passes through unchanged."""
    assert join_first_pair([line]) == [line]


@mark_hypothesis
@PROPERTY_SETTINGS
@given(lines=s_lines())
def test_rendered_output_has_no_blank_runs_or_edges(lines: list[Line]) -> None:
    """Rendering never yields two consecutive blank lines or blank edges."""
    out = CodeGenerator().render(lines).split("\n")
    if out == [""]:
        return
    assert out[0].strip() and out[-1].strip()
    for above, below in zip(out, out[1:]):
        assert above.strip() or below.strip()


@mark_hypothesis
@PROPERTY_SETTINGS
@given(lines=s_lines())
def test_rendering_normalization_is_idempotent(lines: list[Line]) -> None:
    """Collapsing and stripping are stable under repetition."""
    once = strip_blank_edges(collapse_blank_lines(flatten(lines)))
    assert strip_blank_edges(collapse_blank_lines(once)) == once


@mark_hypothesis
@PROPERTY_SETTINGS
@given(outer=st.integers(-3, 3), inner=st.integers(-3, 3), text=s_identifier())
def test_group_depths_add_up(outer: int, inner: int, text: str) -> None:
    """A line's indentation is the sum of its enclosing group depths, never below zero."""
    rendered = flatten([Group([Group([text], inner)], outer)], "  ")
    assert rendered == ["  " * max(outer + inner, 0) + text]


@mark_hypothesis
@PROPERTY_SETTINGS
@given(refs=st.lists(s_reference(), min_size=1, max_size=12))
def test_registry_aliases_are_stable_and_unique(refs: list[Importable]) -> None:
    """Re-importing returns the same alias; distinct references never share one."""
    registry = ImportRegistry()
    first = [registry.import_(ref) for ref in refs]
    second = [registry.import_(ref) for ref in refs]
    assert first == second
    bound: dict[str, Importable] = {}
    for alias, ref in zip(first, refs):
        assert bound.setdefault(alias, ref) == ref


@mark_hypothesis
@PROPERTY_SETTINGS
@given(refs=st.lists(s_reference(), min_size=1, max_size=12))
def test_declarations_cover_every_binding_in_sorted_order(refs: list[Importable]) -> None:
    """Without a namespace every binding is declared, ordered by normalized path."""
    registry = ImportRegistry()
    for ref in refs:
        registry.import_(ref)
    declarations = registry.render_declarations()
    assert len(declarations) == len(registry)

    declared_paths = [line.split(" as ")[0].rstrip(";").split(" ")[-1] for line in declarations]
    normalized = [path.replace("\\", " ").lower() for path in declared_paths]
    assert normalized == sorted(normalized)
    assert sorted(declared_paths) == sorted(ref.path for _, ref in registry.items())
