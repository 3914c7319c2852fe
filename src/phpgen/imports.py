# topmark:header:start
#
#   project      : PhpGen
#   file         : imports.py
#   file_relpath : src/phpgen/imports.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Import registry: conflict-free alias assignment and ``use`` declarations.

The registry maps each local alias to the symbol reference it denotes. It is
owned by one `phpgen.generator.CodeGenerator` and mutated only through
`ImportRegistry.import_` / `ImportRegistry.import_by_scope`.

Conflict resolution:
    The preferred alias (the reference's leaf, or an explicit `Alias` name) is
    tried first. If it is bound to the same symbol, that alias is reused. If it
    is bound to a different symbol, ``<alias>2``, ``<alias>3``, ... are tried in
    turn. Bindings are never overwritten.

Symbol identity:
    Two references name the same symbol when their paths match and both or
    neither are functions. ``ClassName("DateTime")``, ``"DateTime"`` and
    ``NamespaceName("DateTime")`` therefore share one alias, and the reference
    bound first is the one that is declared.
"""

from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING

from phpgen.config.logging import get_logger
from phpgen.constants import FUNCTION_MARKER, NAMESPACE_SEPARATOR
from phpgen.errors import UsageError
from phpgen.symbols import Alias, FullyQualified, FunctionName, Importable

if TYPE_CHECKING:
    from collections.abc import ItemsView

    from phpgen.config.logging import PhpgenLogger
    from phpgen.symbols import NamespaceName

logger: PhpgenLogger = get_logger(__name__)


def coerce_reference(reference: Importable | str) -> Importable:
    """Return ``reference`` as a symbol reference.

    Strings starting with ``function `` become a `FunctionName`; any other string
    becomes a `FullyQualified` class reference.

    Raises:
        UsageError: If ``reference`` is neither a string nor a symbol reference.
    """
    if isinstance(reference, Importable):
        return reference
    if isinstance(reference, str):
        if reference.lstrip().startswith(FUNCTION_MARKER):
            return FunctionName(reference)
        return FullyQualified(reference)
    raise UsageError(f"Cannot import {type(reference).__name__}")


def _same_symbol(bound: Importable, reference: Importable) -> bool:
    # Class and namespace variants of one path name the same symbol; functions do not.
    return bound.path == reference.path and isinstance(bound, FunctionName) == isinstance(
        reference, FunctionName
    )


class ImportRegistry:
    """Per-document map from local alias to symbol reference.

    Args:
        namespace (NamespaceName | None): The namespace the document declares.
            References living directly in it are not emitted as declarations.
    """

    def __init__(self, namespace: NamespaceName | None = None) -> None:
        self.namespace: NamespaceName | None = namespace
        self._entries: dict[str, Importable] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, alias: object) -> bool:
        return alias in self._entries

    def items(self) -> ItemsView[str, Importable]:
        """Return a view of the ``(alias, reference)`` bindings in insertion order."""
        return self._entries.items()

    def _bind(self, preferred: str, reference: Importable) -> str:
        for attempt in count(1):
            candidate: str = preferred if attempt == 1 else f"{preferred}{attempt}"
            bound: Importable | None = self._entries.get(candidate)
            if bound is None:
                self._entries[candidate] = reference
                logger.debug("Bound alias '%s' to %s", candidate, reference)
                return candidate
            if _same_symbol(bound, reference):
                logger.trace("Reusing alias '%s' for %s", candidate, reference)
                return candidate
            logger.debug("Alias '%s' is taken by %s; trying next", candidate, bound)
        raise AssertionError("unreachable")  # pragma: no cover

    def import_(self, reference: Importable | str) -> str:
        """Register ``reference`` and return the local name to use in code.

        Args:
            reference (Importable | str): The symbol to import. An `Alias`
                registers its target under the alias name.

        Returns:
            str: The bound alias.
        """
        ref: Importable = coerce_reference(reference)
        if isinstance(ref, Alias):
            return self._bind(ref.alias, ref.target)
        return self._bind(ref.leaf, ref)

    def import_by_scope(self, reference: Importable | str) -> str:
        """Import the enclosing namespace of ``reference`` and return a relative path.

        ``App\\Models\\User`` imports ``App\\Models`` (as ``Models``) and returns
        ``Models\\User``. References without a scope are imported directly.

        Args:
            reference (Importable | str): The symbol to reference.

        Returns:
            str: ``<namespace alias>\\<leaf>``, or the plain alias when there is
            no enclosing namespace.

        Raises:
            UsageError: If ``reference`` is an `Alias`; only the namespace is
                imported here, so there is nothing to bind the alias name to.
        """
        ref: Importable = coerce_reference(reference)
        if isinstance(ref, Alias):
            raise UsageError(f"Cannot import alias '{ref.alias}' by scope; import it directly")
        scope: NamespaceName | None = ref.scope
        if scope is None:
            return self.import_(ref)
        scope_alias: str = self._bind(scope.last_part, scope)
        return f"{scope_alias}{NAMESPACE_SEPARATOR}{ref.leaf}"

    def _is_implicit(self, alias: str, reference: Importable) -> bool:
        # Names declared in the document's own namespace resolve without a `use`.
        return (
            self.namespace is not None
            and reference.scope == self.namespace
            and alias == reference.leaf
        )

    def render_declarations(self) -> list[str]:
        """Return the sorted ``use`` statements for all registered references.

        Returns:
            list[str]: One declaration per line, e.g. ``use App\\Models\\User;``,
            ``use Foo\\Bar as Baz;`` or ``use function array_map;``.
        """
        declarations: list[str] = []
        ordered = sorted(self._entries.items(), key=lambda item: (item[1].sort_key(), item[0]))
        for alias, reference in ordered:
            if self._is_implicit(alias, reference):
                logger.trace("Skipping implicit import %s", reference)
                continue
            keyword: str = "use function" if isinstance(reference, FunctionName) else "use"
            if alias != reference.leaf:
                declarations.append(f"{keyword} {reference.path} as {alias};")
            else:
                declarations.append(f"{keyword} {reference.path};")
        return declarations
