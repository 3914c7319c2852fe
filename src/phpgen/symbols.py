# topmark:header:start
#
#   project      : PhpGen
#   file         : symbols.py
#   file_relpath : src/phpgen/symbols.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Symbol references: the importable names of a PHP file.

The variant set is closed:

* `ClassName`: a single identifier (``User``).
* `NamespaceName`: a ``\\``-separated scope path (``App\\Models``).
* `FullyQualified`: an optional namespace plus a class name tail.
* `FunctionName`: a (possibly namespaced) function, rendered ``function <path>``.
* `Alias`: rebinds the display name of another reference.

Every variant exposes three projections used by the import registry:

* ``path``: the separator-joined name, without the ``function`` marker;
* ``leaf``: the name a ``use`` statement would bind by default;
* ``scope``: the enclosing namespace, or ``None``.

Ordering:
    All variants are totally ordered through `Importable.sort_key`. The primary
    key is the case-insensitive path with separators replaced by spaces, so
    ``App\\Models\\User`` sorts as ``app models user``. Ties are broken by a
    fixed variant rank, then the exact path, then the alias name. An `Alias`
    sorts next to its target.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Final

from phpgen.constants import FUNCTION_MARKER, NAMESPACE_SEPARATOR
from phpgen.errors import UsageError, ValidationError

SortKey = tuple[str, int, str, str]

_EMPTY_PARTS_MESSAGE: Final[str] = "At least one non-empty part is required"


def _split_parts(parts: tuple[str | Importable, ...]) -> list[str]:
    """Join ``parts`` on the separator, re-split, trim, and drop empty segments."""
    joined: str = NAMESPACE_SEPARATOR.join(
        part.path if isinstance(part, Importable) else str(part) for part in parts
    )
    segments: list[str] = [seg.strip() for seg in joined.split(NAMESPACE_SEPARATOR)]
    return [seg for seg in segments if seg]


def _check_identifier(value: str, what: str) -> str:
    name: str = value.strip()
    if not name:
        raise ValidationError(f"{what} cannot be empty")
    if NAMESPACE_SEPARATOR in name:
        raise ValidationError(f"{what} cannot contain namespace separator")
    return name


class Importable(ABC):
    """Common interface of all symbol reference variants."""

    _RANK: ClassVar[int]

    @property
    @abstractmethod
    def path(self) -> str:
        """Separator-joined name without any marker."""

    @property
    @abstractmethod
    def leaf(self) -> str:
        """Natural import name (last path segment, or the alias)."""

    @property
    def scope(self) -> NamespaceName | None:
        """Enclosing namespace of the reference, if any."""
        return None

    def sort_key(self) -> SortKey:
        """Return the canonical ordering key of this reference."""
        return (
            self.path.replace(NAMESPACE_SEPARATOR, " ").lower(),
            self._RANK,
            self.path,
            "",
        )

    def compare(self, other: Importable) -> int:
        """Three-way comparison against another reference.

        Args:
            other (Importable): The reference to compare with.

        Returns:
            int: -1, 0 or 1.

        Raises:
            UsageError: If ``other`` is not a symbol reference.
        """
        if not isinstance(other, Importable):
            raise UsageError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        mine: SortKey = self.sort_key()
        theirs: SortKey = other.sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Importable):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Importable):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Importable):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Importable):
            return NotImplemented
        return self.sort_key() >= other.sort_key()


@dataclass(frozen=True, init=False)
class ClassName(Importable):
    """A single class identifier without any namespace.

    Attributes:
        name (str): The trimmed identifier.
    """

    _RANK: ClassVar[int] = 1

    name: str

    def __init__(self, name: str) -> None:
        object.__setattr__(self, "name", _check_identifier(name, "Class name"))

    @classmethod
    def maybe_from_string(cls, value: str | Importable | None) -> ClassName | None:
        """Convert ``value`` to a `ClassName`; ``None`` and instances pass through.

        Other references contribute their ``leaf``.
        """
        if value is None or isinstance(value, ClassName):
            return value
        if isinstance(value, Importable):
            return cls(value.leaf)
        return cls(value)

    @property
    def path(self) -> str:
        return self.name

    @property
    def leaf(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, init=False)
class NamespaceName(Importable):
    """A namespace path such as ``App\\Models``.

    Attributes:
        namespace (str): The normalized, separator-joined path.
    """

    _RANK: ClassVar[int] = 0

    namespace: str

    def __init__(self, *parts: str | Importable) -> None:
        segments: list[str] = _split_parts(parts)
        if not segments:
            raise ValidationError(_EMPTY_PARTS_MESSAGE)
        object.__setattr__(self, "namespace", NAMESPACE_SEPARATOR.join(segments))

    @classmethod
    def maybe_from_string(cls, value: str | Importable | None) -> NamespaceName | None:
        """Convert ``value`` to a `NamespaceName`; ``None`` and instances pass through."""
        if value is None or isinstance(value, NamespaceName):
            return value
        return cls(value)

    @property
    def parts(self) -> tuple[str, ...]:
        """The path segments, outermost first."""
        return tuple(self.namespace.split(NAMESPACE_SEPARATOR))

    @property
    def last_part(self) -> str:
        """Last segment (``App\\Models`` -> ``Models``)."""
        return self.parts[-1]

    @property
    def parent(self) -> NamespaceName | None:
        """Enclosing namespace, or ``None`` for a single-segment namespace."""
        parts: tuple[str, ...] = self.parts
        if len(parts) == 1:
            return None
        return NamespaceName(*parts[:-1])

    def with_(self, *parts: str) -> NamespaceName:
        """Return a new namespace with ``parts`` appended."""
        return NamespaceName(self.namespace, *parts)

    def is_sub_namespace_of(self, other: NamespaceName) -> bool:
        """Return True if ``self`` is strictly nested (at any depth) inside ``other``."""
        return self.namespace.startswith(other.namespace + NAMESPACE_SEPARATOR)

    def is_direct_child_of(self, other: NamespaceName) -> bool:
        """Return True if ``other`` is the immediate parent of ``self``."""
        return self.parent == other

    def relative_path_from(self, parent: NamespaceName | None) -> str:
        """Path of ``self`` relative to ``parent``.

        Returns the full path when ``parent`` is ``None`` or not an ancestor.
        """
        if parent is None or not self.is_sub_namespace_of(parent):
            return self.namespace
        return self.namespace[len(parent.namespace) + len(NAMESPACE_SEPARATOR) :]

    @property
    def path(self) -> str:
        return self.namespace

    @property
    def leaf(self) -> str:
        return self.last_part

    @property
    def scope(self) -> NamespaceName | None:
        return self.parent

    def __str__(self) -> str:
        return self.namespace


@dataclass(frozen=True, init=False)
class FullyQualified(Importable):
    """A class reference with an optional namespace.

    Parts may be strings or other references; they are joined and re-split on
    the separator, so ``FullyQualified("App", "Models\\User")`` and
    ``FullyQualified("\\App\\Models\\User")`` are equal.

    Attributes:
        class_name (ClassName): The trailing class identifier.
        namespace (NamespaceName | None): The leading namespace, if any.
    """

    _RANK: ClassVar[int] = 2

    class_name: ClassName
    namespace: NamespaceName | None

    def __init__(self, *parts: str | Importable) -> None:
        segments: list[str] = _split_parts(parts)
        if not segments:
            raise ValidationError(_EMPTY_PARTS_MESSAGE)
        object.__setattr__(self, "class_name", ClassName(segments[-1]))
        object.__setattr__(
            self,
            "namespace",
            NamespaceName(*segments[:-1]) if len(segments) > 1 else None,
        )

    @classmethod
    def maybe_from_string(cls, value: str | Importable | None) -> FullyQualified | None:
        """Convert ``value`` to a `FullyQualified`; ``None`` and instances pass through."""
        if value is None or isinstance(value, FullyQualified):
            return value
        return cls(value)

    def is_in_namespace(self, namespace: NamespaceName | None) -> bool:
        """Return True if the class lives directly in ``namespace``.

        ``None`` stands for the global namespace.
        """
        return self.namespace == namespace

    def relative_path_from(self, parent: NamespaceName | None) -> str:
        """Path of the class relative to ``parent``.

        Args:
            parent (NamespaceName | None): The namespace to resolve against.

        Returns:
            str: The class name when ``parent`` is the class's own namespace, a
            relative path when ``parent`` is an ancestor, else the full path.
        """
        if parent is None:
            return self.path
        if self.namespace is None:
            return self.class_name.name
        if self.namespace == parent:
            return self.class_name.name
        if self.namespace.is_sub_namespace_of(parent):
            return (
                self.namespace.relative_path_from(parent)
                + NAMESPACE_SEPARATOR
                + self.class_name.name
            )
        return self.path

    @property
    def path(self) -> str:
        if self.namespace is None:
            return self.class_name.name
        return self.namespace.namespace + NAMESPACE_SEPARATOR + self.class_name.name

    @property
    def leaf(self) -> str:
        return self.class_name.name

    @property
    def scope(self) -> NamespaceName | None:
        return self.namespace

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True, init=False)
class FunctionName(Importable):
    """A function reference, optionally namespaced.

    A leading ``function `` marker in the input is ignored, so
    ``FunctionName("function sprintf")`` equals ``FunctionName("sprintf")``.

    Attributes:
        name (str): The normalized, separator-joined path.
    """

    _RANK: ClassVar[int] = 3

    name: str

    def __init__(self, *parts: str | Importable) -> None:
        if parts and isinstance(parts[0], str) and parts[0].lstrip().startswith(FUNCTION_MARKER):
            parts = (parts[0].lstrip()[len(FUNCTION_MARKER) :], *parts[1:])
        segments: list[str] = _split_parts(parts)
        if not segments:
            raise ValidationError("Function name cannot be empty")
        object.__setattr__(self, "name", NAMESPACE_SEPARATOR.join(segments))

    @classmethod
    def maybe_from_string(cls, value: str | Importable | None) -> FunctionName | None:
        """Convert ``value`` to a `FunctionName`; ``None`` and instances pass through."""
        if value is None or isinstance(value, FunctionName):
            return value
        return cls(value)

    @property
    def short_name(self) -> str:
        """The unqualified function name (``Symfony\\Component\\String\\u`` -> ``u``)."""
        return self.name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]

    @property
    def namespace(self) -> NamespaceName | None:
        """The namespace the function lives in, if any."""
        if NAMESPACE_SEPARATOR not in self.name:
            return None
        return NamespaceName(self.name.rsplit(NAMESPACE_SEPARATOR, 1)[0])

    @property
    def path(self) -> str:
        return self.name

    @property
    def leaf(self) -> str:
        return self.short_name

    @property
    def scope(self) -> NamespaceName | None:
        return self.namespace

    def __str__(self) -> str:
        return FUNCTION_MARKER + self.name


@dataclass(frozen=True, init=False)
class Alias(Importable):
    """Binds a reference under a different local name.

    Aliasing an alias rebinds the innermost target; an alias never wraps another
    alias.

    Attributes:
        alias (str): The local name.
        target (Importable): The aliased reference.
    """

    alias: str
    target: Importable

    def __init__(self, alias: str, target: Importable | str) -> None:
        if isinstance(target, str):
            target = FullyQualified(target)
        if not isinstance(target, Importable):
            raise UsageError(f"Cannot alias {type(target).__name__}")
        if isinstance(target, Alias):
            target = target.target
        object.__setattr__(self, "alias", _check_identifier(alias, "Alias"))
        object.__setattr__(self, "target", target)

    def sort_key(self) -> SortKey:
        normalized, rank, path, _ = self.target.sort_key()
        return (normalized, rank, path, self.alias)

    @property
    def path(self) -> str:
        return self.target.path

    @property
    def leaf(self) -> str:
        return self.alias

    @property
    def scope(self) -> NamespaceName | None:
        return self.target.scope

    def __str__(self) -> str:
        return f"{self.target} as {self.alias}"
