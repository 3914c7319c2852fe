# topmark:header:start
#
#   project      : PhpGen
#   file         : generator.py
#   file_relpath : src/phpgen/generator.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Document assembler.

`CodeGenerator` owns the import registry of one generated PHP file and turns a
tree of lines into final text. Helpers that need to import symbols (attributes,
class references, calls) are methods here; everything else lives in
`phpgen.combinators`.

Typical use:

    gen = CodeGenerator("App\\Controller")
    body = [
        "final class HomeController",
        "{",
        Group.indent(gen.method_call("App\\Http\\Response", "__construct")),
        "}",
    ]
    text = gen.render_file(body)

The body is resolved before the ``use`` block is rendered, so imports made by
lazy producers inside the body are included.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from phpgen.combinators import all_suffix, maybe_dump, wrap
from phpgen.config.logging import get_logger
from phpgen.config.model import Config
from phpgen.constants import CONSTRUCTOR_METHOD, FUNCTION_MARKER, STRICT_TYPES_DECLARATION
from phpgen.imports import ImportRegistry, coerce_reference
from phpgen.lines import Group, resolve_lines
from phpgen.rendering import collapse_blank_lines, flatten, strip_blank_edges
from phpgen.symbols import FunctionName, Importable, NamespaceName

if TYPE_CHECKING:
    from phpgen.config.logging import PhpgenLogger
    from phpgen.lines import Line, LineSource

logger: PhpgenLogger = get_logger(__name__)


class CodeGenerator:
    """Assembles PHP source text and tracks the imports it needs.

    Args:
        namespace (NamespaceName | str | None): Namespace declared by the file.
        config (Config | None): Rendering configuration; defaults apply when None.
    """

    def __init__(
        self,
        namespace: NamespaceName | str | None = None,
        *,
        config: Config | None = None,
    ) -> None:
        self.namespace: NamespaceName | None = NamespaceName.maybe_from_string(namespace)
        self.config: Config = config if config is not None else Config()
        self.imports: ImportRegistry = ImportRegistry(self.namespace)

    # ---- Rendering -------------------------------------------------------

    def _finish(self, lines: LineSource) -> str:
        physical: list[str] = flatten(lines, self.config.indent)
        return self.config.newline_chars.join(strip_blank_edges(collapse_blank_lines(physical)))

    def render(self, data: LineSource) -> str:
        """Render a fragment: no header, no imports, no trailing newline.

        Args:
            data (LineSource): The lines to render.

        Returns:
            str: The rendered text.
        """
        return self._finish(data)

    def render_file(self, data: LineSource) -> str:
        """Render a complete PHP file.

        The output holds the opening tag, the ``strict_types`` declaration (if
        enabled), the namespace declaration (if any), the ``use`` block (if any
        import is visible) and the body, separated by single blank lines.

        Args:
            data (LineSource): The body lines.

        Returns:
            str: The file contents, ending with exactly one newline.
        """
        body: list[Line] = resolve_lines(data)

        lines: list[Line] = [self.config.opening_tag, ""]
        if self.config.strict_types:
            lines += [STRICT_TYPES_DECLARATION, ""]
        if self.namespace is not None:
            lines += [f"namespace {self.namespace};", ""]
        lines += maybe_dump(None, self.imports.render_declarations(), "")
        lines += body

        text: str = self._finish(lines)
        logger.debug("Rendered file with %d import(s)", len(self.imports))
        return text + self.config.newline_chars if text else ""

    # ---- Imports ---------------------------------------------------------

    def import_(self, reference: Importable | str) -> str:
        """Import ``reference`` and return its local alias."""
        return self.imports.import_(reference)

    def import_by_scope(self, reference: Importable | str) -> str:
        """Import the namespace of ``reference`` and return ``<ns alias>\\<leaf>``."""
        return self.imports.import_by_scope(reference)

    def import_enum(self, reference: Importable | str, case: str | Enum) -> str:
        """Import an enum and return a reference to one of its cases.

        Args:
            reference (Importable | str): The enum class.
            case (str | Enum): The case name, or an `Enum` member whose name is used.

        Returns:
            str: ``<alias>::<CASE>``.
        """
        name: str = case.name if isinstance(case, Enum) else case
        return f"{self.import_(reference)}::{name}"

    # ---- Symbol-aware helpers ------------------------------------------

    def attribute(self, reference: Importable | str, args: LineSource | None = None) -> list[Line]:
        """Return a PHP attribute such as ``#[Route('/home')]``.

        Without arguments the attribute is rendered bare. A single argument is
        inlined; several arguments are placed on indented lines, each followed by
        a comma.
        """
        name: str = self.import_(reference)
        arg_lines: list[Line] = resolve_lines(args) if args is not None else []
        if not arg_lines:
            return [f"#[{name}]"]
        if len(arg_lines) == 1:
            return wrap(f"#[{name}(", arg_lines, ")]")
        return [f"#[{name}(", Group(all_suffix(",", arg_lines), 1), ")]"]

    def class_reference(
        self,
        reference: Importable | str,
        *,
        do_import: bool = True,
        by_scope: bool = False,
    ) -> str:
        """Return a ``::class`` constant for ``reference``.

        Args:
            reference (Importable | str): The class to reference.
            do_import (bool): Import the class (or its namespace) and use the alias.
                When False the fully qualified ``\\``-prefixed name is used.
            by_scope (bool): Import the enclosing namespace instead of the class.

        Returns:
            str: E.g. ``User::class``, ``Models\\User::class`` or
            ``\\App\\Models\\User::class``.
        """
        if not do_import:
            return f"\\{coerce_reference(reference).path}::class"
        if by_scope:
            return f"{self.import_by_scope(reference)}::class"
        return f"{self.import_(reference)}::class"

    @staticmethod
    def _call(call: str, args: list[Line], comma_after_each: bool) -> list[Line]:
        if not args:
            return [f"{call}()"]
        if len(args) == 1:
            return wrap(f"{call}(", args, ")")
        return [
            f"{call}(",
            Group(all_suffix(",", args) if comma_after_each else args, 1),
            ")",
        ]

    def method_call(
        self,
        receiver: Importable | LineSource,
        method: str,
        args: LineSource = (),
        *,
        static: bool = False,
        comma_after_each: bool = True,
    ) -> list[Line]:
        """Return a method call, static call or constructor call.

        A string or symbol receiver produces ``$obj->method(...)``,
        ``Alias::method(...)`` or, for a non-static ``__construct``,
        ``new Alias(...)``. Class receivers of static calls and constructors are
        imported.

        Any other receiver (a list, group or producer of lines) is treated as an
        expression to chain onto: its lines are emitted and ``->method(...)``
        follows in a group indented one level.

        Args:
            receiver (Importable | LineSource): The object, class or expression.
            method (str): Method name.
            args (LineSource): Argument lines.
            static (bool): Emit a ``::`` call.
            comma_after_each (bool): Suffix every argument with a comma when the
                arguments are laid out on separate lines.

        Returns:
            list[Line]: The call lines.
        """
        arg_lines: list[Line] = resolve_lines(args)

        if not isinstance(receiver, (str, Importable)):
            return [
                *resolve_lines(receiver),
                Group(self._call(f"->{method}", arg_lines, comma_after_each), 1),
            ]

        is_constructor: bool = method == CONSTRUCTOR_METHOD
        if static != is_constructor:
            target: str = self.import_(receiver)
        else:
            target = receiver if isinstance(receiver, str) else receiver.path

        if is_constructor and not static:
            call: str = f"new {target}"
        else:
            call = f"{target}{'::' if static else '->'}{method}"
        return self._call(call, arg_lines, comma_after_each)

    def function_call(self, function: FunctionName | str, args: LineSource = ()) -> list[Line]:
        """Return a function call.

        A `FunctionName` (or a ``"function X"`` string) is imported first and
        called by its alias; any other string is used verbatim. Every argument
        gets a trailing comma when laid out on separate lines.
        """
        if isinstance(function, FunctionName) or function.startswith(FUNCTION_MARKER):
            name: str = self.import_(function)
        else:
            name = function
        return self._call(name, resolve_lines(args), comma_after_each=True)
