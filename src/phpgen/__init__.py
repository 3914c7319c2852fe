# topmark:header:start
#
#   project      : PhpGen
#   file         : __init__.py
#   file_relpath : src/phpgen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen package.

PhpGen composes PHP source files from nested line trees. Indentation is modeled
with `Group` values, small combinators decorate and join lines, and a
`CodeGenerator` tracks the ``use`` imports a file needs and renders the final
text.
"""

from __future__ import annotations

from phpgen.combinators import (
    all_suffix,
    block_comment,
    comment,
    doc_comment,
    indent,
    join,
    join_first_pair,
    maybe_dump,
    maybe_now_doc,
    maybe_wrap,
    php_string,
    prefix,
    prefix_first,
    statement,
    suffix_first,
    suffix_last,
    trim,
    wrap,
)
from phpgen.config import Config, MutableConfig, NewlineStyle, load_config
from phpgen.errors import ConfigError, PhpgenError, UsageError, ValidationError
from phpgen.generator import CodeGenerator
from phpgen.imports import ImportRegistry
from phpgen.lines import Group, Line, LineSource, resolve_lines
from phpgen.symbols import Alias, ClassName, FullyQualified, FunctionName, Importable, NamespaceName

__all__ = [
    "Alias",
    "ClassName",
    "CodeGenerator",
    "Config",
    "ConfigError",
    "FullyQualified",
    "FunctionName",
    "Group",
    "ImportRegistry",
    "Importable",
    "Line",
    "LineSource",
    "MutableConfig",
    "NamespaceName",
    "NewlineStyle",
    "PhpgenError",
    "UsageError",
    "ValidationError",
    "all_suffix",
    "block_comment",
    "comment",
    "doc_comment",
    "indent",
    "join",
    "join_first_pair",
    "load_config",
    "maybe_dump",
    "maybe_now_doc",
    "maybe_wrap",
    "php_string",
    "prefix",
    "prefix_first",
    "resolve_lines",
    "statement",
    "suffix_first",
    "suffix_last",
    "trim",
    "wrap",
]
