# topmark:header:start
#
#   project      : PhpGen
#   file         : constants.py
#   file_relpath : src/phpgen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PHPGEN_VERSION: str = get_version("phpgen")

# Environment variable consulted by `phpgen.config.logging.resolve_env_log_level`.
PHPGEN_LOG_LEVEL_ENV: Final[str] = "PHPGEN_LOG_LEVEL"

# Stand-alone config file name and the pyproject.toml table that may hold the same keys.
PHPGEN_TOML_NAME: Final[str] = "phpgen.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# PHP lexical constants.
NAMESPACE_SEPARATOR: Final[str] = "\\"
FUNCTION_MARKER: Final[str] = "function "
STATEMENT_TERMINATOR: Final[str] = ";"
LINE_COMMENT_MARKER: Final[str] = "//"
LINE_COMMENT_PREFIX: Final[str] = "// "
BLOCK_COMMENT_OPEN: Final[str] = "/*"
DOC_COMMENT_OPEN: Final[str] = "/**"
BLOCK_COMMENT_LINE_PREFIX: Final[str] = " * "
BLOCK_COMMENT_CLOSE: Final[str] = " */"
STRICT_TYPES_DECLARATION: Final[str] = "declare(strict_types=1);"
NOWDOC_DEFAULT_TAG: Final[str] = "EOD"
CONSTRUCTOR_METHOD: Final[str] = "__construct"

# Rendering defaults (overridable through `phpgen.config`).
DEFAULT_INDENT: Final[str] = "    "
DEFAULT_OPENING_TAG: Final[str] = "<?php"
