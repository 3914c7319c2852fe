# topmark:header:start
#
#   project      : PhpGen
#   file         : keys.py
#   file_relpath : src/phpgen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Canonical TOML key names for PhpGen configuration.

The keys live at the top level of ``phpgen.toml``, or inside ``[tool.phpgen]``
in ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by PhpGen configuration.

    The ordering of constants mirrors the defaults returned by
    `phpgen.config.io.load_defaults_dict`.
    """

    # Parent tables of the pyproject.toml section
    SECTION_TOOL: Final[str] = "tool"
    SECTION_PHPGEN: Final[str] = "phpgen"

    # Rendering
    KEY_INDENT: Final[str] = "indent"
    KEY_NEWLINE: Final[str] = "newline"

    # Document header
    KEY_OPENING_TAG: Final[str] = "opening_tag"
    KEY_STRICT_TYPES: Final[str] = "strict_types"
