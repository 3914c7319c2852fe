# topmark:header:start
#
#   project      : PhpGen
#   file         : __init__.py
#   file_relpath : src/phpgen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Configuration handling for PhpGen.

Rendering options (indentation, newline style, document header) are read from
``phpgen.toml`` or ``[tool.phpgen]`` in ``pyproject.toml`` and layered over
built-in defaults.
"""

from __future__ import annotations

from phpgen.config.model import Config, MutableConfig, discover_config_file, load_config
from phpgen.config.types import NewlineStyle

__all__ = [
    "Config",
    "MutableConfig",
    "NewlineStyle",
    "discover_config_file",
    "load_config",
]
