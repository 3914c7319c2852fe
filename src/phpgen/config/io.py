# topmark:header:start
#
#   project      : PhpGen
#   file         : io.py
#   file_relpath : src/phpgen/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""TOML I/O helpers for PhpGen configuration.

This module reads configuration from on-disk TOML files (``phpgen.toml`` or
``pyproject.toml``), provides the built-in defaults as a plain dict, serializes
dicts back to TOML, and extracts typed values from parsed tables.

Parsing and serialization are done with `tomlkit`. Loaders never raise on bad
input: problems are logged and an empty table is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from phpgen.config.keys import Toml
from phpgen.config.logging import get_logger
from phpgen.constants import DEFAULT_INDENT, DEFAULT_OPENING_TAG

if TYPE_CHECKING:
    from pathlib import Path

    from phpgen.config.logging import PhpgenLogger

TomlTable = dict[str, Any]

logger: PhpgenLogger = get_logger(__name__)


# --- Loading ---


def load_defaults_dict() -> TomlTable:
    """Return PhpGen's runtime defaults as a new dict.

    This function performs no I/O.
    """
    return {
        Toml.KEY_INDENT: DEFAULT_INDENT,
        Toml.KEY_NEWLINE: "LF",
        Toml.KEY_OPENING_TAG: DEFAULT_OPENING_TAG,
        Toml.KEY_STRICT_TYPES: True,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content, or ``{}`` on failure.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.phpgen]`` table of a parsed ``pyproject.toml``, if present."""
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, Mapping):
        return None
    section: Any = cast("Mapping[str, Any]", tool).get(Toml.SECTION_PHPGEN)
    if not isinstance(section, Mapping):
        return None
    return dict(cast("Mapping[str, Any]", section))


# --- Rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` values from nested mappings."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out
    return value


def to_toml(toml_dict: TomlTable, *, for_pyproject: bool = False) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): The table to serialize.
        for_pyproject (bool): If True, nest the output under ``[tool.phpgen]``.

    Returns:
        str: The TOML document text.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    if for_pyproject:
        doc: tomlkit.TOMLDocument = tomlkit.document()
        tool: Any = tomlkit.table(is_super_table=True)
        tool.add(Toml.SECTION_PHPGEN, cleaned)
        doc.add(Toml.SECTION_TOOL, tool)
        return tomlkit.dumps(doc)
    return tomlkit.dumps(cast("Mapping[str, Any]", cleaned))


# --- Checked getters ---


def get_string_value_or_none(table: TomlTable, key: str, *, source: str = "") -> str | None:
    """Extract an optional string value from a TOML table.

    A present value of another type is reported with a warning and ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (str): Human-readable origin used in the warning.

    Returns:
        str | None: The string value, or ``None`` when absent or ill-typed.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning(
        "Ignoring '%s' in %s: expected a string, got %s",
        key,
        source or "<config>",
        type(value).__name__,
    )
    return None


def get_bool_value_or_none(table: TomlTable, key: str, *, source: str = "") -> bool | None:
    """Extract an optional boolean value from a TOML table.

    A present value of another type is reported with a warning and ignored.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning(
        "Ignoring '%s' in %s: expected a boolean, got %s",
        key,
        source or "<config>",
        type(value).__name__,
    )
    return None
