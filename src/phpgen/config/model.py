# topmark:header:start
#
#   project      : PhpGen
#   file         : model.py
#   file_relpath : src/phpgen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable rendering configuration used by
      `phpgen.generator.CodeGenerator`.
    - `MutableConfig`: a mutable builder used while layering sources; it can
      be frozen into `Config` and thawed back for edits.

Layering:
    Built-in defaults come first, then at most one file (``phpgen.toml`` or
    the ``[tool.phpgen]`` table of ``pyproject.toml``). Later layers win for
    every key they set; ``None`` means "inherit".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from phpgen.config.io import (
    extract_tool_section,
    get_bool_value_or_none,
    get_string_value_or_none,
    load_defaults_dict,
    load_toml_dict,
)
from phpgen.config.keys import Toml
from phpgen.config.logging import get_logger
from phpgen.config.types import NewlineStyle
from phpgen.constants import (
    DEFAULT_INDENT,
    DEFAULT_OPENING_TAG,
    PHPGEN_TOML_NAME,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from phpgen.config.io import TomlTable
    from phpgen.config.logging import PhpgenLogger

logger: PhpgenLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable rendering configuration.

    Attributes:
        indent (str): Text emitted once per indentation level.
        newline (NewlineStyle): Line terminator of rendered output.
        opening_tag (str): First line of a rendered file.
        strict_types (bool): Whether rendered files declare ``strict_types=1``.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    indent: str = DEFAULT_INDENT
    newline: NewlineStyle = NewlineStyle.LF
    opening_tag: str = DEFAULT_OPENING_TAG
    strict_types: bool = True
    config_files: tuple[Path, ...] = ()

    @property
    def newline_chars(self) -> str:
        """The actual line terminator characters."""
        return self.newline.value

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict."""
        return {
            Toml.KEY_INDENT: self.indent,
            Toml.KEY_NEWLINE: self.newline.name,
            Toml.KEY_OPENING_TAG: self.opening_tag,
            Toml.KEY_STRICT_TYPES: self.strict_types,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            indent=self.indent,
            newline=self.newline,
            opening_tag=self.opening_tag,
            strict_types=self.strict_types,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Every field may be ``None`` ("not set by this layer"). `freeze` resolves
    unset fields to the built-in defaults.
    """

    indent: str | None = None
    newline: NewlineStyle | None = None
    opening_tag: str | None = None
    strict_types: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            indent=self.indent if self.indent is not None else DEFAULT_INDENT,
            newline=self.newline if self.newline is not None else NewlineStyle.LF,
            opening_tag=self.opening_tag if self.opening_tag is not None else DEFAULT_OPENING_TAG,
            strict_types=self.strict_types if self.strict_types is not None else True,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "") -> MutableConfig:
        """Build a layer from a parsed TOML table.

        Values of the wrong type are logged and left unset. An indent that is not
        made of spaces and tabs is treated the same way.

        Args:
            data (TomlTable): The flat PhpGen table.
            source (str): Human-readable origin used in log messages.

        Returns:
            MutableConfig: The configuration layer.

        Raises:
            ConfigError: If ``newline`` names an unknown style.
        """
        indent: str | None = get_string_value_or_none(data, Toml.KEY_INDENT, source=source)
        if indent is not None and indent.strip(" \t"):
            logger.warning(
                "Ignoring '%s' in %s: only spaces and tabs are allowed, got %r",
                Toml.KEY_INDENT,
                source or "<config>",
                indent,
            )
            indent = None

        newline_name: str | None = get_string_value_or_none(data, Toml.KEY_NEWLINE, source=source)
        newline: NewlineStyle | None = (
            NewlineStyle.from_name(newline_name) if newline_name is not None else None
        )

        draft = cls(
            indent=indent,
            newline=newline,
            opening_tag=get_string_value_or_none(data, Toml.KEY_OPENING_TAG, source=source),
            strict_types=get_bool_value_or_none(data, Toml.KEY_STRICT_TYPES, source=source),
        )
        logger.trace("Parsed config layer from %s: %s", source or "<dict>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a configuration layer from ``phpgen.toml`` or ``pyproject.toml``.

        For ``pyproject.toml`` only the ``[tool.phpgen]`` table is read.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The layer, or None if the file holds no
            PhpGen configuration.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            section: TomlTable | None = extract_tool_section(data)
            if section is None:
                logger.debug("No [tool.phpgen] section in %s", path)
                return None
            data = section

        draft: MutableConfig = cls.from_toml_dict(data, source=str(path))
        draft.config_files = [path]
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            indent=other.indent if other.indent is not None else self.indent,
            newline=other.newline if other.newline is not None else self.newline,
            opening_tag=other.opening_tag if other.opening_tag is not None else self.opening_tag,
            strict_types=other.strict_types
            if other.strict_types is not None
            else self.strict_types,
            config_files=self.config_files + other.config_files,
        )


# ------------------ Discovery and loading ------------------


def discover_config_file(start: Path) -> Path | None:
    """Return the config file governing ``start``, if any.

    ``phpgen.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it has a ``[tool.phpgen]`` table. Only ``start`` itself is
    searched, not its parents.
    """
    candidate: Path = start / PHPGEN_TOML_NAME
    if candidate.is_file():
        return candidate
    candidate = start / PYPROJECT_TOML_NAME
    if candidate.is_file() and extract_tool_section(load_toml_dict(candidate)) is not None:
        return candidate
    return None


def load_config(path: Path | str | None = None) -> Config:
    """Load the effective rendering configuration.

    Args:
        path (Path | str | None): A ``phpgen.toml`` or ``pyproject.toml`` file to
            layer over the defaults. ``None`` yields the defaults.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If the file sets an unknown newline style.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if path is not None:
        layer: MutableConfig | None = MutableConfig.from_toml_file(Path(path))
        if layer is not None:
            draft = draft.merge_with(layer)
    return draft.freeze()
