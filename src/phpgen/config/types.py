# topmark:header:start
#
#   project      : PhpGen
#   file         : types.py
#   file_relpath : src/phpgen/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Lightweight config types.

Keep this module free of config I/O so that low-level modules can import it
without cycles.
"""

from __future__ import annotations

from enum import Enum

from phpgen.errors import ConfigError


class NewlineStyle(str, Enum):
    """Line terminator used when joining rendered lines."""

    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @classmethod
    def from_name(cls, key_name: str) -> NewlineStyle:
        """Look up a newline style by its (case-insensitive) name.

        Args:
            key_name (str): ``"LF"``, ``"CRLF"`` or ``"CR"``.

        Returns:
            NewlineStyle: The matching member.

        Raises:
            ConfigError: If ``key_name`` names no known style.
        """
        try:
            return cls[key_name.strip().upper()]
        except KeyError as exc:
            known: str = ", ".join(member.name for member in cls)
            raise ConfigError(
                f"Unknown newline style '{key_name}' (expected one of: {known})"
            ) from exc
