# topmark:header:start
#
#   project      : PhpGen
#   file         : errors.py
#   file_relpath : src/phpgen/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Exceptions for PhpGen.

Usage:
    Raise these exceptions from constructors and combinators to signal programming
    errors in the caller's code. PhpGen never catches them internally; they reach
    the caller unchanged.

Taxonomy:
    - `ValidationError`: a symbol reference was built from an empty or malformed
      segment.
    - `UsageError`: a combinator or generator method received an argument it cannot
      handle (e.g. an unsupported line type).
    - `ConfigError`: a configuration value is invalid and cannot be defaulted.
"""

from __future__ import annotations


class PhpgenError(Exception):
    """Base class for all PhpGen errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return self.message


class ValidationError(PhpgenError, ValueError):
    """Error for symbol references built from empty or separator-containing segments."""


class UsageError(PhpgenError, TypeError):
    """Error for malformed combinator or generator arguments."""


class ConfigError(PhpgenError):
    """Error for configuration values that are invalid and have no safe default."""
