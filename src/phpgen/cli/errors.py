# topmark:header:start
#
#   project      : PhpGen
#   file         : errors.py
#   file_relpath : src/phpgen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Exceptions for the PhpGen CLI.

Library errors (`phpgen.errors`) are translated into these `click.ClickException`
subclasses at the command boundary so that each failure maps to a stable exit
code.
"""

from __future__ import annotations

import click

from phpgen.cli.exit_codes import ExitCode


class PhpgenCliError(click.ClickException):
    """Base class for all PhpGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class PhpgenConfigError(PhpgenCliError):
    """Error for invalid configuration files."""

    exit_code = ExitCode.CONFIG_ERROR
