# topmark:header:start
#
#   project      : PhpGen
#   file         : version.py
#   file_relpath : src/phpgen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen `version` command.

Prints the current PhpGen version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from phpgen.constants import PHPGEN_VERSION


@click.command(
    name="version",
    help="Show the current version of PhpGen.",
)
def version_command() -> None:
    """Show the current version of PhpGen."""
    click.echo(PHPGEN_VERSION)
