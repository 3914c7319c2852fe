# topmark:header:start
#
#   project      : PhpGen
#   file         : main.py
#   file_relpath : src/phpgen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen command-line entry point.

Logging is configured once at group level from ``PHPGEN_LOG_LEVEL``; the
subcommands are registered below.
"""

from __future__ import annotations

import click

from phpgen.cli.commands.dump_config import dump_config_command
from phpgen.cli.commands.version import version_command
from phpgen.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PhpGen CLI",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Entry point for the PhpGen CLI."""
    ctx.ensure_object(dict)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)
    logger.debug("PhpGen CLI started (log level from env: %s)", level_env)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
