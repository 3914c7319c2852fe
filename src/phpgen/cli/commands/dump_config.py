# topmark:header:start
#
#   project      : PhpGen
#   file         : dump_config.py
#   file_relpath : src/phpgen/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen `dump-config` command.

Emits the effective rendering configuration as TOML: the built-in defaults,
overridden by an explicit ``--config`` file or, failing that, by a
``phpgen.toml`` / ``[tool.phpgen]`` found in the current directory.
"""

from __future__ import annotations

from pathlib import Path

import click

from phpgen.cli.errors import PhpgenConfigError
from phpgen.config.io import to_toml
from phpgen.config.logging import get_logger
from phpgen.config.model import Config, discover_config_file, load_config
from phpgen.errors import ConfigError

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective PhpGen rendering configuration as TOML.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this phpgen.toml or pyproject.toml file.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.phpgen] for pasting into pyproject.toml.",
)
def dump_config_command(*, config_path: Path | None, pyproject: bool) -> None:
    """Dump the effective configuration as TOML.

    Args:
        config_path (Path | None): Explicit config file; discovered in the current
            directory when omitted.
        pyproject (bool): Nest the output under ``[tool.phpgen]``.

    Raises:
        PhpgenConfigError: If the configuration file holds an invalid value.
    """
    source: Path | None = config_path or discover_config_file(Path.cwd())
    logger.debug("Using config source: %s", source)

    try:
        config: Config = load_config(source)
    except ConfigError as exc:
        raise PhpgenConfigError(f"{source}: {exc}") from exc

    click.echo(to_toml(config.to_toml_dict(), for_pyproject=pyproject), nl=False)
