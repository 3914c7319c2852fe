# topmark:header:start
#
#   project      : PhpGen
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""CLI test: `version` command output and group help."""

from __future__ import annotations

import pytest
from packaging.version import InvalidVersion, Version

from phpgen.constants import PHPGEN_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["version"])

    assert_SUCCESS(result)

    out: str = result.stdout.strip()
    assert out == PHPGEN_VERSION

    try:
        Version(out)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


@mark_cli
def test_group_without_command_shows_help() -> None:
    """Invoking the bare group lists the available commands."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "dump-config" in result.stdout
    assert "version" in result.stdout


@mark_cli
def test_unknown_command_is_rejected() -> None:
    """Click reports unknown commands as usage errors."""
    result = run_cli(["no-such-command"])

    assert result.exit_code != 0
