# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envlines CLI -- inspect .env files and load them into a store.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_parse``, ``_report_errors``)
live here so every command module can import them.
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from envlines import __version__
from envlines.config import load_config
from envlines.env_file import Pair, read_env_file
from envlines.errors import EnvFileError, ErrorKind

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True, soft_wrap=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _parse(ctx: click.Context) -> tuple[list[Pair], EnvFileError | None]:
    """Read the selected .env file.

    An unreadable file aborts the command. Malformed lines do not: the
    pairs that parsed are returned together with the error.
    """
    path = ctx.obj["path"]
    if ctx.obj["verbose"]:
        console.print(f"[dim]Reading {escape(str(path))}[/dim]")
    try:
        return read_env_file(path, ctx.obj["max_errors"]), None
    except EnvFileError as e:
        if e.kind is ErrorKind.IO:
            raise click.ClickException(f"Cannot read {path}: {e.message}")
        return e.pairs or [], e


def _report_errors(err: EnvFileError) -> None:
    """Print the per-line diagnostics of a ``LinesError``."""
    console.print(f"[yellow]{err.error_count} malformed line(s):[/yellow]")
    for line in err.message.splitlines():
        console.print(f"  [red]{escape(line)}[/red]")


def _override(ctx: click.Context, no_override: bool) -> bool:
    return ctx.obj["config"].override and not no_override


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--path", "-f", default=None,
    help="Path to the .env file (default: ENVLINES_PATH, then config, else .env).",
)
@click.option(
    "--max-errors", type=click.IntRange(min=0), default=None,
    help="Malformed lines listed individually before summarizing (default: 10).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    max_errors: int | None,
    verbose: bool,
) -> None:
    """Read .env files and load them into the environment."""
    try:
        cfg = load_config()
    except ValueError as e:
        raise click.ClickException(f"Invalid config file: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["path"] = cfg.resolve_path(path)
    ctx.obj["max_errors"] = max_errors if max_errors is not None else cfg.max_errors
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envlines.cli import (  # noqa: E402, F401
    check_cmd,
    show_cmd,
    get_cmd,
    load_cmd,
)
