# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlines check`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from envlines.cli import _parse, _report_errors, cli, console


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Parse the .env file and report malformed lines.

    Exits with status 1 when any line cannot be parsed.
    """
    path = ctx.obj["path"]
    pairs, err = _parse(ctx)
    if err is None:
        console.print(f"[green]{escape(str(path))}: {len(pairs)} variable(s), no errors[/green]")
        return
    _report_errors(err)
    raise click.ClickException(
        f"{path}: {err.error_count} malformed line(s), {len(pairs)} variable(s) parsed"
    )
