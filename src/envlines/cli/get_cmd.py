# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlines get`` command."""

from __future__ import annotations

import os

import click

from envlines.cli import _override, _parse, _report_errors, cli
from envlines.sdk import get_or
from envlines.stores.memory import MemoryStore


@cli.command()
@click.argument("key")
@click.option("--default", "default", default=None, help="Printed when KEY is set nowhere.")
@click.option("--no-override", is_flag=True, help="Prefer an existing environment value over the file.")
@click.pass_context
def get(ctx: click.Context, key: str, default: str | None, no_override: bool) -> None:
    """Print the value KEY would have after loading the .env file."""
    pairs, err = _parse(ctx)
    if err is not None:
        _report_errors(err)
    env = MemoryStore(os.environ)
    env.update(pairs, override=_override(ctx, no_override))
    if default is None:
        value = env.get(key)
        if value is None:
            raise click.ClickException(f"Key '{key}' not found.")
    else:
        value = get_or(key, default, env)
    click.echo(value)
