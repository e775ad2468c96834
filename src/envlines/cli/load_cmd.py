# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlines load`` and ``envlines run`` commands."""

from __future__ import annotations

import os
import subprocess

import click
from rich.markup import escape

from envlines.cli import _override, _parse, _report_errors, cli, console
from envlines.errors import StoreWriteError
from envlines.stores import list_store_names, make_store
from envlines.stores.memory import MemoryStore


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------

@cli.command()
@click.option(
    "--store", "store_name", default=None,
    help="Destination store, e.g. keychain (default: ENVLINES_STORE, then config, else environ).",
)
@click.option("--no-override", is_flag=True, help="Keep values the store already has.")
@click.pass_context
def load(ctx: click.Context, store_name: str | None, no_override: bool) -> None:
    """Write the variables of the .env file into a store.

    Valid lines are loaded even when others are malformed; the command then
    exits with status 1.
    """
    cfg = ctx.obj["config"]
    path = ctx.obj["path"]
    name = cfg.resolve_store(store_name)
    try:
        store = make_store(name, cfg)
    except KeyError as e:
        raise click.UsageError(e.args[0])
    if ctx.obj["verbose"]:
        console.print(f"[dim]Store: {name} (available: {', '.join(list_store_names())})[/dim]")

    pairs, err = _parse(ctx)
    if err is not None:
        _report_errors(err)
    rejected: list[str] = []
    if pairs:
        try:
            count = store.update(pairs, override=_override(ctx, no_override))
        except StoreWriteError as e:
            count = e.written
            rejected = e.messages
        console.print(f"[green]Loaded {count} variable(s) from {escape(str(path))} into {name}[/green]")
    else:
        console.print(f"[yellow]No variables found in {escape(str(path))}[/yellow]")
    for message in rejected:
        console.print(f"  [red]{escape(message)}[/red]")
    if err is not None:
        raise click.ClickException(f"{err.error_count} malformed line(s) in {path}")
    if rejected:
        raise click.ClickException(f"{name} refused {len(rejected)} variable(s)")


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

@cli.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.option("--no-override", is_flag=True, help="Keep variables already set in the environment.")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, no_override: bool, command: tuple[str, ...]) -> None:
    """Run COMMAND with the .env variables added to its environment.

    Use ``--`` to separate envlines options from the command's own:
    envlines run -- python manage.py runserver
    """
    pairs, err = _parse(ctx)
    if err is not None:
        _report_errors(err)
    env = MemoryStore(os.environ)
    env.update(pairs, override=_override(ctx, no_override))
    if ctx.obj["verbose"]:
        console.print(f"[dim]Running {escape(' '.join(command))}[/dim]")
    try:
        result = subprocess.run(list(command), env=env.as_dict())
    except FileNotFoundError:
        raise click.ClickException(f"Command not found: {command[0]}")
    except ValueError as e:
        raise click.ClickException(f"Cannot pass the .env variables to {command[0]}: {e}")
    ctx.exit(result.returncode)
