# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlines show`` -- print parsed pairs as dotenv, JSON, or YAML."""

from __future__ import annotations

import json

import click

from envlines.cli import HAS_YAML, _parse, _report_errors, cli
from envlines.env_file import QUOTE_CHARS, Pair

if HAS_YAML:
    import yaml


def _format_env_value(value: str) -> str:
    """Format a value for .env: quote it when it would not read back verbatim."""
    if value and value == value.strip() and "#" not in value and not (set(value) & QUOTE_CHARS):
        return value
    for quote in ('"', "'", "`"):
        if quote not in value:
            return f"{quote}{value}{quote}"
    # Holds all three quote characters; there is no escape syntax to fall back on.
    return value


def _format_env_key(key: str) -> str:
    """Format a key for .env; an ``=`` only survives inside quotes."""
    if "=" in key:
        for quote in ('"', "'", "`"):
            if quote not in key:
                return f"{quote}{key}{quote}"
    return _format_env_value(key)


def _render(pairs: list[Pair], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(dict(pairs), indent=2, ensure_ascii=False)
    if fmt == "yaml":
        if not HAS_YAML:
            raise click.ClickException(
                "PyYAML is not installed. Install with: pip install pyyaml"
            )
        return yaml.safe_dump(dict(pairs), sort_keys=False, allow_unicode=True).rstrip("\n")
    return "\n".join(
        f"{_format_env_key(key)}={_format_env_value(value)}" for key, value in pairs
    )


@cli.command()
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value, duplicates kept), json, yaml (last duplicate wins).",
)
@click.option(
    "--strict", is_flag=True,
    help="Fail on malformed lines instead of printing the pairs that parsed.",
)
@click.pass_context
def show(ctx: click.Context, fmt: str, strict: bool) -> None:
    """Print the parsed variables to stdout in file order."""
    pairs, err = _parse(ctx)
    if err is not None:
        _report_errors(err)
        if strict:
            raise click.ClickException(f"{err.error_count} malformed line(s) in {ctx.obj['path']}")
    if pairs:
        click.echo(_render(pairs, fmt))
