# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env files into ordered lists of key-value pairs.

Handles:
  - blank lines and ``#`` comments
  - whitespace around keys, ``=`` and values (trimmed)
  - ``"``, ``'`` and `````` quoted keys and values (quotes stripped, inner text kept verbatim)
  - inline ``#`` comments after unquoted values (an unquoted ``#`` in a key is dropped)
  - malformed lines, reported together without discarding the valid ones
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from envlines.errors import EnvFileError, ErrorKind, LineSyntaxError

QUOTE_CHARS = frozenset("\"'`")

# Diagnostics kept per file; further errors are only counted.
MAX_REPORTED_ERRORS = 10


class Pair(NamedTuple):
    key: str
    value: str


def parse_line(line: str) -> Pair:
    """Parse one ``KEY=VALUE`` declaration.

    The line is scanned once, left to right, tracking where the key and the
    value begin and end. Unquoted whitespace never widens either span, so
    both come out trimmed without a separate pass. Raises
    :class:`LineSyntaxError` when the line has no key or no value.
    """
    name_start: int | None = None
    name_stop: int | None = None
    value_start: int | None = None
    value_stop: int | None = None
    in_value = False
    quote: str | None = None
    trim_tail = False

    for pos, char in enumerate(line):
        if char in QUOTE_CHARS and quote in (None, char):
            if quote is None:
                quote = char
                if in_value:
                    value_start = value_stop = pos + 1
                else:
                    name_start = name_stop = pos + 1
            else:
                quote = None
                if in_value:
                    value_stop = pos
                    break
                name_stop = pos
            continue

        if quote is None:
            if char.isspace():
                continue
            if char == "=" and not in_value:
                in_value = True
                continue
            if char == "#":
                if not in_value:
                    continue
                if value_start is not None:
                    value_stop = pos
                    trim_tail = True
                break

        if in_value:
            if value_start is None:
                value_start = pos
            value_stop = pos + 1
        else:
            if name_start is None:
                name_start = pos
            name_stop = pos + 1

    if value_start is None or name_stop is None or name_start == name_stop:
        raise LineSyntaxError(f"No name or value in '{line}'")

    value = line[value_start:value_stop]
    if trim_tail:
        value = value.rstrip()
    return Pair(line[name_start:name_stop], value)


def parse_lines(lines: Iterable[str], max_errors: int = MAX_REPORTED_ERRORS) -> list[Pair]:
    """Parse every declaration in *lines* and return the pairs in file order.

    Comment and blank lines are skipped. A malformed line does not stop the
    scan: all failures are collected and raised together as a
    ``LinesError`` whose ``pairs`` holds everything that did parse. At most
    *max_errors* diagnostics are kept, followed by a count of the rest.

    An ``OSError`` or decoding error while iterating *lines* aborts at once
    with an ``io`` error and no partial result.
    """
    pairs: list[Pair] = []
    errors: list[str] = []
    error_count = 0

    try:
        for index, raw in enumerate(lines):
            stripped = raw.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                pair = parse_line(stripped)
            except LineSyntaxError as e:
                error_count += 1
                if len(errors) < max_errors:
                    errors.append(f"Error in Line {index}: {e}")
                continue
            pairs.append(pair)
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError.from_os_error(e) from e

    if not error_count:
        return pairs

    report = list(errors)
    if error_count > len(errors):
        report.append(f"And {error_count - len(errors)} more errors in .env file")
    raise EnvFileError(
        ErrorKind.LINES,
        "\n".join(report),
        pairs=pairs,
        errors=errors,
        error_count=error_count,
    )


def read_env_file(path: str | Path, max_errors: int = MAX_REPORTED_ERRORS) -> list[Pair]:
    """Read a .env file and return its pairs in file order."""
    try:
        with Path(path).open(encoding="utf-8-sig") as fh:
            return parse_lines(fh, max_errors)
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError.from_os_error(e) from e
