# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envlines CLI (run via ``envlines`` or ``python -m envlines``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from envlines.cli import cli
    except ImportError:
        sys.stderr.write("envlines CLI dependencies missing. Install with: pip install envlines\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
