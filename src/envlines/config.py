""".envlines.toml configuration loading.

Searches upward from cwd for ``.envlines.toml`` and merges with
``ENVLINES_*`` environment variables and CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from envlines.env_file import MAX_REPORTED_ERRORS
from envlines.store import DEFAULT_NAMESPACE

CONFIG_FILENAME = ".envlines.toml"


@dataclass
class EnvlinesConfig:
    """Resolved configuration for the current invocation."""

    path: str = ".env"
    max_errors: int = MAX_REPORTED_ERRORS
    override: bool = True
    store: str = "environ"
    keychain_namespace: str = DEFAULT_NAMESPACE
    config_path: Path | None = None

    def resolve_path(self, path: str | Path | None = None) -> Path:
        """Pick the .env file: explicit *path*, then ``ENVLINES_PATH``, then config.

        A relative ``path`` from the config file is taken relative to the
        directory holding that file.
        """
        explicit = path or os.environ.get("ENVLINES_PATH")
        if explicit:
            return Path(explicit)
        configured = Path(self.path)
        if self.config_path is not None and not configured.is_absolute():
            return self.config_path.parent / configured
        return configured

    def resolve_store(self, store: str | None = None) -> str:
        """Pick the store name: explicit *store*, then ``ENVLINES_STORE``, then config."""
        return store or os.environ.get("ENVLINES_STORE") or self.store


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envlines.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def _string(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} must be a non-empty string, got {value!r}")
    return value


def load_config(path: Path | None = None) -> EnvlinesConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvlinesConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envlines", {})
    keychain = section.get("keychain", {})

    max_errors = section.get("max_errors", MAX_REPORTED_ERRORS)
    if isinstance(max_errors, bool) or not isinstance(max_errors, int) or max_errors < 0:
        raise ValueError(f"max_errors must be a non-negative integer, got {max_errors!r}")

    override = section.get("override", True)
    if not isinstance(override, bool):
        raise ValueError(f"override must be true or false, got {override!r}")

    return EnvlinesConfig(
        path=_string(section, "path", ".env"),
        max_errors=max_errors,
        override=override,
        store=_string(section, "store", "environ"),
        keychain_namespace=_string(keychain, "namespace", DEFAULT_NAMESPACE),
        config_path=path,
    )
