"""EnvironStore -- the current process environment (``os.environ``)."""

from __future__ import annotations

import os

from envlines.store import VariableStore


class EnvironStore(VariableStore):
    """Read/write variables in ``os.environ``."""

    service_name: str = "environ"
    service_display_name: str = "Process environment"

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value
