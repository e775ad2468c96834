"""MemoryStore -- variables held in a plain dict."""

from __future__ import annotations

from collections.abc import Mapping

from envlines.store import VariableStore


class MemoryStore(VariableStore):
    """Keep variables in memory; useful for tests and dry runs."""

    service_name: str = "memory"
    service_display_name: str = "In-memory dict"

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._data)
