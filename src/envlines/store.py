# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Abstract base class for the stores parsed variables are written into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from envlines.errors import StoreWriteError

# Keychain namespace used when none is configured.
DEFAULT_NAMESPACE: str = "_default_"


class VariableStore(ABC):
    """Named-variable backend: process environment, a dict, the OS keychain...

    The parser never touches a store; only the SDK wrappers and the CLI
    write into one, after parsing has finished.

    **Plugin API**: third-party stores register under the ``envlines.stores``
    entry-point group and define ``service_name`` (short CLI name) and
    ``service_display_name`` (human-readable description).
    """

    service_name: ClassVar[str] = ""
    service_display_name: ClassVar[str] = ""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if it is not set."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite *key* with *value*."""

    def update(self, pairs: Iterable[tuple[str, str]], override: bool = True) -> int:
        """Write *pairs* in order and return how many were written.

        Later duplicates of a key overwrite earlier ones. With
        ``override=False`` a key that already has a value before this call
        is left untouched.

        A pair the backend refuses (``ValueError`` or ``OSError`` from
        :meth:`set`, e.g. a name ``os.environ`` cannot hold) does not stop
        the rest; once all pairs are done a :class:`StoreWriteError` lists
        the refused ones.
        """
        count = 0
        preexisting: dict[str, bool] = {}
        rejected: list[tuple[str, str]] = []
        for key, value in pairs:
            try:
                if not override:
                    if key not in preexisting:
                        preexisting[key] = self.get(key) is not None
                    if preexisting[key]:
                        continue
                self.set(key, value)
            except (ValueError, OSError) as e:
                rejected.append((key, str(e)))
                continue
            count += 1
        if rejected:
            raise StoreWriteError(rejected, count)
        return count
