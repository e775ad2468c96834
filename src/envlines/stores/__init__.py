# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Store registry -- built-in stores plus plugins from the ``envlines.stores`` entry-point group."""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from envlines.store import VariableStore
from envlines.stores.environ import EnvironStore
from envlines.stores.keychain import KeychainStore
from envlines.stores.memory import MemoryStore

if TYPE_CHECKING:
    from envlines.config import EnvlinesConfig

_BUILTIN_STORES: dict[str, type[VariableStore]] = {
    EnvironStore.service_name: EnvironStore,
    MemoryStore.service_name: MemoryStore,
    KeychainStore.service_name: KeychainStore,
}


def get_store_class(name: str) -> type[VariableStore]:
    """Return the store class registered as *name*.

    Raises ``KeyError`` with a helpful message when the name is unknown.
    """
    if name in _BUILTIN_STORES:
        return _BUILTIN_STORES[name]
    eps = entry_points(group="envlines.stores")
    for ep in eps:
        if ep.name == name:
            return ep.load()

    raise KeyError(
        f"Unknown store {name!r}. Available stores: {', '.join(list_store_names())}"
    )


def list_store_names() -> list[str]:
    """Return sorted names of built-in and plugin stores."""
    names = set(_BUILTIN_STORES)
    names.update(ep.name for ep in entry_points(group="envlines.stores"))
    return sorted(names)


def make_store(name: str, cfg: EnvlinesConfig | None = None) -> VariableStore:
    """Instantiate the store registered as *name* with options from *cfg*."""
    store_cls = get_store_class(name)
    if store_cls is KeychainStore and cfg is not None:
        return KeychainStore(namespace=cfg.keychain_namespace)
    return store_cls()


__all__ = [
    "EnvironStore",
    "KeychainStore",
    "MemoryStore",
    "get_store_class",
    "list_store_names",
    "make_store",
]
