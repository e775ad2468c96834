# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""KeychainStore -- variables kept in the OS keychain via the ``keyring`` library.

Cross-platform: macOS Keychain, Linux SecretService (GNOME Keyring / KDE
Wallet), Windows Credential Locker.

Values are stored under service ``envlines:{namespace}`` with the variable
name as the username.
"""

from __future__ import annotations

import keyring
import keyring.errors

from envlines.store import DEFAULT_NAMESPACE, VariableStore

SERVICE_PREFIX = "envlines"


class KeychainStore(VariableStore):
    """Read/write variables in the OS keychain, scoped by namespace."""

    service_name: str = "keychain"
    service_display_name: str = "System keychain"

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        self._namespace = namespace or DEFAULT_NAMESPACE
        self._service = f"{SERVICE_PREFIX}:{self._namespace}"

    @property
    def namespace(self) -> str:
        return self._namespace

    def get(self, key: str) -> str | None:
        return keyring.get_password(self._service, key)

    def set(self, key: str, value: str) -> None:
        try:
            keyring.set_password(self._service, key, value)
        except keyring.errors.PasswordSetError as e:
            raise ValueError(f"keychain refused {key!r}: {e}") from e
