# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error types raised while reading .env files."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envlines.env_file import Pair


class ErrorKind(str, Enum):
    """Failure category of an :class:`EnvFileError`.

    Members compare equal to their string values, so ``err.kind == "io"``
    works as well as ``err.kind is ErrorKind.IO``.
    """

    IO = "io"
    LINES = "LinesError"

    def __str__(self) -> str:
        return self.value


class LineSyntaxError(ValueError):
    """A single declaration line could not be parsed."""


class EnvFileError(Exception):
    """Reading or parsing a .env file failed.

    ``pairs`` holds every pair parsed successfully when ``kind`` is
    :attr:`ErrorKind.LINES`; it is ``None`` for :attr:`ErrorKind.IO`.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        pairs: list[Pair] | None = None,
        errors: list[str] | None = None,
        error_count: int = 0,
    ) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message
        self.pairs = pairs
        self.errors = errors or []
        self.error_count = error_count

    @classmethod
    def from_os_error(cls, exc: OSError | UnicodeDecodeError) -> EnvFileError:
        return cls(ErrorKind.IO, str(exc))


class StoreWriteError(ValueError):
    """A store refused some pairs; every other pair was still written.

    ``rejected`` lists ``(key, reason)`` in the order the pairs were given.
    """

    def __init__(self, rejected: list[tuple[str, str]], written: int = 0) -> None:
        self.rejected = rejected
        self.written = written
        super().__init__("\n".join(self.messages))

    @property
    def messages(self) -> list[str]:
        return [f"Cannot set '{key}': {reason}" for key, reason in self.rejected]
