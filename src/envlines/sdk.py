"""SDK for reading .env files and loading them into a variable store."""

from __future__ import annotations

from pathlib import Path

from envlines.config import load_config
from envlines.env_file import Pair, read_env_file
from envlines.errors import EnvFileError, ErrorKind, StoreWriteError
from envlines.store import VariableStore
from envlines.stores.environ import EnvironStore


def _resolve_max_errors(max_errors: int | None) -> int:
    if max_errors is not None:
        return max_errors
    return load_config().max_errors


def file_to_list(path: str | Path, *, max_errors: int | None = None) -> list[Pair]:
    """Read *path* and return its pairs in file order.

    Raises :class:`~envlines.errors.EnvFileError`; for a ``LinesError`` the
    pairs that did parse are on ``err.pairs``.

    Examples
    --------
    >>> from envlines import file_to_list
    >>> for key, value in file_to_list("other.env"):
    ...     print(key, value)
    """
    return read_env_file(path, _resolve_max_errors(max_errors))


def to_list(*, max_errors: int | None = None) -> list[Pair]:
    """Read the default .env file (``ENVLINES_PATH``, config, else ``.env``)."""
    return file_to_list(load_config().resolve_path(), max_errors=max_errors)


def file_to_env(
    path: str | Path,
    *,
    store: VariableStore | None = None,
    override: bool = True,
    max_errors: int | None = None,
) -> None:
    """Read *path* and write its pairs into *store* (default ``os.environ``).

    Parameters
    ----------
    path : str or Path
        The .env file to read.
    store : VariableStore, optional
        Destination. Defaults to :class:`~envlines.stores.EnvironStore`.
    override : bool, default True
        If False, variables that already have a value are left alone.
    max_errors : int, optional
        Diagnostics kept in the error message. Defaults from config (10).

    Raises
    ------
    EnvFileError
        ``io`` when the file cannot be read; nothing is written. ``LinesError``
        when some lines are malformed or the store refuses a pair (e.g. a key
        ``os.environ`` cannot hold); every other pair is written first, so
        the caller may report the error and carry on.
    """
    target = store if store is not None else EnvironStore()
    try:
        pairs = file_to_list(path, max_errors=max_errors)
    except EnvFileError as e:
        if e.kind is ErrorKind.LINES and e.pairs:
            _promote(target, e.pairs, override, e)
        raise
    _promote(target, pairs, override)


def _promote(
    store: VariableStore,
    pairs: list[Pair],
    override: bool,
    parse_error: EnvFileError | None = None,
) -> None:
    """Write *pairs*; pairs the store refuses are reported as a ``LinesError``."""
    try:
        store.update(pairs, override=override)
    except StoreWriteError as e:
        errors = list(parse_error.errors) if parse_error else []
        report = parse_error.message.splitlines() if parse_error else []
        raise EnvFileError(
            ErrorKind.LINES,
            "\n".join(report + e.messages),
            pairs=pairs,
            errors=errors + e.messages,
            error_count=(parse_error.error_count if parse_error else 0) + len(e.rejected),
        ) from e


def to_env(
    *,
    store: VariableStore | None = None,
    override: bool = True,
    max_errors: int | None = None,
) -> None:
    """Load the default .env file into *store* (default ``os.environ``).

    Examples
    --------
    >>> from envlines import to_env
    >>> try:
    ...     to_env()
    ... except EnvFileError as e:
    ...     if e.kind == "io":
    ...         raise
    ...     print(f"Errors in some lines of .env: {e}")
    """
    file_to_env(
        load_config().resolve_path(),
        store=store,
        override=override,
        max_errors=max_errors,
    )


def get_or(key: str, default: str, store: VariableStore | None = None) -> str:
    """Return the value of *key* in *store* (default ``os.environ``), or *default*."""
    target = store if store is not None else EnvironStore()
    value = target.get(key)
    return default if value is None else value
