"""Tests for the SDK wrappers (to_env, file_to_env, to_list, file_to_list, get_or)."""

from __future__ import annotations

import os

import pytest

from envlines import (
    EnvFileError,
    ErrorKind,
    file_to_env,
    file_to_list,
    get_or,
    to_env,
    to_list,
)
from envlines.stores import MemoryStore


def test_top_level_imports():
    """from envlines import file_to_env works."""
    from envlines import file_to_env as fte

    assert callable(fte)


def test_file_to_list(sample_env):
    result = file_to_list(sample_env)
    other_user = next(value for key, value in result if key == "FOO6")
    assert other_user == "BAR6"


def test_file_to_list_partial_on_error(broken_env):
    with pytest.raises(EnvFileError) as exc_info:
        file_to_list(broken_env)
    assert exc_info.value.pairs == [("GOOD", "1"), ("ALSO_GOOD", "2"), ("LAST", "3")]


def test_file_to_list_max_errors(tmp_path):
    p = tmp_path / "bad.env"
    p.write_text("a\nb\nc\n")
    with pytest.raises(EnvFileError) as exc_info:
        file_to_list(p, max_errors=1)
    assert exc_info.value.message.splitlines()[-1] == "And 2 more errors in .env file"


def test_to_list_reads_dot_env_in_cwd():
    with open(".env", "w", encoding="utf-8") as fh:
        fh.write("myuser=world\n")
    assert to_list() == [("myuser", "world")]


def test_to_list_uses_envlines_path(sample_env, monkeypatch):
    monkeypatch.setenv("ENVLINES_PATH", str(sample_env))
    assert to_list()[0] == ("FOO", "BAR")


def test_to_list_missing_dot_env():
    with pytest.raises(EnvFileError) as exc_info:
        to_list()
    assert exc_info.value.kind is ErrorKind.IO


def test_file_to_env_into_store(sample_env):
    store = MemoryStore()
    file_to_env(sample_env, store=store)
    data = store.as_dict()
    assert data["FOO"] == "BAR"
    assert data["SPACED"] == " value "
    assert len(data) == 9


def test_file_to_env_writes_partial_then_raises(broken_env):
    store = MemoryStore()
    with pytest.raises(EnvFileError) as exc_info:
        file_to_env(broken_env, store=store)
    assert exc_info.value.kind == "LinesError"
    assert store.as_dict() == {"GOOD": "1", "ALSO_GOOD": "2", "LAST": "3"}


def test_file_to_env_io_error_writes_nothing(tmp_path):
    store = MemoryStore()
    with pytest.raises(EnvFileError) as exc_info:
        file_to_env(tmp_path / "missing.env", store=store)
    assert exc_info.value.kind is ErrorKind.IO
    assert store.as_dict() == {}


def test_file_to_env_override_false(sample_env):
    store = MemoryStore({"FOO": "already_set"})
    file_to_env(sample_env, store=store, override=False)
    assert store.get("FOO") == "already_set"
    assert store.get("FOO2") == "BAR2"


def test_file_to_env_defaults_to_os_environ(tmp_path, scrub_env):
    scrub_env("ENVLINES_SDK_USER")
    p = tmp_path / "other.env"
    p.write_text("ENVLINES_SDK_USER=other user name\n")
    file_to_env(p)
    assert os.environ["ENVLINES_SDK_USER"] == "other user name"


def test_to_env_reads_dot_env(scrub_env):
    scrub_env("ENVLINES_SDK_A", "ENVLINES_SDK_B")
    with open(".env", "w", encoding="utf-8") as fh:
        fh.write("ENVLINES_SDK_A=1\nerror=\nENVLINES_SDK_B=2\n")
    with pytest.raises(EnvFileError) as exc_info:
        to_env()
    assert exc_info.value.message.startswith("Error in Line 1: No name or value in 'error='")
    assert os.environ["ENVLINES_SDK_A"] == "1"
    assert os.environ["ENVLINES_SDK_B"] == "2"


def test_to_env_into_store():
    with open(".env", "w", encoding="utf-8") as fh:
        fh.write("KEY=value\n")
    store = MemoryStore()
    to_env(store=store)
    assert store.as_dict() == {"KEY": "value"}


def test_get_or_default():
    store = MemoryStore({"present": "yes"})
    assert get_or("present", "default", store) == "yes"
    assert get_or("key_not_here", "default_key", store) == "default_key"


def test_get_or_empty_value_is_not_default():
    store = MemoryStore({"EMPTY": ""})
    assert get_or("EMPTY", "fallback", store) == ""


def test_get_or_os_environ(monkeypatch):
    monkeypatch.setenv("ENVLINES_SDK_PRESENT", "here")
    monkeypatch.delenv("ENVLINES_SDK_ABSENT", raising=False)
    assert get_or("ENVLINES_SDK_PRESENT", "x") == "here"
    assert get_or("ENVLINES_SDK_ABSENT", "not set") == "not set"


def test_file_to_env_reports_names_environ_refuses(tmp_path, scrub_env):
    scrub_env("ENVLINES_SDK_AFTER")
    p = tmp_path / "odd.env"
    p.write_text('"A=B"=x\nbad\nENVLINES_SDK_AFTER=1\n')
    with pytest.raises(EnvFileError) as exc_info:
        file_to_env(p)
    err = exc_info.value
    assert err.kind is ErrorKind.LINES
    assert err.message.splitlines() == [
        "Error in Line 1: No name or value in 'bad'",
        "Cannot set 'A=B': illegal environment variable name",
    ]
    assert err.error_count == 2
    assert err.pairs == [("A=B", "x"), ("ENVLINES_SDK_AFTER", "1")]
    assert os.environ["ENVLINES_SDK_AFTER"] == "1"


def test_file_to_env_refused_pair_without_parse_errors(tmp_path, scrub_env):
    scrub_env("ENVLINES_SDK_OK")
    p = tmp_path / "odd.env"
    p.write_text('"A=B"=x\nENVLINES_SDK_OK=yes\n')
    with pytest.raises(EnvFileError) as exc_info:
        file_to_env(p)
    assert exc_info.value.kind == "LinesError"
    assert exc_info.value.message.startswith("Cannot set 'A=B'")
    assert os.environ["ENVLINES_SDK_OK"] == "yes"
