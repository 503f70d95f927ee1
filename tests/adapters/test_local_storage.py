"""Tests for the file-backed key-value store."""

from unittest.mock import patch

import pytest

from tasklist_cli.adapters.local_storage import KeyValueStore, default_storage_dir
from tasklist_cli.exceptions import StorageQuotaExceededError


def test_get_missing_key_returns_none(storage):
    assert storage.get_item("tasks") is None


def test_set_then_get(storage):
    storage.set_item("tasks", '[{"id": "1"}]')
    assert storage.get_item("tasks") == '[{"id": "1"}]'
    assert (storage.root / "tasks.json").exists()


def test_set_replaces_value(storage):
    storage.set_item("tasks", "one")
    storage.set_item("tasks", "two")
    assert storage.get_item("tasks") == "two"


def test_set_leaves_no_temp_files(storage):
    storage.set_item("tasks", "value")
    assert [p.name for p in storage.root.iterdir()] == ["tasks.json"]


def test_remove_item(storage):
    storage.set_item("tasks", "value")
    storage.remove_item("tasks")
    assert storage.get_item("tasks") is None


def test_remove_missing_key_is_noop(storage):
    storage.remove_item("nothing")


def test_keys_and_clear(storage):
    assert storage.keys() == []
    storage.set_item("b", "2")
    storage.set_item("a", "1")
    assert storage.keys() == ["a", "b"]
    storage.clear()
    assert storage.keys() == []


def test_quota_exceeded(tmp_path):
    store = KeyValueStore(tmp_path, quota_bytes=4)
    with pytest.raises(StorageQuotaExceededError):
        store.set_item("tasks", "too long")
    assert store.get_item("tasks") is None


def test_quota_error_is_an_os_error():
    assert issubclass(StorageQuotaExceededError, OSError)


def test_unicode_values(storage):
    storage.set_item("tasks", "⏰ café")
    assert storage.get_item("tasks") == "⏰ café"


@pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden"])
def test_invalid_keys_rejected(storage, key):
    with pytest.raises(ValueError):
        storage.get_item(key)


def test_default_root_uses_user_data_dir(tmp_path):
    with patch(
        "tasklist_cli.adapters.local_storage.user_data_dir", return_value=str(tmp_path)
    ):
        assert default_storage_dir() == tmp_path / "storage"
        assert KeyValueStore().root == tmp_path / "storage"
