"""Adapters module - storage backends.

- local_storage: file-backed key-value store used for the task list
"""

from .local_storage import KeyValueStore, default_storage_dir

__all__ = [
    "KeyValueStore",
    "default_storage_dir",
]
