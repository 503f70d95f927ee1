"""File-backed key-value store.

Mirrors the browser storage API (getItem/setItem/removeItem) on top of a
directory: every key is one UTF-8 text file. Values are opaque strings; the
task repository decides what goes in them.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from platformdirs import user_data_dir

from tasklist_cli.exceptions import StorageQuotaExceededError

_SUFFIX = ".json"


def default_storage_dir() -> Path:
    """Return the default storage directory under the user data dir."""
    return Path(user_data_dir("tasklist_cli")) / "storage"


class KeyValueStore:
    """Persistent string key-value store.

    Args:
        root: Directory holding one file per key
        quota_bytes: Optional maximum encoded size of a single value
    """

    def __init__(self, root: Path | str | None = None, quota_bytes: int | None = None):
        self.root = Path(root) if root is not None else default_storage_dir()
        self.quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"invalid storage key: {key!r}")
        return self.root / f"{key}{_SUFFIX}"

    def get_item(self, key: str) -> str | None:
        """Return the stored value for *key*, or None when it is absent."""
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value.

        Raises:
            StorageQuotaExceededError: If the value is larger than the quota
            OSError: If the directory or file cannot be written
        """
        data = value.encode("utf-8")
        if self.quota_bytes is not None and len(data) > self.quota_bytes:
            raise StorageQuotaExceededError(
                f"value for '{key}' is {len(data)} bytes, quota is {self.quota_bytes}"
            )

        path = self._path(key)
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        """Delete *key*; a missing key is not an error."""
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        """List stored keys in name order."""
        if not self.root.is_dir():
            return []
        return sorted(p.stem for p in self.root.glob(f"*{_SUFFIX}"))

    def clear(self) -> None:
        """Remove every stored key."""
        for key in self.keys():
            self.remove_item(key)
