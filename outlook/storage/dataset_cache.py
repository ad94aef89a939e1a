"""Raw dataset cache keyed by rounded coordinates.

Entries hold the upstream response verbatim. They are written once per miss
and only ever replaced whole; derived outlooks are never cached.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


def cache_key(latitude: float, longitude: float, precision: int = 2) -> str:
    """E.g. (41.0082, 28.9784) -> 'data-41_01_28_98'."""
    lat = f"{latitude:.{precision}f}".replace(".", "_")
    lon = f"{longitude:.{precision}f}".replace(".", "_")
    return f"data-{lat}_{lon}"


class DatasetCache(Protocol):
    def get(self, key: str) -> dict | None: ...

    def put(self, key: str, raw: dict) -> None: ...


class MemoryDatasetCache:
    def __init__(self) -> None:
        self._storage: dict[str, str] = {}

    def get(self, key: str) -> dict | None:
        data = self._storage.get(key)
        if data is None:
            return None
        return json.loads(data)

    def put(self, key: str, raw: dict) -> None:
        self._storage[key] = json.dumps(raw)

    def clear(self) -> int:
        count = len(self._storage)
        self._storage.clear()
        return count


class FileDatasetCache:
    """One JSON file per key under a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> dict | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError:
            logger.warning("Corrupt cache entry %s, ignoring", path.name)
            return None

    def put(self, key: str, raw: dict) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # One temp file per write, so concurrent puts of a key never share it.
        with tempfile.NamedTemporaryFile(
            "w",
            dir=self.directory,
            prefix=f".{key}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as f:
            json.dump(raw, f, indent=2)
        os.replace(f.name, self.path_for(key))

    def clear(self) -> int:
        if not self.directory.exists():
            return 0
        removed = 0
        for p in self.directory.glob("data-*.json"):
            p.unlink()
            removed += 1
        return removed
