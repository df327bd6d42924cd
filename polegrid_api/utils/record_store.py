#flat-file json storage for submitted records

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Iterable

from polegrid_api.utils.errors import StorageError

COLLECTIONS = ("landlords", "organizations", "contact")

# one lock per store file, shared by every RecordStore instance in the process
_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()

def _lock_for(path: Path) -> threading.Lock:
    key = str(path.resolve())
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.Lock()
        return _locks[key]


class RecordStore:
    """
    Single JSON document mapping collection name -> list of records.

    The whole document is read and rewritten on every mutation. Appends are
    serialized per file within this process; separate processes writing the
    same file can still lose updates.
    """
    def __init__(self, db_path: str, collections: Iterable[str] = COLLECTIONS):
        self.path = Path(db_path)
        self.collections = tuple(collections)
        self._lock = _lock_for(self.path)
        with self._lock:
            if not self.path.exists():
                self._write({name: [] for name in self.collections})

    def _read(self) -> Dict[str, Any]:
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError("STORE_READ_FAILED", f"cannot read {self.path}: {e}") from e

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".db-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False)
                os.replace(tmp, self.path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except OSError as e:
            raise StorageError("STORE_WRITE_FAILED", f"cannot write {self.path}: {e}") from e

    def read(self) -> Dict[str, Any]:
        return self._read()

    def write(self, data: Dict[str, Any]) -> None:
        with self._lock:
            self._write(data)

    def list(self, collection: str) -> List[Dict[str, Any]]:
        return self._read().get(collection) or []

    def append(self, collection: str, record: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            data = self._read()
            records = data.get(collection) or []
            records.append(record)
            data[collection] = records
            self._write(data)
        return record
