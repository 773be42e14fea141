# portal/storage.py

"""Local key-value storage and the contact log persisted in it.

The store mirrors the browser's localStorage: string keys mapping to string
values. ContactLog keeps the in-memory list of records and writes the whole
list back to one named entry after every append.

A single ContactLog per store is shared by every session of the app, so
appends and saves are serialised with a lock and each snapshot includes every
record accepted so far.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from portal.exceptions import StorageError
from portal.records import ContactRecord

logger = logging.getLogger(__name__)


# -------------------------
# Stores
# -------------------------
class MappingStore:
    """Store backed by any mutable mapping (a dict, or st.session_state)."""

    def __init__(self, mapping=None):
        self._mapping = {} if mapping is None else mapping

    def get_item(self, key):
        return self._mapping.get(key)

    def set_item(self, key, value: str):
        self._mapping[key] = value


class FileStore:
    """Store backed by a single JSON object on disk."""

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except ValueError:
            # bad JSON or bytes that are not UTF-8
            logger.warning("Local storage file %s is corrupt, ignoring it", self.path)
            return {}
        except OSError as e:
            raise StorageError(f"Could not read local storage file {self.path}") from e
        return data if isinstance(data, dict) else {}

    def get_item(self, key):
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key, value: str):
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def _write_all(self, data):
        tmp = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".tmp-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            if tmp is not None and os.path.exists(tmp):
                os.unlink(tmp)
            raise StorageError(f"Could not write local storage file {self.path}") from e


# -------------------------
# Contact log
# -------------------------
class ContactLog:
    def __init__(self, store, key):
        self.store = store
        self.key = key
        self.records = []
        self._lock = threading.RLock()

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        with self._lock:
            return iter(list(self.records))

    def load(self):
        """Replace the in-memory list with the stored snapshot.

        An absent entry leaves the list empty. An unreadable store or a
        malformed entry is treated the same way: it is logged, and a malformed
        entry is left in place until the next save overwrites it.
        """
        with self._lock:
            self.records = []
            try:
                stored = self.store.get_item(self.key)
            except StorageError as e:
                logger.warning("Local storage unavailable, starting empty: %s", e)
                return self.records
            if stored is None:
                return self.records

            try:
                data = json.loads(stored)
                if not isinstance(data, list):
                    raise ValueError("snapshot is not a JSON array")
                records = [ContactRecord.from_dict(item) for item in data]
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning("Ignoring malformed snapshot in %r: %s", self.key, e)
                return self.records

            self.records = records
            logger.info("Loaded %d contact record(s) from storage", len(records))
            return self.records

    def save(self):
        with self._lock:
            payload = json.dumps([r.to_dict() for r in self.records], ensure_ascii=False)
            self.store.set_item(self.key, payload)
            logger.info("Saved %d contact record(s) to storage", len(self.records))

    def append(self, record: ContactRecord):
        with self._lock:
            self.records.append(record)
            try:
                self.save()
            except Exception:
                # keep memory in step with the last snapshot that was written
                self.records.pop()
                raise
