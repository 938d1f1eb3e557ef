from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager, nullcontext
from typing import Any, Dict, Iterator

from config.settings import settings
from models.schema import backfill, default_document

# One lock per process; every JsonStore instance shares it.
_STORE_LOCK = threading.RLock()


class JsonStore:
    """
    Whole-document JSON persistence.

    read()  -> full document, created with empty collections on first access
    write() -> full overwrite via temp file + os.replace (readers never see a partial file)

    No caching: every read() hits the disk.
    """

    def __init__(self, path: str, serialize: bool = True):
        self.path = path
        self.serialize = serialize

    def _ensure(self) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        if not os.path.exists(self.path):
            self._dump(default_document())

    def _dump(self, doc: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path) or "."
        fd, tmp_path = tempfile.mkstemp(prefix=".db-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(doc, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def read(self) -> Dict[str, Any]:
        self._ensure()
        with open(self.path, "r", encoding="utf-8") as fh:
            raw = fh.read()
        doc = json.loads(raw or "{}")
        return backfill(doc)

    def write(self, doc: Dict[str, Any]) -> None:
        self._ensure()
        self._dump(doc)

    def _lock(self):
        return _STORE_LOCK if self.serialize else nullcontext()

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """
        Read-modify-write cycle. The yielded document is written back on normal
        exit; an exception inside the block propagates and nothing is written.
        """
        with self._lock():
            doc = self.read()
            yield doc
            self.write(doc)


def get_json_store() -> JsonStore:
    return JsonStore(settings.data_file, serialize=settings.SERIALIZE_WRITES)
