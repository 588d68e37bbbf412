"""JSON-file-backed implementation of DocumentStore."""

from __future__ import annotations

import json
import logging
import threading
from contextlib import AbstractContextManager
from pathlib import Path

from storefront.domain.model.document import Document
from storefront.domain.repository.document_store import (
    DocumentStore,
    Loaded,
    LoadResult,
    Recovered,
)

logger = logging.getLogger(__name__)


class JsonDocumentStore(DocumentStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self._lock = threading.RLock()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- DocumentStore interface ----------------------------------------------

    def load(self) -> LoadResult:
        if not self._file_path.exists():
            logger.warning(
                "Data file not found, creating a new one",
                extra={"data_file": str(self._file_path)},
            )
            document = Document.empty()
            self.save(document)
            return Loaded(document)

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            document = Document.from_raw(raw)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error(
                "Could not read data file, using an empty document: %s",
                exc,
                extra={"data_file": str(self._file_path)},
            )
            return Recovered(Document.empty(), cause=str(exc))

        for name in document.defaulted:
            logger.warning(
                "Field '%s' missing or not a list, defaulting to empty",
                name,
                extra={"data_file": str(self._file_path)},
            )
        return Loaded(document)

    def save(self, document: Document) -> bool:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            # NaN and Infinity are not JSON; refuse them rather than write them
            payload = json.dumps(
                document.to_raw(), indent=2, ensure_ascii=False, allow_nan=False
            )
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload + "\n", encoding="utf-8")
            tmp_path.replace(self._file_path)
        except (OSError, TypeError, ValueError) as exc:
            logger.error(
                "Could not save data file: %s",
                exc,
                extra={"data_file": str(self._file_path)},
            )
            return False
        return True

    def lock(self) -> AbstractContextManager:
        return self._lock
