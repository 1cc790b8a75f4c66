"""JSON-file-backed implementation of CollectionStore.

One file per entity type, holding a top-level JSON array.  Writes go to a
temporary file in the same directory which is then renamed over the
target, so a reader never sees a half-written collection.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import TypeVar

from shopfront.domain.repository.collection_store import CollectionStore
from shopfront.infrastructure.persistence.codecs import Codec

T = TypeVar("T")

NEW_FILE_MODE = 0o644

logger = logging.getLogger(__name__)


class JsonCollectionStore(CollectionStore[T]):

    def __init__(self, file_path: Path, codec: Codec[T]) -> None:
        super().__init__()
        self._file_path = file_path
        self._codec = codec

    # --- CollectionStore interface --------------------------------------------

    def load_all(self) -> list[T]:
        return [self._codec.to_domain(raw) for raw in self._load_raw()]

    def overwrite_all(self, items: list[T]) -> None:
        self._persist_raw([self._codec.to_raw(item) for item in items])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("%s does not exist yet, treating as empty", self._file_path)
            return []
        except OSError:
            logger.exception("Unable to read %s", self._file_path)
            raise

        if not text.strip():
            return []

        try:
            records = json.loads(text)
        except json.JSONDecodeError:
            logger.error("Malformed JSON in %s", self._file_path)
            raise
        if not isinstance(records, list):
            raise ValueError(f"{self._file_path} must hold a JSON array")

        logger.debug("Loaded %d records from %s", len(records), self._file_path)
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        directory = self._file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(json.dumps(records, indent=2) + "\n")
                os.chmod(tmp_name, self._target_mode())
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError:
            logger.exception("Unable to write %s", self._file_path)
            raise

        logger.debug("Wrote %d records to %s", len(records), self._file_path)

    def _target_mode(self) -> int:
        """Permission bits the rewritten file should carry.

        An existing file keeps its mode; a new one gets 0644.
        """
        try:
            return stat.S_IMODE(self._file_path.stat().st_mode)
        except FileNotFoundError:
            return NEW_FILE_MODE
