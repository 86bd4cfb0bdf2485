"""SQLite-backed history of analysis results.

The whole history is one JSON array stored under a single key, most recent
first. Reads skip malformed entries and degrade to an empty history when the
stored value cannot be parsed.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from placement_prep.errors import NotFoundError
from placement_prep.models.analysis import AnalysisResult, Confidence, recompute_final_score
from placement_prep.pipeline.confidence import toggle_confidence
from placement_prep.store.legacy import is_complete, normalize_record, rename_legacy_keys

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".placement-prep" / "history.db"
DEFAULT_HISTORY_KEY = "placement_readiness_history"

# Everything else on a record is write-once.
MUTABLE_FIELDS = frozenset({"skill_confidence_map", "final_score", "updated_at"})


class HistoryStore:
    """Key/value store holding the analysis history under one well-known key."""

    def __init__(
        self,
        db_path: str | Path = DEFAULT_DB_PATH,
        history_key: str = DEFAULT_HISTORY_KEY,
    ):
        self.db_path = Path(db_path)
        self.history_key = history_key
        self._lock = threading.Lock()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    # --- raw access ---

    def _read_raw(self) -> list[Any]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (self.history_key,)
            ).fetchone()
        if row is None:
            return []
        data = json.loads(row[0])
        if not isinstance(data, list):
            raise ValueError(f"History under {self.history_key!r} is not a list")
        return data

    def _write_raw(self, records: list[dict[str, Any]]) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (self.history_key, json.dumps(records, ensure_ascii=False)),
            )

    def _load_valid(self) -> list[AnalysisResult]:
        try:
            raw_history = self._read_raw()
        except (ValueError, sqlite3.Error):
            logger.exception("Failed to read analysis history; treating it as empty")
            return []

        history: list[AnalysisResult] = []
        for item in raw_history:
            if not isinstance(item, dict):
                logger.warning("Skipping corrupt history entry: %r", item)
                continue
            try:
                record = normalize_record(item)
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping malformed history entry %r: %s", item.get("id"), e)
                continue
            if not is_complete(record):
                logger.warning("Skipping incomplete history entry: %r", item.get("id"))
                continue
            try:
                history.append(AnalysisResult.model_validate(record))
            except ValidationError as e:
                logger.warning(
                    "Skipping invalid history entry %r: %d errors", item.get("id"), e.error_count()
                )
        return history

    @staticmethod
    def _dump(records: list[AnalysisResult]) -> list[dict[str, Any]]:
        return [r.model_dump(mode="json") for r in records]

    # --- public contract ---

    def save(self, record: AnalysisResult) -> bool:
        """Prepend a record to the history."""
        with self._lock:
            try:
                history = self._load_valid()
                self._write_raw(self._dump([record, *history]))
            except sqlite3.Error:
                logger.exception("Failed to save analysis %s", record.id)
                return False
        logger.info("Saved analysis %s", record.id)
        return True

    def load_all(self) -> list[AnalysisResult]:
        """All valid records, most recent first."""
        return self._load_valid()

    def get_by_id(self, record_id: str) -> AnalysisResult | None:
        for record in self._load_valid():
            if record.id == record_id:
                return record
        return None

    def require(self, record_id: str) -> AnalysisResult:
        record = self.get_by_id(record_id)
        if record is None:
            raise NotFoundError(record_id)
        return record

    def _apply(
        self,
        record_id: str,
        change: Callable[[AnalysisResult], AnalysisResult],
    ) -> AnalysisResult | None:
        # Caller holds self._lock.
        history = self._load_valid()
        for index, record in enumerate(history):
            if record.id == record_id:
                break
        else:
            return None

        changed = change(record)
        history[index] = changed
        self._write_raw(self._dump(history))
        return changed

    def update(self, record_id: str, fields: dict[str, Any]) -> AnalysisResult | None:
        """Merge ``fields`` into a stored record. Returns None if the id is unknown.

        Only the confidence map, final score and update timestamp may change.
        The final score is always recomputed from the base score and the merged
        confidence map; a conflicting ``final_score`` raises ValueError.
        """
        fields = rename_legacy_keys(fields)
        frozen = set(fields) - MUTABLE_FIELDS
        if frozen:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(frozen))}")

        def merge(record: AnalysisResult) -> AnalysisResult:
            merged = AnalysisResult.model_validate({**record.model_dump(), **fields})
            final_score = recompute_final_score(merged.base_score, merged.skill_confidence_map)
            if "final_score" in fields and fields["final_score"] != final_score:
                raise ValueError(
                    f"final_score {fields['final_score']!r} does not match the confidence map "
                    f"(expected {final_score})"
                )
            return merged.model_copy(update={"final_score": final_score})

        with self._lock:
            try:
                return self._apply(record_id, merge)
            except sqlite3.Error:
                logger.exception("Failed to update analysis %s", record_id)
                return None

    def clear(self) -> bool:
        """Remove the whole history."""
        with self._lock:
            try:
                with self._connect() as conn:
                    conn.execute("DELETE FROM kv_store WHERE key = ?", (self.history_key,))
            except sqlite3.Error:
                logger.exception("Failed to clear analysis history")
                return False
        return True

    def set_skill_confidence(
        self,
        record_id: str,
        skill: str,
        level: Confidence | None = None,
        *,
        now: datetime | None = None,
    ) -> AnalysisResult:
        """Set (or toggle, when ``level`` is None) one skill's confidence.

        The read, toggle and write happen under one lock acquisition.
        Raises NotFoundError for an unknown id.
        """
        def rate(record: AnalysisResult) -> AnalysisResult:
            new_level = level or toggle_confidence(record.skill_confidence_map.get(skill))
            return record.with_confidence(
                {**record.skill_confidence_map, skill: new_level}, now=now
            )

        with self._lock:
            updated = self._apply(record_id, rate)
        if updated is None:
            raise NotFoundError(record_id)
        logger.debug(
            "Skill %r on %s set to %s (score %d)",
            skill, record_id, updated.skill_confidence_map[skill], updated.final_score,
        )
        return updated
