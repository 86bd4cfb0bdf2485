"""Tests for the SQLite-backed history store."""

import json
import sqlite3
import threading
import time
from datetime import datetime

import pytest

from placement_prep.errors import NotFoundError
from placement_prep.models.skills import SkillCategory
from placement_prep.pipeline.orchestrator import analyze
from placement_prep.store.history_store import HistoryStore


def _write_raw(store: HistoryStore, value: str) -> None:
    with sqlite3.connect(str(store.db_path)) as conn:
        conn.execute(
            "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
            (store.history_key, value),
        )


def _legacy_record() -> dict:
    """A record in the camelCase shape written by the browser version."""
    return {
        "id": "1700000000000",
        "createdAt": "2023-11-14T22:13:20.000Z",
        "company": "Google",
        "role": "SDE",
        "jdText": "React and SQL",
        "extractedSkills": {"Web Development": ["react"], "Data & Databases": ["sql"]},
        "flatSkills": ["react", "sql"],
        "readinessScore": 65,
        "plan7Days": [{"day": "Day 1-2", "focus": "Basics", "items": ["a", "b"]}],
        "checklist": {"Round 1: Aptitude / Basics": ["x", "y"]},
        "questions": ["q1", "q2", "q1"],
        "companyIntel": {"size": "Enterprise", "industry": "Technology", "focus": "Scale"},
        "roundMapping": [
            {"name": "Online Assessment", "type": "Screening", "desc": "test", "purpose": "filter"}
        ],
        "skillConfidence": {"react": "know"},
    }


class TestHistoryStore:
    def test_save_and_load(self, store, sample_result):
        assert store.save(sample_result) is True
        records = store.load_all()
        assert len(records) == 1
        assert records[0] == sample_result

    def test_load_empty(self, store):
        assert store.load_all() == []

    def test_most_recent_first(self, store):
        first = analyze("python", now=datetime(2024, 1, 1))
        second = analyze("java", now=datetime(2024, 1, 2))
        store.save(first)
        store.save(second)
        assert [r.id for r in store.load_all()] == [second.id, first.id]

    def test_persisted_as_json_under_single_key(self, store, sample_result):
        store.save(sample_result)
        with sqlite3.connect(str(store.db_path)) as conn:
            rows = conn.execute("SELECT key, value FROM kv_store").fetchall()
        assert len(rows) == 1
        key, value = rows[0]
        assert key == "placement_readiness_history"
        data = json.loads(value)
        assert data[0]["id"] == sample_result.id
        assert data[0]["extracted_skills"]["by_category"]["Web"] == ["react", "node.js", "express", "rest"]

    def test_get_by_id(self, store, sample_result):
        store.save(sample_result)
        assert store.get_by_id(sample_result.id) == sample_result
        assert store.get_by_id("missing") is None

    def test_require_raises_not_found(self, store):
        with pytest.raises(NotFoundError, match="missing"):
            store.require("missing")

    def test_clear(self, store, sample_result):
        store.save(sample_result)
        assert store.clear() is True
        assert store.load_all() == []

    def test_separate_keys_are_isolated(self, tmp_path, sample_result):
        a = HistoryStore(db_path=tmp_path / "h.db", history_key="a")
        b = HistoryStore(db_path=tmp_path / "h.db", history_key="b")
        a.save(sample_result)
        assert b.load_all() == []


class TestUpdate:
    def test_final_score_follows_confidence_map(self, store, sample_result):
        store.save(sample_result)
        updated = store.update(sample_result.id, {"skill_confidence_map": {"react": "know"}})
        assert updated.final_score == sample_result.base_score + 2
        stored = store.get_by_id(sample_result.id)
        assert stored.skill_confidence_map == {"react": "know"}
        assert stored.final_score == sample_result.base_score + 2

    def test_matching_final_score_accepted(self, store, sample_result):
        store.save(sample_result)
        expected = sample_result.base_score - 2
        updated = store.update(
            sample_result.id,
            {"skill_confidence_map": {"sql": "practice"}, "final_score": expected},
        )
        assert updated.final_score == expected

    def test_conflicting_final_score_rejected(self, store, sample_result):
        store.save(sample_result)
        with pytest.raises(ValueError, match="final_score"):
            store.update(sample_result.id, {"final_score": 90, "skill_confidence_map": {"react": "know"}})
        assert store.get_by_id(sample_result.id).final_score == sample_result.final_score

    def test_update_missing_returns_none(self, store, sample_result):
        store.save(sample_result)
        assert store.update("missing", {"skill_confidence_map": {}}) is None

    def test_write_once_fields_rejected(self, store, sample_result):
        store.save(sample_result)
        with pytest.raises(ValueError, match="base_score"):
            store.update(sample_result.id, {"base_score": 99})

    def test_camel_case_update_keys(self, store, sample_result):
        store.save(sample_result)
        updated = store.update(sample_result.id, {"skillConfidence": {"react": "practice"}})
        assert updated.skill_confidence_map == {"react": "practice"}
        assert updated.final_score == sample_result.base_score - 2

    def test_updated_at_merged(self, store, sample_result):
        store.save(sample_result)
        later = datetime(2024, 6, 1, 8, 0)
        updated = store.update(sample_result.id, {"updated_at": later})
        assert updated.updated_at == later
        assert updated.final_score == sample_result.final_score


class TestSkillConfidence:
    def test_toggle_sequence(self, store, sample_result):
        store.save(sample_result)
        base = sample_result.base_score
        for _ in range(3):
            record = store.set_skill_confidence(sample_result.id, "react")
        # unset -> know -> practice -> know
        assert record.skill_confidence_map == {"react": "know"}
        assert record.final_score == base + 2
        assert record.base_score == base

    def test_explicit_level(self, store, sample_result):
        store.save(sample_result)
        record = store.set_skill_confidence(sample_result.id, "react", "practice")
        assert record.final_score == sample_result.base_score - 2

    def test_updated_at_stamped(self, store, sample_result):
        store.save(sample_result)
        later = datetime(2024, 5, 1, 12, 0)
        record = store.set_skill_confidence(sample_result.id, "react", now=later)
        assert record.updated_at == later
        assert record.created_at == sample_result.created_at

    def test_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.set_skill_confidence("missing", "react")

    def test_concurrent_toggles_keep_both_skills(self, store, sample_result, monkeypatch):
        store.save(sample_result)
        load_valid = store._load_valid

        def slow_load_valid():
            history = load_valid()
            time.sleep(0.1)
            return history

        monkeypatch.setattr(store, "_load_valid", slow_load_valid)
        threads = [
            threading.Thread(target=store.set_skill_confidence, args=(sample_result.id, skill, "know"))
            for skill in ("react", "sql")
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        record = store.get_by_id(sample_result.id)
        assert record.skill_confidence_map == {"react": "know", "sql": "know"}
        assert record.final_score == sample_result.base_score + 4


class TestCorruptAndLegacyData:
    def test_unparseable_blob_degrades_to_empty(self, store):
        _write_raw(store, "{not json")
        assert store.load_all() == []

    def test_non_list_blob_degrades_to_empty(self, store):
        _write_raw(store, json.dumps({"id": "x"}))
        assert store.load_all() == []

    def test_incomplete_entries_skipped(self, store, sample_result):
        good = sample_result.model_dump(mode="json")
        _write_raw(store, json.dumps([
            {"id": "no-text", "created_at": "2024-01-01T00:00:00"},
            {"created_at": "2024-01-01T00:00:00", "jd_text": "python"},
            "garbage",
            good,
        ]))
        records = store.load_all()
        assert [r.id for r in records] == [sample_result.id]

    def test_save_after_corruption_recovers(self, store, sample_result):
        _write_raw(store, "{not json")
        assert store.save(sample_result) is True
        assert len(store.load_all()) == 1

    def test_non_numeric_score_entry_skipped(self, store, sample_result):
        broken = {**_legacy_record(), "id": "broken", "readinessScore": "65"}
        _write_raw(store, json.dumps([broken, sample_result.model_dump(mode="json")]))
        assert [r.id for r in store.load_all()] == [sample_result.id]

    def test_non_string_questions_dropped(self, store):
        legacy = {**_legacy_record(), "questions": [{"q": 1}, ["nested"], "q1", "q1"]}
        _write_raw(store, json.dumps([legacy]))
        [record] = store.load_all()
        assert record.questions == ["q1"]

    def test_skills_given_as_list_ignored(self, store):
        legacy = {**_legacy_record(), "extractedSkills": {"by_category": []}}
        _write_raw(store, json.dumps([legacy]))
        [record] = store.load_all()
        assert record.extracted_skills.flat == []
        assert record.flat_skills == ["react", "sql"]

    def test_save_on_top_of_malformed_entries(self, store, sample_result):
        broken = {**_legacy_record(), "id": "broken", "readinessScore": "65"}
        _write_raw(store, json.dumps([broken, {**_legacy_record(), "questions": [["x"]]}]))
        assert store.save(sample_result) is True
        assert [r.id for r in store.load_all()] == [sample_result.id, "1700000000000"]

    def test_legacy_record_normalized(self, store):
        _write_raw(store, json.dumps([_legacy_record()]))
        [record] = store.load_all()
        assert record.jd_text == "React and SQL"
        assert record.extracted_skills[SkillCategory.WEB] == ["react"]
        assert record.extracted_skills[SkillCategory.DATA] == ["sql"]
        assert record.base_score == 65
        assert record.final_score == 67
        assert record.updated_at == record.created_at
        assert record.plan[0].tasks == ["a", "b"]
        assert record.checklist[0].round_title == "Round 1: Aptitude / Basics"
        assert record.questions == ["q1", "q2"]
        assert record.round_mapping[0].rationale == "filter"

    def test_legacy_record_without_scores(self, store):
        legacy = _legacy_record()
        del legacy["readinessScore"]
        del legacy["companyIntel"]
        legacy["skillConfidence"] = {}
        _write_raw(store, json.dumps([legacy]))
        [record] = store.load_all()
        assert record.base_score == 35
        assert record.final_score == 35
        assert record.company_intel.size == "Enterprise"
