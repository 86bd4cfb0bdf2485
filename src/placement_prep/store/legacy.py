"""Normalization of persisted records, including the older camelCase schema."""

from __future__ import annotations

from typing import Any

from placement_prep.models.skills import SkillCategory
from placement_prep.pipeline.company_intel import classify_company
from placement_prep.models.analysis import recompute_final_score

REQUIRED_FIELDS = ("id", "created_at", "jd_text")
DEFAULT_BASE_SCORE = 35
MAX_QUESTIONS = 10

LEGACY_KEYS: dict[str, str] = {
    "jdText": "jd_text",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "extractedSkills": "extracted_skills",
    "flatSkills": "flat_skills",
    "baseScore": "base_score",
    "finalScore": "final_score",
    "skillConfidence": "skill_confidence_map",
    "skillConfidenceMap": "skill_confidence_map",
    "plan7Days": "plan",
    "companyIntel": "company_intel",
    "roundMapping": "round_mapping",
}


def rename_legacy_keys(raw: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase keys to field names. Existing snake_case keys win."""
    renamed: dict[str, Any] = {}
    for key, value in raw.items():
        target = LEGACY_KEYS.get(key, key)
        if target in renamed and target != key:
            continue
        renamed[target] = value
    return renamed


def is_complete(record: dict[str, Any]) -> bool:
    """True when the fields needed to identify and re-render a record exist."""
    return all(record.get(name) for name in REQUIRED_FIELDS)


def _normalize_skills(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        return {"by_category": {}}
    mapping = value.get("by_category", value)
    if not isinstance(mapping, dict):
        return {"by_category": {}}
    by_category: dict[str, list[str]] = {}
    for key, skills in mapping.items():
        category = SkillCategory.from_label(key)
        if category is not None and isinstance(skills, list):
            by_category[category.value] = [s for s in skills if isinstance(s, str)]
    return {"by_category": by_category}


def _normalize_plan(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    plan = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        plan.append({
            "day": entry.get("day", ""),
            "focus": entry.get("focus", ""),
            "tasks": entry.get("tasks", entry.get("items", [])),
        })
    return plan


def _normalize_checklist(value: Any) -> list[dict[str, Any]]:
    # Older records stored the checklist as {round title: items}.
    if isinstance(value, dict):
        return [{"round_title": title, "items": items} for title, items in value.items()]
    if not isinstance(value, list):
        return []
    checklist = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        checklist.append({
            "round_title": entry.get("round_title", entry.get("roundTitle", entry.get("title", ""))),
            "items": entry.get("items", []),
        })
    return checklist


def _normalize_rounds(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    rounds = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        rounds.append({
            "round_title": entry.get("round_title", entry.get("roundTitle", entry.get("name", ""))),
            "round_type": entry.get("round_type", entry.get("type", "")),
            "focus_areas": entry.get("focus_areas", entry.get("focusAreas", [])),
            "description": entry.get("description", entry.get("desc", "")),
            "rationale": entry.get("rationale", entry.get("purpose", "")),
        })
    return rounds


def normalize_record(raw: dict[str, Any]) -> dict[str, Any]:
    """Bring a stored record into the current AnalysisResult shape.

    Missing fields take their defaults; ``base_score`` is back-filled from the
    legacy ``readinessScore`` and ``final_score`` is recomputed when absent.
    Raises ValueError when the stored base score is not a number.
    """
    record = rename_legacy_keys(raw)

    record.setdefault("updated_at", record.get("created_at"))
    for name in ("company", "role"):
        if not isinstance(record.get(name), str):
            record[name] = ""

    record["extracted_skills"] = _normalize_skills(record.get("extracted_skills"))
    if not isinstance(record.get("flat_skills"), list):
        record["flat_skills"] = [
            skill
            for skills in record["extracted_skills"]["by_category"].values()
            for skill in skills
        ]

    base = record.get("base_score") or record.pop("readinessScore", None) or DEFAULT_BASE_SCORE
    record.pop("readinessScore", None)
    if not isinstance(base, (int, float)) or isinstance(base, bool):
        raise ValueError(f"Stored base score is not a number: {base!r}")
    record["base_score"] = base

    confidence = record.get("skill_confidence_map")
    record["skill_confidence_map"] = confidence if isinstance(confidence, dict) else {}
    if record.get("final_score") is None:
        record["final_score"] = recompute_final_score(base, record["skill_confidence_map"])

    record["plan"] = _normalize_plan(record.get("plan"))
    record["checklist"] = _normalize_checklist(record.get("checklist"))
    record["round_mapping"] = _normalize_rounds(record.get("round_mapping"))
    if not isinstance(record.get("company_intel"), dict):
        record["company_intel"] = classify_company(record["company"]).model_dump()

    questions = record.get("questions")
    if isinstance(questions, list):
        unique = dict.fromkeys(q for q in questions if isinstance(q, str))
        record["questions"] = list(unique)[:MAX_QUESTIONS]
    else:
        record["questions"] = []

    return record
