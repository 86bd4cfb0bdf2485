"""Pydantic models for the analysis report."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from placement_prep.models.skills import ExtractedSkills

Confidence = Literal["know", "practice"]
CompanySize = Literal["Startup", "Enterprise"]

CONFIDENCE_DELTA = 2
KNOW = "know"
PRACTICE = "practice"


def recompute_final_score(base_score: int, confidence_map: Mapping[str, str]) -> int:
    """Final score from the immutable base score and the current confidence map.

    Only the latest state per skill counts, so the result does not depend on
    how many times or in which order skills were toggled. Unknown values are
    ignored. Clamped to [0, 100].
    """
    values = list(confidence_map.values())
    score = (
        base_score
        + CONFIDENCE_DELTA * values.count(KNOW)
        - CONFIDENCE_DELTA * values.count(PRACTICE)
    )
    return max(0, min(100, score))


class StudyPlanEntry(BaseModel):
    day: str
    focus: str
    tasks: list[str]


class ChecklistEntry(BaseModel):
    round_title: str
    items: list[str]


class CompanyIntel(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: CompanySize
    industry: str
    focus: str

    @property
    def is_enterprise(self) -> bool:
        return self.size == "Enterprise"


class RoundMappingEntry(BaseModel):
    round_title: str
    round_type: str  # Screening, Technical, Design, Behavioral
    focus_areas: list[str]
    description: str
    rationale: str


class AnalysisResult(BaseModel):
    """One analysed job description.

    Only ``skill_confidence_map``, ``final_score`` and ``updated_at`` change
    after creation; use :meth:`with_confidence` to derive an updated copy.
    """

    id: str
    created_at: datetime
    updated_at: datetime
    company: str = ""
    role: str = ""
    jd_text: str
    extracted_skills: ExtractedSkills
    flat_skills: list[str]
    base_score: int = Field(ge=0, le=100)
    final_score: int = Field(ge=0, le=100)
    skill_confidence_map: dict[str, Confidence] = Field(default_factory=dict)
    plan: list[StudyPlanEntry]
    checklist: list[ChecklistEntry]
    questions: list[str] = Field(max_length=10)
    company_intel: CompanyIntel
    round_mapping: list[RoundMappingEntry]

    def with_confidence(
        self,
        confidence_map: dict[str, Confidence],
        *,
        now: datetime | None = None,
    ) -> AnalysisResult:
        """Return a copy carrying a new confidence map and recomputed final score."""
        return self.model_copy(
            update={
                "skill_confidence_map": dict(confidence_map),
                "final_score": recompute_final_score(self.base_score, confidence_map),
                "updated_at": now or datetime.now(),
            }
        )
