"""Data models for the placement readiness engine."""

from placement_prep.models.analysis import (
    AnalysisResult,
    ChecklistEntry,
    CompanyIntel,
    Confidence,
    RoundMappingEntry,
    StudyPlanEntry,
)
from placement_prep.models.skills import (
    CATEGORY_LABELS,
    FALLBACK_SKILLS,
    ExtractedSkills,
    SkillCategory,
)

__all__ = [
    "AnalysisResult",
    "CATEGORY_LABELS",
    "ChecklistEntry",
    "CompanyIntel",
    "Confidence",
    "ExtractedSkills",
    "FALLBACK_SKILLS",
    "RoundMappingEntry",
    "SkillCategory",
    "StudyPlanEntry",
]
