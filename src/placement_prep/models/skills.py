"""Skill categories and the extractor's output model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

FALLBACK_SKILLS: tuple[str, ...] = (
    "communication",
    "problem solving",
    "basic coding",
    "projects",
)


class SkillCategory(str, Enum):
    """Closed set of skill categories. Declaration order is display order."""

    CORE_CS = "CoreCS"
    LANGUAGES = "Languages"
    WEB = "Web"
    DATA = "Data"
    CLOUD = "Cloud"
    TESTING = "Testing"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @classmethod
    def from_label(cls, value: str) -> SkillCategory | None:
        """Resolve either a category key or its display label."""
        for category in cls:
            if value in (category.value, category.name, category.label):
                return category
        return None


CATEGORY_LABELS: dict[SkillCategory, str] = {
    SkillCategory.CORE_CS: "Core CS",
    SkillCategory.LANGUAGES: "Languages",
    SkillCategory.WEB: "Web Development",
    SkillCategory.DATA: "Data & Databases",
    SkillCategory.CLOUD: "Cloud & DevOps",
    SkillCategory.TESTING: "Testing",
    SkillCategory.OTHER: "Other",
}


class ExtractedSkills(BaseModel):
    """Matched keywords for every category, in taxonomy order."""

    by_category: dict[SkillCategory, list[str]] = Field(default_factory=dict, validate_default=True)

    @field_validator("by_category")
    @classmethod
    def _fill_categories(cls, value: dict[SkillCategory, list[str]]) -> dict[SkillCategory, list[str]]:
        # Every category is present, ordered, with duplicates dropped.
        filled: dict[SkillCategory, list[str]] = {}
        for category in SkillCategory:
            filled[category] = list(dict.fromkeys(value.get(category, [])))
        return filled

    def __getitem__(self, category: SkillCategory) -> list[str]:
        return self.by_category[category]

    @property
    def flat(self) -> list[str]:
        """All matched keywords concatenated in category order."""
        return [skill for skills in self.by_category.values() for skill in skills]

    @property
    def is_fallback(self) -> bool:
        return not any(
            skills for category, skills in self.by_category.items()
            if category is not SkillCategory.OTHER
        ) and tuple(self.by_category[SkillCategory.OTHER]) == FALLBACK_SKILLS

    def has(self, category: SkillCategory) -> bool:
        return bool(self.by_category[category])

    def non_empty_categories(self, *, include_other: bool = True) -> list[SkillCategory]:
        return [
            category for category, skills in self.by_category.items()
            if skills and (include_other or category is not SkillCategory.OTHER)
        ]

    def specific_skills(self) -> list[str]:
        """Flattened skills with the generic fallback tags removed."""
        return [skill for skill in self.flat if skill not in FALLBACK_SKILLS]
