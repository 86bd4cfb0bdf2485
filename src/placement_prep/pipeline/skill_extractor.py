"""Skill Extractor: whole-word keyword matching against the taxonomy."""

from __future__ import annotations

import logging

from placement_prep.errors import InvalidInputError
from placement_prep.models.skills import FALLBACK_SKILLS, ExtractedSkills, SkillCategory
from placement_prep.pipeline.taxonomy import KEYWORD_PATTERNS

logger = logging.getLogger(__name__)


def extract_skills(text: str) -> ExtractedSkills:
    """Scan ``text`` for taxonomy keywords.

    Matching is case-insensitive and whole-word. Results keep taxonomy order
    within each category. When nothing matches, ``Other`` carries the generic
    fallback tags so the result is never empty.
    """
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Job description must be a string, got {type(text).__name__}"
        )

    lower_text = text.lower()
    found: dict[SkillCategory, list[str]] = {}
    for category, patterns in KEYWORD_PATTERNS.items():
        found[category] = [
            keyword for keyword, pattern in patterns if pattern.search(lower_text)
        ]

    if not any(found.values()):
        logger.debug("No taxonomy keywords matched; using fallback skills")
        found[SkillCategory.OTHER] = list(FALLBACK_SKILLS)

    return ExtractedSkills(by_category=found)
