"""Readiness Scorer: weighted score from detected skills and JD metadata."""

from __future__ import annotations

from dataclasses import dataclass

from placement_prep.models.skills import ExtractedSkills

BASE_SCORE = 35
POINTS_PER_CATEGORY = 5
MAX_CATEGORY_POINTS = 30
COMPANY_POINTS = 10
ROLE_POINTS = 10
LONG_JD_POINTS = 15
LONG_JD_THRESHOLD = 800  # characters, raw text
MAX_SCORE = 100


@dataclass(frozen=True)
class ScoreBreakdown:
    """Individual contributions that make up a readiness score."""
    base: int
    categories: int
    company: int
    role: int
    length: int

    @property
    def total(self) -> int:
        return min(
            self.base + self.categories + self.company + self.role + self.length,
            MAX_SCORE,
        )


def score_breakdown(
    skills: ExtractedSkills,
    company: str,
    role: str,
    text: str,
) -> ScoreBreakdown:
    category_count = len(skills.non_empty_categories(include_other=False))
    return ScoreBreakdown(
        base=BASE_SCORE,
        categories=min(category_count * POINTS_PER_CATEGORY, MAX_CATEGORY_POINTS),
        company=COMPANY_POINTS if company and company.strip() else 0,
        role=ROLE_POINTS if role and role.strip() else 0,
        length=LONG_JD_POINTS if len(text) > LONG_JD_THRESHOLD else 0,
    )


def calculate_score(
    skills: ExtractedSkills,
    company: str,
    role: str,
    text: str,
) -> int:
    """Readiness score in [35, 100].

    35 base, +5 per non-empty category other than ``Other`` (max +30),
    +10 each for a company and a role, +15 for a JD longer than 800 chars.
    """
    return score_breakdown(skills, company, role, text).total
