"""Confidence toggles: per-skill know/practice tags adjusting the final score."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from placement_prep.models.analysis import KNOW, PRACTICE, recompute_final_score

__all__ = ["recompute_final_score", "skill_status", "toggle_confidence", "weak_skills"]


def toggle_confidence(current: str | None) -> str:
    """``know`` flips to ``practice``; unset or ``practice`` becomes ``know``."""
    return PRACTICE if current == KNOW else KNOW


def skill_status(confidence_map: Mapping[str, str], skill: str) -> str:
    """Skills the user has not rated are treated as needing practice."""
    return confidence_map.get(skill, PRACTICE)


def weak_skills(
    skills: Iterable[str],
    confidence_map: Mapping[str, str],
    limit: int = 3,
) -> list[str]:
    """First ``limit`` skills still marked (or defaulted) as ``practice``."""
    weak = [s for s in skills if skill_status(confidence_map, s) == PRACTICE]
    return weak[:limit]
