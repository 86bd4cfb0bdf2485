"""Round Mapping: expected interview rounds for a company size."""

from __future__ import annotations

from placement_prep.models.analysis import CompanyIntel, RoundMappingEntry
from placement_prep.models.skills import ExtractedSkills

DEFAULT_TOP_SKILL = "Coding"


def top_skill(skills: ExtractedSkills) -> str:
    specific = skills.specific_skills()
    return specific[0] if specific else DEFAULT_TOP_SKILL


def _screening_round(enterprise: bool) -> RoundMappingEntry:
    if enterprise:
        return RoundMappingEntry(
            round_title="Online Assessment",
            round_type="Screening",
            focus_areas=["DSA", "Aptitude"],
            description="60-90 min coding test on HackerRank/CodeSignal",
            rationale="Filters candidates based on raw DSA / Aptitude skills.",
        )
    return RoundMappingEntry(
        round_title="Screening / Take-home",
        round_type="Screening",
        focus_areas=["Practical Coding", "Feature Building"],
        description="Resume screen followed by a practical coding task via email",
        rationale="Validates ability to build actual features, not just invert binary trees.",
    )


def _technical_round(enterprise: bool, skill: str) -> RoundMappingEntry:
    if enterprise:
        return RoundMappingEntry(
            round_title="Technical Round 1 (DSA)",
            round_type="Technical",
            focus_areas=["Trees", "Graphs", "Dynamic Programming", "Arrays"],
            description="Live coding: Trees, Graphs, DP, or Array manipulation",
            rationale="Tests algorithmic thinking and edge-case handling.",
        )
    return RoundMappingEntry(
        round_title=f"Machine Coding ({skill.upper()})",
        round_type="Technical",
        focus_areas=[skill, "Clean Code", "Coding Speed"],
        description=f"Build a small feature using {skill} in 1 hour",
        rationale="Tests coding speed, cleanliness, and framework knowledge.",
    )


def _design_round(enterprise: bool) -> RoundMappingEntry:
    if enterprise:
        return RoundMappingEntry(
            round_title="System Design / Low Level Design",
            round_type="Design",
            focus_areas=["Low Level Design", "Scalability"],
            description="Design a parking lot, rate limiter, or twitter feed",
            rationale="Tests ability to structure scalable systems (LLD for freshers).",
        )
    return RoundMappingEntry(
        round_title="Architecture & Discussion",
        round_type="Design",
        focus_areas=["Past Projects", "Ownership"],
        description="Discuss past projects and potential system improvements",
        rationale="Tests depth of understanding and ownership.",
    )


BEHAVIORAL_ROUND = RoundMappingEntry(
    round_title="Managerial / Culture Fit",
    round_type="Behavioral",
    focus_areas=["Culture Fit", "Growth Mindset"],
    description="Discussion with Engineering Manager",
    rationale="Ensures you share the company values and have a growth mindset.",
)


def map_rounds(skills: ExtractedSkills, intel: CompanyIntel) -> list[RoundMappingEntry]:
    """Screening, Technical, Design and Behavioral rounds, in that order."""
    enterprise = intel.is_enterprise
    return [
        _screening_round(enterprise),
        _technical_round(enterprise, top_skill(skills)),
        _design_round(enterprise),
        BEHAVIORAL_ROUND.model_copy(deep=True),
    ]
