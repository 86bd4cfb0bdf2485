"""Analysis orchestrator - composes extraction, scoring and content generation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from placement_prep.errors import EmptyInputError, InvalidInputError
from placement_prep.models.analysis import AnalysisResult
from placement_prep.pipeline.company_intel import classify_company
from placement_prep.pipeline.plan_generator import generate_checklist, generate_plan
from placement_prep.pipeline.question_generator import generate_questions
from placement_prep.pipeline.readiness_scorer import calculate_score
from placement_prep.pipeline.round_mapper import map_rounds
from placement_prep.pipeline.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

DEFAULT_SHORT_JD_THRESHOLD = 200
SHORT_JD_WARNING = "This JD is too short to analyze deeply. Paste full JD for better output."


def _require_str(value: object, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")
    return value


def make_record_id(now: datetime) -> str:
    """Millisecond timestamp, so ids sort by creation time."""
    return str(int(now.timestamp() * 1000))


class AnalysisOrchestrator:
    """Single entry point of the engine: JD text in, AnalysisResult out."""

    def __init__(self, *, short_jd_threshold: int = DEFAULT_SHORT_JD_THRESHOLD):
        self.short_jd_threshold = short_jd_threshold

    def jd_warnings(self, jd_text: str) -> list[str]:
        """Advisory messages about the input; never fatal."""
        warnings = []
        if len(jd_text.strip()) < self.short_jd_threshold:
            warnings.append(SHORT_JD_WARNING)
        return warnings

    def analyze(
        self,
        jd_text: str,
        company: str = "",
        role: str = "",
        *,
        now: datetime | None = None,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> AnalysisResult:
        """Analyze a job description.

        Args:
            jd_text: Raw job description text. Blank text is rejected.
            company: Optional company name.
            role: Optional role title.
            now: Clock value for the id and timestamps (defaults to now).
            on_phase: Optional callback(phase_name, detail) for progress.
        """
        if not isinstance(jd_text, str):
            raise InvalidInputError(
                f"Job description must be a string, got {type(jd_text).__name__}"
            )
        if not jd_text.strip():
            raise EmptyInputError("Job description is empty")
        company = _require_str(company, "company")
        role = _require_str(role, "role")

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        for warning in self.jd_warnings(jd_text):
            logger.warning(warning)

        _notify("extract", f"{len(jd_text)} characters")
        skills = extract_skills(jd_text)
        flat = skills.flat
        _notify("extract_done", ", ".join(flat))

        score = calculate_score(skills, company, role, jd_text)
        _notify("score", str(score))

        plan = generate_plan(skills)
        checklist = generate_checklist(skills)
        questions = generate_questions(skills)
        _notify("content", f"{len(questions)} questions")

        intel = classify_company(company)
        rounds = map_rounds(skills, intel)
        _notify("intel", intel.size)

        now = now or datetime.now()
        result = AnalysisResult(
            id=make_record_id(now),
            created_at=now,
            updated_at=now,
            company=company,
            role=role,
            jd_text=jd_text,
            extracted_skills=skills,
            flat_skills=flat,
            base_score=score,
            final_score=score,
            skill_confidence_map={},
            plan=plan,
            checklist=checklist,
            questions=questions,
            company_intel=intel,
            round_mapping=rounds,
        )
        logger.info(
            "Analyzed JD for %s / %s: score=%d, skills=%d, size=%s",
            company or "-", role or "-", score, len(flat), intel.size,
        )
        _notify("done", result.id)
        return result


def analyze(
    jd_text: str,
    company: str = "",
    role: str = "",
    *,
    now: datetime | None = None,
) -> AnalysisResult:
    """Analyze with default settings."""
    return AnalysisOrchestrator().analyze(jd_text, company, role, now=now)
