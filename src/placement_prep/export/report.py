"""Plain-text readiness report rendered from an AnalysisResult."""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from placement_prep.models.analysis import AnalysisResult
from placement_prep.pipeline.confidence import skill_status, weak_skills

REPORT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_report(result: AnalysisResult, *, top_weak_skills: int = 3) -> str:
    """Render the text report shown by ``placement-prep export``."""
    env = Environment(
        loader=FileSystemLoader(str(REPORT_TEMPLATES_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    template = env.get_template("report.txt.j2")
    statuses = {
        skill: skill_status(result.skill_confidence_map, skill)
        for skill in result.flat_skills
    }
    weak = weak_skills(result.flat_skills, result.skill_confidence_map, top_weak_skills)
    return template.render(result=result, statuses=statuses, weak=weak)


def default_report_name(result: AnalysisResult) -> str:
    company = re.sub(r"[^\w.-]+", "-", result.company.strip()).strip("-")
    return f"readiness-report-{company or 'job'}.txt"


def save_report(text: str, output_path: str | Path) -> Path:
    """Save report text to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
