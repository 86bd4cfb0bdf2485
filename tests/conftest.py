"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest

from placement_prep.models.analysis import AnalysisResult
from placement_prep.pipeline.orchestrator import analyze
from placement_prep.store.history_store import HistoryStore

FIXED_NOW = datetime(2024, 3, 1, 9, 30, 0)


@pytest.fixture
def sample_jd_text() -> str:
    return """Software Engineer - Frontend Platform

Responsibilities:
- Build and maintain customer-facing features in React and TypeScript
- Design REST APIs with Node.js and Express
- Own data access on PostgreSQL and Redis

Requirements:
- Strong grasp of data structures and algorithms
- Experience with Docker, Kubernetes and CI/CD pipelines on AWS
- Unit testing with Jest and end-to-end tests with Cypress
"""


@pytest.fixture
def long_react_sql_jd() -> str:
    """A 900 character JD mentioning only React and SQL."""
    base = "We are hiring an engineer comfortable with React and SQL. "
    filler = "You will collaborate with product owners and ship features weekly. "
    text = base + filler * 20
    return text[:900]


@pytest.fixture
def sample_result(sample_jd_text) -> AnalysisResult:
    return analyze(sample_jd_text, "Acme Startup", "Frontend Engineer", now=FIXED_NOW)


@pytest.fixture
def store(tmp_path) -> HistoryStore:
    return HistoryStore(db_path=tmp_path / "history.db")
