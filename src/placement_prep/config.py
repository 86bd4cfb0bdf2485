"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "PLACEMENT_PREP_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StoreConfig:
    db_path: str = "~/.placement-prep/history.db"
    history_key: str = "placement_readiness_history"

    def __post_init__(self) -> None:
        if not self.history_key.strip():
            raise ValueError("history_key must not be empty")

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AnalysisConfig:
    short_jd_threshold: int = 200

    def __post_init__(self) -> None:
        if not 0 <= self.short_jd_threshold <= 10_000:
            raise ValueError(
                f"short_jd_threshold must be between 0 and 10000, got {self.short_jd_threshold}"
            )


@dataclass(frozen=True)
class ReportConfig:
    top_weak_skills: int = 3

    def __post_init__(self) -> None:
        if not 1 <= self.top_weak_skills <= 20:
            raise ValueError(
                f"top_weak_skills must be between 1 and 20, got {self.top_weak_skills}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}, got {self.level}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.upper())


@dataclass(frozen=True)
class AppConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = os.environ[CONFIG_ENV_VAR]

    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        store=StoreConfig(**raw.get("store", {})),
        analysis=AnalysisConfig(**raw.get("analysis", {})),
        report=ReportConfig(**raw.get("report", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
    )
