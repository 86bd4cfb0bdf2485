"""Skill taxonomy: canonical keywords per category, with precompiled matchers."""

from __future__ import annotations

import re
from types import MappingProxyType

from placement_prep.models.skills import SkillCategory

SKILL_TAXONOMY: MappingProxyType[SkillCategory, tuple[str, ...]] = MappingProxyType({
    SkillCategory.CORE_CS: (
        "dsa", "oop", "dbms", "os", "networks", "operating systems",
        "computer networks", "data structures", "algorithms",
    ),
    SkillCategory.LANGUAGES: (
        "java", "python", "javascript", "typescript", "c", "c++", "c#",
        "go", "ruby", "swift", "kotlin", "php",
    ),
    SkillCategory.WEB: (
        "react", "next.js", "node.js", "express", "rest", "graphql", "html",
        "css", "tailwind", "redux", "vue", "angular",
    ),
    SkillCategory.DATA: (
        "sql", "mongodb", "postgresql", "mysql", "redis", "firebase",
        "nosql", "oracle",
    ),
    SkillCategory.CLOUD: (
        "aws", "azure", "gcp", "docker", "kubernetes", "ci/cd", "linux",
        "devops", "jenkins", "git",
    ),
    SkillCategory.TESTING: (
        "selenium", "cypress", "playwright", "junit", "pytest", "jest", "mocha",
    ),
    SkillCategory.OTHER: (),
})


def compile_keyword(keyword: str) -> re.Pattern[str]:
    """Whole-word matcher for a keyword that may contain regex metacharacters.

    Lookarounds are used instead of ``\\b`` so that keywords ending in a
    non-word character (``c++``, ``c#``) still match before a space.
    """
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)")


KEYWORD_PATTERNS: MappingProxyType[SkillCategory, tuple[tuple[str, re.Pattern[str]], ...]] = MappingProxyType({
    category: tuple((keyword, compile_keyword(keyword)) for keyword in keywords)
    for category, keywords in SKILL_TAXONOMY.items()
})
