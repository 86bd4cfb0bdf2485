"""Likely interview questions selected by skill triggers."""

from __future__ import annotations

from collections.abc import Callable

from placement_prep.models.skills import ExtractedSkills, SkillCategory

MAX_QUESTIONS = 10


def _any_contains(category: SkillCategory, needle: str) -> Callable[[ExtractedSkills], bool]:
    def check(skills: ExtractedSkills) -> bool:
        return any(needle in skill for skill in skills[category])
    return check


# Evaluated in order. Substring tests are intentional: "javascript" also
# fires the Java pair and "mysql" the SQL pair.
QUESTION_TRIGGERS: list[tuple[Callable[[ExtractedSkills], bool], tuple[str, str]]] = [
    (
        _any_contains(SkillCategory.LANGUAGES, "java"),
        (
            "Explain the difference between JDK, JRE, and JVM.",
            "How does Garbage Collection work in Java?",
        ),
    ),
    (
        _any_contains(SkillCategory.LANGUAGES, "python"),
        (
            "Explain the difference between list and tuple.",
            "How is memory managed in Python?",
        ),
    ),
    (
        _any_contains(SkillCategory.LANGUAGES, "script"),
        (
            "Explain Event Loop and Closures.",
            "Difference between == and ===?",
        ),
    ),
    (
        _any_contains(SkillCategory.WEB, "react"),
        (
            "Explain React Lifecycle methods vs Hooks.",
            "How does Virtual DOM work?",
        ),
    ),
    (
        _any_contains(SkillCategory.DATA, "sql"),
        (
            "Explain Indexing and when it helps.",
            "Difference between DELETE and TRUNCATE?",
        ),
    ),
    (
        lambda skills: skills.has(SkillCategory.CORE_CS),
        (
            "Explain the difference between Process and Thread.",
            "What is Deadlock and how to prevent it?",
        ),
    ),
]

GENERIC_QUESTIONS: tuple[str, ...] = (
    "How would you optimize search in sorted data?",
    "Explain a challenging bug you fixed recently.",
    "Design a URL shortener system (High level).",
    "Check for balanced parentheses in a string.",
    "Explain the concept of Polymorphism with real-world example.",
    "Find the Kth largest element in an array.",
)


def generate_questions(skills: ExtractedSkills) -> list[str]:
    """Up to ten unique questions: triggered pairs first, then generic ones.

    The cap is applied after merging, so a JD that fires five or more
    triggers loses its lowest-priority specific questions as well as every
    generic one.
    """
    questions: list[str] = []
    for trigger, pair in QUESTION_TRIGGERS:
        if trigger(skills):
            questions.extend(pair)
    questions.extend(GENERIC_QUESTIONS)
    return list(dict.fromkeys(questions))[:MAX_QUESTIONS]
