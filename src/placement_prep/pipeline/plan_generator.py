"""Study plan and checklist generation from detected skills."""

from __future__ import annotations

from placement_prep.models.analysis import ChecklistEntry, StudyPlanEntry
from placement_prep.models.skills import ExtractedSkills, SkillCategory

DEFAULT_STACK = "General Technical Skills"
STACK_SIZE = 3


def stack_summary(skills: ExtractedSkills) -> str:
    """Up to three top detected skills, ignoring the generic fallback tags."""
    top = skills.specific_skills()[:STACK_SIZE]
    return ", ".join(top) or DEFAULT_STACK


def generate_plan(skills: ExtractedSkills) -> list[StudyPlanEntry]:
    """Seven-day plan in five phases."""
    stack = stack_summary(skills)
    core_task = (
        "Deep dive into OS & DBMS concepts"
        if skills.has(SkillCategory.CORE_CS)
        else "Review General aptitude and logic"
    )

    return [
        StudyPlanEntry(
            day="Day 1-2",
            focus="Basics + Core CS",
            tasks=[
                "Revise Language Fundamentals (OOP, Syntax)",
                core_task,
                "Solve 5 basic implementation problems",
            ],
        ),
        StudyPlanEntry(
            day="Day 3-4",
            focus="DSA + Coding Practice",
            tasks=[
                "Focus on Arrays, Strings, and Maps",
                "Practice 2-pointer and Sliding Window patterns",
                "Solve 3 Medium LeetCode problems daily",
            ],
        ),
        StudyPlanEntry(
            day="Day 5",
            focus="Project + Resume Alignment",
            tasks=[
                f"Review projects using {stack}",
                'Prepare "Challenges Faced" stories',
                "Optimize resume keywords for this JD",
            ],
        ),
        StudyPlanEntry(
            day="Day 6",
            focus="Mock Interview Questions",
            tasks=[
                "Behavioral questions (STAR method)",
                f"Technical deep dive into {stack}",
                "Mock interview with a peer or AI",
            ],
        ),
        StudyPlanEntry(
            day="Day 7",
            focus="Revision + Weak Areas",
            tasks=[
                "Review notes and tricky concepts",
                "Rest and mental preparation",
                "Company research (Values, Products)",
            ],
        ),
    ]


def generate_checklist(skills: ExtractedSkills) -> list[ChecklistEntry]:
    """Round-wise preparation checklist."""
    stack = stack_summary(skills)

    return [
        ChecklistEntry(
            round_title="Round 1: Aptitude / Basics",
            items=[
                "Quantitative Aptitude (Time & Work, Probability)",
                "Logical Reasoning (Puzzles, Series)",
                "Verbal Ability (Reading Comprehension)",
                "Basic Debugging / Output prediction",
                "Time Complexity analysis",
            ],
        ),
        ChecklistEntry(
            round_title="Round 2: DSA + Core CS",
            items=[
                "Data Structures (Arrays, Linked Lists, Trees)",
                "Algorithms (Sorting, Searching, Recursion)",
                "Object Oriented Programming concepts",
                "DBMS (SQL Queries, Normalization)",
                "Operating Systems (Processes, Threads, Memory Mgmt)",
            ],
        ),
        ChecklistEntry(
            round_title="Round 3: Tech Interview",
            items=[
                f"Deep discussion on {stack}",
                "Project Architecture and Design choices",
                "Rest API / System Design basics",
                "Live coding / pair programming",
                "Code optimization and clean code practices",
            ],
        ),
        ChecklistEntry(
            round_title="Round 4: Managerial / HR",
            items=[
                "Why this company? / Why this role?",
                "Strengths and Weaknesses",
                "Situation handling (Conflict resolution)",
                "Future goals (Short term / Long term)",
                "Salary expectations and negotiation",
            ],
        ),
    ]
