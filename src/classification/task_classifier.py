from __future__ import annotations

import re
from typing import Pattern, Sequence, Tuple

from smart_todo.models import DEFAULT_CATEGORY, Category


WORK_KEYWORDS = (
    "meeting", "meet", "office", "work", "job", "client", "boss",
    "colleague", "standup", "interview", "shift", "presentation",
)
SCHOOL_KEYWORDS = (
    "class", "exam", "assignment", "school", "homework", "lecture", "quiz",
    "study", "tutorial", "lab", "midterm", "course", "professor", "thesis",
    "essay",
)
PROJECT_KEYWORDS = (
    "project", "hackathon", "code", "coding", "program", "programming",
    "deploy", "repo", "github", "commit", "committed", "committing", "bug",
    "sprint", "prototype", "app",
)


def _keyword_pattern(keywords: Sequence[str]) -> Pattern[str]:
    alternatives = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"\b(?:{alternatives})(?:s|es|d|ed|ing)?\b", re.IGNORECASE)


class TaskClassifier:
    """Keyword classifier with a fixed precedence: work, school, project, chores.

    Checks run in order and the first rule with a hit wins, so a sentence that
    mentions both a meeting and a project is always "work".
    """

    rules: Tuple[Tuple[Category, Pattern[str]], ...] = (
        ("work", _keyword_pattern(WORK_KEYWORDS)),
        ("school", _keyword_pattern(SCHOOL_KEYWORDS)),
        ("project", _keyword_pattern(PROJECT_KEYWORDS)),
    )

    def classify(self, text: str) -> Category:
        for category, pattern in self.rules:
            if pattern.search(text or ""):
                return category
        return DEFAULT_CATEGORY
