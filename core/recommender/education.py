#!/usr/bin/env python3
"""
Education Matching - Education history vs. an internship's requirement text.
"""

from typing import Optional, Sequence

from core.recommender.models import EducationEntry
from core.utils import normalize_text

DEFAULT_HIGH_GRADE_THRESHOLD = 3.5


class EducationMatcher:
    """
    Score education history against free-text requirements.

    Any education at all earns the base score; a field-of-study or degree
    hit earns the match score instead. One entry with a grade at or above
    high_grade_threshold adds the bonus, capped at 100.
    """

    def __init__(
        self,
        high_grade_threshold: float = DEFAULT_HIGH_GRADE_THRESHOLD,
        match_score: int = 80,
        base_score: int = 20,
        grade_bonus: int = 20
    ):
        self.high_grade_threshold = high_grade_threshold
        self.match_score = match_score
        self.base_score = base_score
        self.grade_bonus = grade_bonus

    def match(
        self,
        requirement_text: Optional[str],
        education_entries: Optional[Sequence[EducationEntry]]
    ) -> int:
        if not requirement_text or not education_entries:
            return 0

        required = normalize_text(requirement_text)

        has_match = any(self._entry_matches(required, entry) for entry in education_entries)
        high_grade = any(
            entry.cgpa is not None and entry.cgpa >= self.high_grade_threshold
            for entry in education_entries
        )

        score = self.match_score if has_match else self.base_score
        if high_grade:
            score = min(100, score + self.grade_bonus)
        return score

    @staticmethod
    def _entry_matches(required: str, entry: EducationEntry) -> bool:
        field_of_study = (entry.field_of_study or '').lower()
        degree = (entry.degree or '').lower()
        # An empty field_of_study is contained in any requirement text
        return (
            required in field_of_study
            or field_of_study in required
            or required in degree
        )
