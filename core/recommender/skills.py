#!/usr/bin/env python3
"""
Skill Matching - Required skills vs. a candidate's declared skills.

A required skill counts as matched when it equals a candidate skill, is a
substring of one, or contains one (after lowercasing and trimming both).
Containment over-matches: "java" matches "javascript", and a blank
candidate skill matches every required skill.
"""

from typing import List, Optional, Sequence

from core.recommender.models import SkillMatchResult
from core.utils import as_list, normalize_text, round_half_up


class SkillMatcher:
    """Compare a required skill set against a candidate skill set."""

    @staticmethod
    def match(
        required_skills: Optional[Sequence[str]],
        candidate_skills: Optional[Sequence[str]]
    ) -> SkillMatchResult:
        """
        Args:
            required_skills: Skills listed on the internship (original case)
            candidate_skills: Skills declared by the student

        Returns:
            SkillMatchResult; all zero/empty when no skills are required
        """
        required = as_list(required_skills)
        if not required:
            return SkillMatchResult()

        normalized_required = [normalize_text(s) for s in required]
        normalized_candidate = [normalize_text(s) for s in as_list(candidate_skills)]

        matched: List[str] = []
        for req_skill in normalized_required:
            if req_skill in matched:
                continue
            if _skill_matches(req_skill, normalized_candidate):
                matched.append(req_skill)

        missing = [s for s in required if normalize_text(s) not in matched]

        return SkillMatchResult(
            percentage=round_half_up(len(matched) / len(normalized_required) * 100),
            matched_skills=matched,
            missing_skills=missing,
            total_required=len(required),
            total_matched=len(matched),
        )


def _skill_matches(req_skill: str, candidate_skills: List[str]) -> bool:
    if req_skill in candidate_skills:
        return True
    return any(
        req_skill in cand_skill or cand_skill in req_skill
        for cand_skill in candidate_skills
    )
