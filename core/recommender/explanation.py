#!/usr/bin/env python3
"""
Match Explanation - Human-readable reason for a recommendation score.

Format: "<assessment> - <reason>; <reason>; ..."

The skill reason is always present. The cover letter reason is omitted when
similarity is zero, and the education reason appears only when the weighted
education score is nonzero.
"""

from typing import List, Optional

from core.config_loader import ExplanationThresholds
from core.recommender.models import SkillMatchResult

HIGHLY_RECOMMENDED = "Highly Recommended"
RECOMMENDED = "Recommended"
CONSIDER_FOR_REVIEW = "Consider for Review"
LOW_MATCH = "Low Match"


def skill_reason(skill_match: SkillMatchResult, thresholds: ExplanationThresholds) -> str:
    pct = skill_match.percentage
    if pct >= thresholds.strong_skills:
        tier = "Strong skills match"
    elif pct >= thresholds.good_skills:
        tier = "Good skills match"
    elif pct > 0:
        tier = "Partial skills match"
    else:
        return "Limited skills match"
    return f"{tier} ({pct}% - {skill_match.total_matched}/{skill_match.total_required} skills)"


def text_reason(text_similarity: int, thresholds: ExplanationThresholds) -> Optional[str]:
    if text_similarity >= thresholds.text_alignment:
        return "Cover letter aligns with requirements"
    if text_similarity > 0:
        return "Some alignment with requirements"
    return None


def assessment(overall_score: int, thresholds: ExplanationThresholds) -> str:
    if overall_score >= thresholds.highly_recommended:
        return HIGHLY_RECOMMENDED
    if overall_score >= thresholds.recommended:
        return RECOMMENDED
    if overall_score >= thresholds.consider_for_review:
        return CONSIDER_FOR_REVIEW
    return LOW_MATCH


def generate_match_reason(
    skill_match: SkillMatchResult,
    text_similarity: int,
    education_relevant: bool,
    overall_score: int,
    thresholds: Optional[ExplanationThresholds] = None
) -> str:
    """
    Args:
        skill_match: Skill comparison result
        text_similarity: Raw 0-100 cover letter similarity
        education_relevant: Whether the weighted education score is nonzero
        overall_score: Final 0-100 score used for the assessment prefix
        thresholds: Tier boundaries (defaults if omitted)
    """
    thresholds = thresholds or ExplanationThresholds()

    reasons: List[str] = [skill_reason(skill_match, thresholds)]

    text = text_reason(text_similarity, thresholds)
    if text:
        reasons.append(text)

    if education_relevant:
        reasons.append("Relevant educational background")

    return f"{assessment(overall_score, thresholds)} - {'; '.join(reasons)}"
