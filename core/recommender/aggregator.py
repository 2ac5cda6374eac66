#!/usr/bin/env python3
"""
Score Aggregation - Weighted blend of skill, text and education matches.

Formula:
    skill     = skill_pct * skill_weight
    text      = text_similarity * text_weight
    education = education_score * education_weight
    overall   = min(100, round(skill + text + education))

Breakdown values are rounded independently, so they may not add up to the
overall score exactly.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import logging

from core.config_loader import RecommendationConfig, ScoringWeights
from core.recommender.education import EducationMatcher
from core.recommender.explanation import generate_match_reason
from core.recommender.models import (
    EducationEntry, RecommendationScore, ScoreBreakdown, StudentProfile, InternshipRecord
)
from core.recommender.skills import SkillMatcher
from core.recommender.text_similarity import TextSimilarity
from core.utils import as_list, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class ScoringParams:
    """
    Fully populated scoring inputs.

    student_major and student_university are accepted for completeness but
    no matcher reads them yet.
    """
    required_skills: List[str] = field(default_factory=list)
    candidate_skills: List[str] = field(default_factory=list)
    requirements_text: str = ''
    cover_letter: str = ''
    education: List[EducationEntry] = field(default_factory=list)
    student_major: str = ''
    student_university: str = ''

    @classmethod
    def from_raw(
        cls,
        required_skills: Optional[Sequence[str]] = None,
        candidate_skills: Optional[Sequence[str]] = None,
        requirements_text: Optional[str] = None,
        cover_letter: Optional[str] = None,
        education: Optional[Sequence[Any]] = None,
        student_major: Optional[str] = None,
        student_university: Optional[str] = None
    ) -> 'ScoringParams':
        """Apply defaults once: None becomes empty, dict entries become EducationEntry."""
        entries = []
        for entry in as_list(education):
            if isinstance(entry, EducationEntry):
                entries.append(entry)
            elif isinstance(entry, dict):
                entries.append(EducationEntry.from_dict(entry))
            else:
                logger.debug(f"Ignoring education entry of type {type(entry).__name__}")

        return cls(
            required_skills=[s for s in as_list(required_skills) if s is not None],
            candidate_skills=[s for s in as_list(candidate_skills) if s is not None],
            requirements_text=requirements_text or '',
            cover_letter=cover_letter or '',
            education=entries,
            student_major=student_major or '',
            student_university=student_university or '',
        )

    @classmethod
    def for_applicant(
        cls,
        internship: InternshipRecord,
        student: StudentProfile,
        cover_letter: Optional[str]
    ) -> 'ScoringParams':
        return cls.from_raw(
            required_skills=internship.skills,
            candidate_skills=student.skills,
            requirements_text=internship.requirements,
            cover_letter=cover_letter,
            education=student.education,
            student_major=student.major,
            student_university=student.university,
        )


class ScoreAggregator:
    """
    Combine the three matchers into one RecommendationScore.

    Weights and explanation thresholds come from RecommendationConfig, so
    alternate weightings can be tested without touching the blend logic.
    """

    def __init__(
        self,
        config: Optional[RecommendationConfig] = None,
        weights: Optional[ScoringWeights] = None
    ):
        self.config = config or RecommendationConfig()
        self.weights = weights or self.config.weights
        self.skill_matcher = SkillMatcher()
        self.text_similarity = TextSimilarity(min_token_length=self.config.min_token_length)
        self.education_matcher = EducationMatcher(
            high_grade_threshold=self.config.high_grade_threshold,
            match_score=self.config.education_match_score,
            base_score=self.config.education_base_score,
            grade_bonus=self.config.education_grade_bonus,
        )

    def score(self, params: ScoringParams) -> RecommendationScore:
        skill_match = self.skill_matcher.match(params.required_skills, params.candidate_skills)
        text_similarity = self.text_similarity.similarity(params.requirements_text, params.cover_letter)
        education_match = self.education_matcher.match(params.requirements_text, params.education)

        skill_score = skill_match.percentage * self.weights.skill_weight
        text_score = text_similarity * self.weights.text_weight
        education_score = education_match * self.weights.education_weight

        overall_score = min(100, round_half_up(skill_score + text_score + education_score))

        match_reason = generate_match_reason(
            skill_match,
            text_similarity,
            education_score > 0,
            overall_score,
            self.config.thresholds,
        )

        return RecommendationScore(
            overall_score=overall_score,
            breakdown=ScoreBreakdown(
                skill_score=round_half_up(skill_score),
                text_score=round_half_up(text_score),
                education_score=round_half_up(education_score),
            ),
            skill_match=skill_match,
            match_reason=match_reason,
        )

    def score_components(self, params: ScoringParams) -> Dict[str, Any]:
        """Raw matcher outputs before weighting, for diagnostics."""
        return {
            'skill_percentage': self.skill_matcher.match(
                params.required_skills, params.candidate_skills
            ).percentage,
            'text_similarity': self.text_similarity.similarity(
                params.requirements_text, params.cover_letter
            ),
            'education_score': self.education_matcher.match(
                params.requirements_text, params.education
            ),
            'weights': self.weights.model_dump(),
        }
