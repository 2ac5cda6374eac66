#!/usr/bin/env python3
"""
Recommendation Module - Rank internship applicants against requirements.

Public API:
- RecommendationRanker: Ranks applicants per internship or per company
- ScoreAggregator: Weighted blend of the three matchers with explanation
- SkillMatcher, TextSimilarity, EducationMatcher: Leaf matchers

Modules:

- models.py: Data structures (records, scores, ranked results)
- skills.py: Required vs. declared skill matching
- text_similarity.py: Jaccard similarity and keyword extraction
- education.py: Education history vs. requirement text
- explanation.py: Match reason sentence
- aggregator.py: ScoringParams normalization and ScoreAggregator
- ranker.py: RecommendationRanker orchestrator
"""

from core.recommender.models import (
    EducationEntry, SkillMatchResult, ScoreBreakdown, RecommendationScore,
    StudentProfile, ResumeRef, ApplicantRecord, InternshipRecord,
    RankedApplicant, InternshipRecommendations
)
from core.recommender.skills import SkillMatcher
from core.recommender.text_similarity import TextSimilarity, extract_keywords
from core.recommender.education import EducationMatcher
from core.recommender.aggregator import ScoreAggregator, ScoringParams
from core.recommender.ranker import RecommendationRanker

__all__ = [
    'RecommendationRanker', 'ScoreAggregator', 'ScoringParams',
    'SkillMatcher', 'TextSimilarity', 'EducationMatcher', 'extract_keywords',
    'EducationEntry', 'SkillMatchResult', 'ScoreBreakdown', 'RecommendationScore',
    'StudentProfile', 'ResumeRef', 'ApplicantRecord', 'InternshipRecord',
    'RankedApplicant', 'InternshipRecommendations',
]
