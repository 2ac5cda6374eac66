#!/usr/bin/env python3
"""
Test suite for match reason generation.
"""

import unittest
from core.config_loader import ExplanationThresholds
from core.recommender import SkillMatchResult
from core.recommender.explanation import (
    generate_match_reason, skill_reason, text_reason, assessment,
    HIGHLY_RECOMMENDED, RECOMMENDED, CONSIDER_FOR_REVIEW, LOW_MATCH
)


def make_skill_match(percentage, matched=1, total=1):
    return SkillMatchResult(
        percentage=percentage,
        matched_skills=[f"skill{i}" for i in range(matched)],
        total_required=total,
        total_matched=matched,
    )


class TestSkillReason(unittest.TestCase):

    def setUp(self):
        self.thresholds = ExplanationThresholds()

    def test_tier_boundaries(self):
        cases = [
            (100, "Strong skills match (100% - 1/1 skills)"),
            (80, "Strong skills match (80% - 1/1 skills)"),
            (79, "Good skills match (79% - 1/1 skills)"),
            (50, "Good skills match (50% - 1/1 skills)"),
            (49, "Partial skills match (49% - 1/1 skills)"),
            (1, "Partial skills match (1% - 1/1 skills)"),
        ]
        for pct, expected in cases:
            with self.subTest(pct=pct):
                self.assertEqual(skill_reason(make_skill_match(pct), self.thresholds), expected)

    def test_zero_percent_has_no_counts(self):
        result = skill_reason(make_skill_match(0, matched=0, total=3), self.thresholds)
        self.assertEqual(result, "Limited skills match")

    def test_counts_come_from_match(self):
        good = skill_reason(make_skill_match(67, matched=2, total=3), self.thresholds)
        partial = skill_reason(make_skill_match(33, matched=1, total=3), self.thresholds)

        self.assertEqual(good, "Good skills match (67% - 2/3 skills)")
        self.assertEqual(partial, "Partial skills match (33% - 1/3 skills)")


class TestTextReason(unittest.TestCase):

    def setUp(self):
        self.thresholds = ExplanationThresholds()

    def test_aligned_at_threshold(self):
        self.assertEqual(text_reason(30, self.thresholds), "Cover letter aligns with requirements")
        self.assertEqual(text_reason(100, self.thresholds), "Cover letter aligns with requirements")

    def test_some_alignment_below_threshold(self):
        self.assertEqual(text_reason(29, self.thresholds), "Some alignment with requirements")
        self.assertEqual(text_reason(1, self.thresholds), "Some alignment with requirements")

    def test_zero_similarity_is_omitted(self):
        self.assertIsNone(text_reason(0, self.thresholds))


class TestAssessment(unittest.TestCase):

    def test_ladder(self):
        thresholds = ExplanationThresholds()
        cases = [
            (100, HIGHLY_RECOMMENDED),
            (80, HIGHLY_RECOMMENDED),
            (79, RECOMMENDED),
            (60, RECOMMENDED),
            (59, CONSIDER_FOR_REVIEW),
            (40, CONSIDER_FOR_REVIEW),
            (39, LOW_MATCH),
            (0, LOW_MATCH),
        ]
        for score, expected in cases:
            with self.subTest(score=score):
                self.assertEqual(assessment(score, thresholds), expected)


class TestGenerateMatchReason(unittest.TestCase):

    def test_all_reasons_joined(self):
        reason = generate_match_reason(make_skill_match(100), 45, True, 92)
        self.assertEqual(
            reason,
            "Highly Recommended - Strong skills match (100% - 1/1 skills); "
            "Cover letter aligns with requirements; Relevant educational background"
        )

    def test_skill_reason_only(self):
        reason = generate_match_reason(make_skill_match(0, matched=0, total=2), 0, False, 0)
        self.assertEqual(reason, "Low Match - Limited skills match")

    def test_education_without_text(self):
        reason = generate_match_reason(make_skill_match(50, total=2), 0, True, 29)
        self.assertEqual(
            reason,
            "Low Match - Good skills match (50% - 1/2 skills); Relevant educational background"
        )

    def test_custom_thresholds(self):
        thresholds = ExplanationThresholds(
            strong_skills=100,
            good_skills=90,
            text_alignment=10,
            highly_recommended=95,
            recommended=90,
            consider_for_review=10,
        )
        reason = generate_match_reason(make_skill_match(85), 12, False, 85, thresholds)
        self.assertEqual(
            reason,
            "Consider for Review - Partial skills match (85% - 1/1 skills); "
            "Cover letter aligns with requirements"
        )


if __name__ == '__main__':
    unittest.main()
