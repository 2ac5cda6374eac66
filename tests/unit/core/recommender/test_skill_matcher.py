#!/usr/bin/env python3
"""
Test suite for skill matching.
"""

import unittest
from core.recommender import SkillMatcher, SkillMatchResult


class TestSkillMatcher(unittest.TestCase):
    """Test SkillMatcher.match."""

    def test_empty_required_skills_short_circuits(self):
        """No required skills yields a zero result with empty lists."""
        result = SkillMatcher.match([], ["Python", "React"])

        self.assertEqual(result.percentage, 0)
        self.assertEqual(result.matched_skills, [])
        self.assertEqual(result.missing_skills, [])
        self.assertEqual(result.total_required, 0)
        self.assertEqual(result.total_matched, 0)

    def test_none_inputs_are_treated_as_empty(self):
        self.assertEqual(SkillMatcher.match(None, None), SkillMatchResult())

        result = SkillMatcher.match(["Python"], None)
        self.assertEqual(result.percentage, 0)
        self.assertEqual(result.missing_skills, ["Python"])

    def test_react_and_node_against_react_and_express(self):
        """One exact case-insensitive hit out of two required skills."""
        result = SkillMatcher.match(["React", "Node.js"], ["react", "express"])

        self.assertEqual(result.percentage, 50)
        self.assertIn("react", result.matched_skills)
        self.assertNotIn("node.js", result.matched_skills)
        self.assertEqual(result.missing_skills, ["Node.js"])
        self.assertEqual(result.total_required, 2)
        self.assertEqual(result.total_matched, 1)

    def test_fully_contained_skills_score_100(self):
        """Required skills present case-insensitively, with padding, give 100%."""
        result = SkillMatcher.match(["Python", "SQL"], ["  python ", "sql", "Docker"])

        self.assertEqual(result.percentage, 100)
        self.assertEqual(result.matched_skills, ["python", "sql"])
        self.assertEqual(result.missing_skills, [])

    def test_required_skill_substring_of_candidate_skill_matches(self):
        """'java' is inside 'javascript' and counts as matched."""
        result = SkillMatcher.match(["Java"], ["JavaScript"])

        self.assertEqual(result.percentage, 100)
        self.assertEqual(result.matched_skills, ["java"])

    def test_candidate_skill_substring_of_required_skill_matches(self):
        """A short candidate skill contained in a longer required skill matches."""
        result = SkillMatcher.match(["React Native", "Kotlin"], ["react"])

        self.assertEqual(result.percentage, 50)
        self.assertEqual(result.matched_skills, ["react native"])
        self.assertEqual(result.missing_skills, ["Kotlin"])

    def test_blank_candidate_skill_matches_everything(self):
        """A blank candidate skill is a substring of every required skill."""
        result = SkillMatcher.match(["Go", "Rust"], ["   "])

        self.assertEqual(result.percentage, 100)

    def test_missing_skills_keep_original_case(self):
        result = SkillMatcher.match(["Docker", "Kubernetes"], [])

        self.assertEqual(result.percentage, 0)
        self.assertEqual(result.missing_skills, ["Docker", "Kubernetes"])

    def test_duplicate_required_skills_count_once_in_matches(self):
        """Matched skills are de-duplicated; the total still counts every entry."""
        result = SkillMatcher.match(["Python", "python"], ["python"])

        self.assertEqual(result.matched_skills, ["python"])
        self.assertEqual(result.total_matched, 1)
        self.assertEqual(result.total_required, 2)
        self.assertEqual(result.percentage, 50)
        self.assertEqual(result.missing_skills, [])

    def test_percentage_is_rounded(self):
        one_of_three = SkillMatcher.match(["Python", "Java", "Go"], ["python"])
        two_of_three = SkillMatcher.match(["Python", "Java", "Go"], ["python", "go"])

        self.assertEqual(one_of_three.percentage, 33)
        self.assertEqual(two_of_three.percentage, 67)

    def test_to_dict_payload(self):
        result = SkillMatcher.match(["React", "Node.js"], ["react"])

        self.assertEqual(result.to_dict(), {
            'percentage': 50,
            'matched': 1,
            'total': 2,
            'matchedSkills': ["react"],
            'missingSkills': ["Node.js"],
        })


if __name__ == '__main__':
    unittest.main()
