#!/usr/bin/env python3
"""
Recommendation Ranker - Rank an internship's applicants by recommendation score.

Fetching and scoring are staged: every application needed for a company's
internships is loaded in one batched query before any scoring starts, so the
scoring pipeline only ever sees fully materialized, in-memory records.

The ranker performs no authorization. Callers must pass an internship or
company that has already been resolved and checked for ownership.
"""

from typing import Any, List, Optional, Sequence
import logging

from core.config_loader import RecommendationConfig
from core.recommender.aggregator import ScoreAggregator, ScoringParams
from core.recommender.models import (
    ApplicantRecord, InternshipRecord, InternshipRecommendations, RankedApplicant
)

logger = logging.getLogger(__name__)


class RecommendationRanker:
    """
    Entry point for applicant recommendations.

    The repo collaborator must provide:
    - get_open_internships(company_id, statuses) -> List[InternshipRecord]
    - get_eligible_applications(internship_ids, statuses) -> Dict[id, List[ApplicantRecord]]
    """

    def __init__(
        self,
        repo: Any = None,
        config: Optional[RecommendationConfig] = None,
        aggregator: Optional[ScoreAggregator] = None
    ):
        self.repo = repo
        self.config = config or RecommendationConfig()
        self.aggregator = aggregator or ScoreAggregator(self.config)

    def score_applicant(
        self,
        internship: InternshipRecord,
        applicant: ApplicantRecord
    ) -> Optional[RankedApplicant]:
        """Score one applicant; None when its student profile is unresolved."""
        if applicant.student is None:
            logger.warning(
                f"Skipping application {applicant.application_id} for internship "
                f"{internship.internship_id}: student profile not resolved"
            )
            return None

        params = ScoringParams.for_applicant(internship, applicant.student, applicant.cover_letter)
        score = self.aggregator.score(params)

        logger.debug(
            f"Application {applicant.application_id}: overall={score.overall_score}, "
            f"skills={score.skill_match.percentage}%"
        )
        return RankedApplicant(applicant=applicant, student=applicant.student, score=score)

    def rank_for_internship(
        self,
        internship: InternshipRecord,
        applications: Optional[Sequence[ApplicantRecord]]
    ) -> List[RankedApplicant]:
        """
        Score and rank applications for one internship.

        Args:
            internship: Already-authorized internship record
            applications: Eligible applications in upstream fetch order

        Returns:
            RankedApplicant list sorted by overall_score, highest first.
            Equal scores keep their input order.
        """
        ranked = []
        for applicant in applications or []:
            result = self.score_applicant(internship, applicant)
            if result is not None:
                ranked.append(result)

        # list.sort is stable, so ties keep fetch order
        ranked.sort(key=lambda r: r.overall_score, reverse=True)
        return ranked

    def rank_all_open_internships(self, company_id: Any) -> List[InternshipRecommendations]:
        """
        Rank applicants for every open internship a company owns.

        Internships without eligible applications are kept with an empty
        applicant list. Internship fetch order is preserved.
        """
        if self.repo is None:
            raise ValueError("rank_all_open_internships requires a repository")

        internships = self.repo.get_open_internships(
            company_id, self.config.open_internship_statuses
        )
        if not internships:
            logger.info(f"Company {company_id} has no open internships")
            return []

        applications_by_internship = self.repo.get_eligible_applications(
            [i.internship_id for i in internships],
            self.config.eligible_statuses
        )

        results = []
        for internship in internships:
            applications = applications_by_internship.get(internship.internship_id, [])
            ranked = self.rank_for_internship(internship, applications)
            logger.info(
                f"Internship {internship.internship_id}: ranked {len(ranked)} "
                f"of {len(applications)} eligible applications"
            )
            results.append(InternshipRecommendations(internship=internship, applicants=ranked))

        return results
