#!/usr/bin/env python3
"""
Recommendation service - business logic for applicant recommendations.

Resolves the company and internship context (ownership checks live here,
not in the scoring core), then hands fully loaded records to
RecommendationRanker.
"""

import uuid
import logging
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from core.config_loader import RecommendationConfig
from core.recommender import RecommendationRanker, extract_keywords
from core.recommender.aggregator import ScoringParams
from database.repository import (
    RecommendationRepository, to_applicant_record, to_internship_record
)
from ..models.responses import (
    RecommendationsResponse,
    InternshipRecommendationsResponse,
    InternshipRecommendationsModel,
    InternshipSummary,
    RankedApplicantModel,
    AnalyzeApplicantResponse,
    AnalysisData,
)
from ..exceptions import (
    CompanyNotFoundException,
    InternshipNotFoundException,
    ApplicationNotFoundException,
    InvalidRequestException,
)

logger = logging.getLogger(__name__)


def parse_id(value: str, label: str) -> uuid.UUID:
    """Parse a UUID path or body parameter."""
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise InvalidRequestException(f"Invalid {label} format: {value}. Must be a valid UUID.")


class RecommendationService:
    """Service for ranking a company's applicants."""

    def __init__(self, db: Session, config: Optional[RecommendationConfig] = None):
        self.db = db
        self.config = config or RecommendationConfig()
        self.repo = RecommendationRepository(db)
        self.ranker = RecommendationRanker(repo=self.repo, config=self.config)

    def get_recommendations(self, company_id: str) -> RecommendationsResponse:
        """
        Rank applicants for every open internship of a company.

        Raises:
            CompanyNotFoundException: If the company does not exist.
        """
        company = self._get_company(company_id)

        results = self.ranker.rank_all_open_internships(company.id)
        if not results:
            return RecommendationsResponse(
                success=True,
                message="No open internships found",
                recommendations=[],
                total_internships=0,
            )

        recommendations = [
            InternshipRecommendationsModel.model_validate(r.to_dict()) for r in results
        ]
        return RecommendationsResponse(
            success=True,
            message="Recommendations retrieved successfully",
            recommendations=recommendations,
            total_internships=len(recommendations),
        )

    def get_internship_recommendations(
        self,
        company_id: str,
        internship_id: str
    ) -> InternshipRecommendationsResponse:
        """
        Rank applicants for one internship owned by the company.

        Raises:
            CompanyNotFoundException: If the company does not exist.
            InternshipNotFoundException: If the internship is missing or owned by another company.
        """
        company = self._get_company(company_id)

        internship = self.repo.internship.get_for_company(
            parse_id(internship_id, "internship_id"), company.id
        )
        if not internship:
            raise InternshipNotFoundException(
                "Internship not found or does not belong to your company"
            )

        record = to_internship_record(internship)
        applications = self.repo.get_eligible_applications(
            [internship.id], self.config.eligible_statuses
        ).get(internship.id, [])

        ranked = self.ranker.rank_for_internship(record, applications)

        summary = InternshipSummary(
            id=str(internship.id),
            title=record.title,
            skills=record.skills,
            requirements=record.requirements,
        )
        if not ranked:
            message = "No applications found for this internship"
        else:
            message = "Internship recommendations retrieved successfully"

        return InternshipRecommendationsResponse(
            success=True,
            message=message,
            internship=summary,
            recommendations=[RankedApplicantModel.model_validate(r.to_dict()) for r in ranked],
            total_applicants=len(ranked),
        )

    def analyze_applicant(self, company_id: str, application_id: str) -> AnalyzeApplicantResponse:
        """
        Gather one application's data and score it against its internship.

        Raises:
            CompanyNotFoundException: If the company does not exist.
            ApplicationNotFoundException: If the application is missing or owned by another company.
        """
        company = self._get_company(company_id)

        application = self.repo.application.get_for_company(
            parse_id(application_id, "application_id"), company.id
        )
        if not application:
            raise ApplicationNotFoundException(
                "Application not found or does not belong to your company"
            )

        internship = to_internship_record(application.internship)
        applicant = to_applicant_record(application)
        student = applicant.student

        analysis_data = AnalysisData(
            application={
                'id': str(application.id),
                'status': application.status,
                'coverLetter': application.cover_letter,
                'appliedAt': application.created_at.isoformat() if application.created_at else None,
            },
            student=self._student_block(student),
            resume={
                'path': applicant.resume.path,
                'filename': applicant.resume.filename,
            },
            internship={
                'id': str(internship.internship_id),
                'title': internship.title,
                'skills': internship.skills,
                'requirements': internship.requirements,
                'description': internship.description,
            },
        )

        ranked = self.ranker.score_applicant(internship, applicant)
        if ranked is None:
            return AnalyzeApplicantResponse(
                success=True,
                message="Student profile unavailable; applicant could not be scored",
                analysis_data=analysis_data,
                internship_keywords=extract_keywords(internship.requirements or internship.description),
            )

        params = ScoringParams.for_applicant(internship, student, applicant.cover_letter)
        return AnalyzeApplicantResponse(
            success=True,
            message="Applicant analyzed successfully",
            analysis_data=analysis_data,
            recommendation=RankedApplicantModel.model_validate(ranked.to_dict()),
            internship_keywords=extract_keywords(internship.requirements or internship.description),
            score_components=self.ranker.aggregator.score_components(params),
        )

    # Private helper methods

    def _get_company(self, company_id: str) -> Any:
        company = self.repo.company.get_by_id(parse_id(company_id, "company_id"))
        if not company:
            raise CompanyNotFoundException("Company profile not found")
        return company

    @staticmethod
    def _student_block(student) -> Dict[str, Any]:
        if student is None:
            return {}
        return {
            'id': str(student.student_id),
            'email': student.email,
            'name': student.name or 'N/A',
            'skills': student.skills,
            'education': [e.to_dict() for e in student.education],
            'university': student.university or 'N/A',
            'major': student.major or 'N/A',
            'graduationYear': student.graduation_year,
        }
