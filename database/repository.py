import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from database.models import Application, Internship, User
from database.repositories import (
    CompanyRepository, InternshipRepository, ApplicationRepository
)
from core.recommender.models import (
    ApplicantRecord, EducationEntry, InternshipRecord, ResumeRef, StudentProfile
)

logger = logging.getLogger(__name__)


def to_internship_record(internship: Internship) -> InternshipRecord:
    return InternshipRecord(
        internship_id=internship.id,
        title=internship.title or '',
        skills=list(internship.skills or []),
        requirements=internship.requirements or '',
        description=internship.description or '',
    )


def to_student_profile(user: Optional[User]) -> Optional[StudentProfile]:
    if user is None:
        return None

    education = []
    for entry in user.education or []:
        if isinstance(entry, dict):
            education.append(EducationEntry.from_dict(entry))
        else:
            logger.warning(f"User {user.id} has a malformed education entry, ignoring")

    return StudentProfile(
        student_id=user.id,
        email=user.email,
        name=user.name,
        skills=[s for s in (user.skills or []) if isinstance(s, str)],
        education=education,
        university=user.university,
        major=user.major,
        graduation_year=user.graduation_year,
    )


def to_applicant_record(application: Application) -> ApplicantRecord:
    return ApplicantRecord(
        application_id=application.id,
        student=to_student_profile(application.student),
        cover_letter=application.cover_letter,
        resume=ResumeRef(
            filename=application.resume_filename,
            path=application.resume_path,
        ),
        status=application.status,
        applied_at=application.created_at,
    )


class RecommendationRepository:
    """
    Data access for recommendations.

    Implements the fetch contract RecommendationRanker relies on and converts
    ORM rows into core records.
    """

    def __init__(self, db: Session):
        self.db = db
        self.company = CompanyRepository(db)
        self.internship = InternshipRepository(db)
        self.application = ApplicationRepository(db)

    def get_open_internships(self, company_id: Any, statuses: List[str]) -> List[InternshipRecord]:
        rows = self.internship.get_open_for_company(company_id, statuses)
        return [to_internship_record(row) for row in rows]

    def get_eligible_applications(
        self,
        internship_ids: List[Any],
        statuses: List[str]
    ) -> Dict[Any, List[ApplicantRecord]]:
        grouped = self.application.get_by_internships(internship_ids, statuses)
        return {
            internship_id: [to_applicant_record(app) for app in apps]
            for internship_id, apps in grouped.items()
        }
