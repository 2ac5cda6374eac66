#!/usr/bin/env python3
"""
Recommendation Models - Data structures for applicant scoring and ranking.

All records are transient: built fresh for each scoring pass and discarded
once the response has been serialized.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Any, Optional


@dataclass
class EducationEntry:
    """One education history entry from a student profile."""
    institution: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    cgpa: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EducationEntry':
        """Build from a stored profile dict (camelCase or snake_case keys)."""
        cgpa = data.get('cgpa')
        try:
            cgpa = float(cgpa) if cgpa is not None else None
        except (TypeError, ValueError):
            cgpa = None

        return cls(
            institution=data.get('institution'),
            degree=data.get('degree'),
            field_of_study=data.get('field_of_study', data.get('fieldOfStudy')),
            cgpa=cgpa,
            start_date=_as_text(data.get('start_date', data.get('startDate'))),
            end_date=_as_text(data.get('end_date', data.get('endDate'))),
            current=bool(data.get('current', False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'institution': self.institution,
            'degree': self.degree,
            'fieldOfStudy': self.field_of_study,
            'cgpa': self.cgpa,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'current': self.current,
        }


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


@dataclass
class SkillMatchResult:
    """Result of comparing required skills against a candidate's skills."""
    percentage: int = 0
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    total_required: int = 0
    total_matched: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'percentage': self.percentage,
            'matched': len(self.matched_skills),
            'total': self.total_required,
            'matchedSkills': list(self.matched_skills),
            'missingSkills': list(self.missing_skills),
        }


@dataclass
class ScoreBreakdown:
    """Weighted sub-scores, each rounded independently."""
    skill_score: int = 0
    text_score: int = 0
    education_score: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'skillScore': self.skill_score,
            'textScore': self.text_score,
            'educationScore': self.education_score,
        }


@dataclass
class RecommendationScore:
    """Aggregate score for one applicant against one internship."""
    overall_score: int
    breakdown: ScoreBreakdown
    skill_match: SkillMatchResult
    match_reason: str


@dataclass
class StudentProfile:
    """Student fields needed for scoring and pass-through display."""
    student_id: Any
    email: Optional[str] = None
    name: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    university: Optional[str] = None
    major: Optional[str] = None
    graduation_year: Optional[int] = None


@dataclass
class ResumeRef:
    filename: Optional[str] = None
    path: Optional[str] = None


@dataclass
class ApplicantRecord:
    """
    One application as delivered by the persistence layer.

    student is None when the owning student profile could not be resolved;
    such applicants are skipped by the ranker.
    """
    application_id: Any
    student: Optional[StudentProfile]
    cover_letter: Optional[str] = None
    resume: ResumeRef = field(default_factory=ResumeRef)
    status: str = 'pending'
    applied_at: Optional[datetime] = None


@dataclass
class InternshipRecord:
    """Internship fields used as scoring parameters."""
    internship_id: Any
    title: str = ''
    skills: List[str] = field(default_factory=list)
    requirements: str = ''
    description: str = ''


@dataclass
class RankedApplicant:
    """An applicant annotated with its recommendation score."""
    applicant: ApplicantRecord
    student: StudentProfile
    score: RecommendationScore

    @property
    def overall_score(self) -> int:
        return self.score.overall_score

    def to_dict(self) -> Dict[str, Any]:
        student = self.student
        applicant = self.applicant
        return {
            'applicationId': _as_id(applicant.application_id),
            'studentId': _as_id(student.student_id),
            'studentEmail': student.email,
            'studentName': student.name or 'N/A',
            'studentSkills': list(student.skills),
            'studentEducation': [e.to_dict() for e in student.education],
            'studentUniversity': student.university or 'N/A',
            'studentMajor': student.major or 'N/A',
            'studentGraduationYear': student.graduation_year,
            'resumePath': applicant.resume.path,
            'resumeFilename': applicant.resume.filename,
            'coverLetter': applicant.cover_letter or None,
            'applicationStatus': applicant.status,
            'appliedAt': _as_text(applicant.applied_at),
            'recommendationScore': self.score.overall_score,
            'matchReason': self.score.match_reason,
            'skillsMatch': self.score.skill_match.to_dict(),
            'scoreBreakdown': self.score.breakdown.to_dict(),
        }


@dataclass
class InternshipRecommendations:
    """Ranked applicants for one internship."""
    internship: InternshipRecord
    applicants: List[RankedApplicant] = field(default_factory=list)

    @property
    def total_applicants(self) -> int:
        return len(self.applicants)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'internshipId': _as_id(self.internship.internship_id),
            'internshipTitle': self.internship.title,
            'internshipSkills': list(self.internship.skills),
            'internshipRequirements': self.internship.requirements,
            'totalApplicants': self.total_applicants,
            'applicants': [a.to_dict() for a in self.applicants],
        }


def _as_id(value: Any) -> Optional[str]:
    return str(value) if value is not None else None
