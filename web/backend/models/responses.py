#!/usr/bin/env python3
"""
Response models for API endpoints.

Payload keys are camelCase; attributes stay snake_case in Python.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional, Dict, Any


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EducationEntryModel(CamelModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    cgpa: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False


class SkillsMatchModel(CamelModel):
    """Skill comparison summary for one applicant."""
    percentage: int = Field(ge=0, le=100)
    matched: int = Field(ge=0)
    total: int = Field(ge=0)
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)


class ScoreBreakdownModel(CamelModel):
    skill_score: int = Field(ge=0)
    text_score: int = Field(ge=0)
    education_score: int = Field(ge=0)


class RankedApplicantModel(CamelModel):
    """One applicant with its recommendation score."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "applicationId": "550e8400-e29b-41d4-a716-446655440000",
                "studentId": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "studentEmail": "ada@example.edu",
                "studentName": "Ada Lovelace",
                "studentSkills": ["Python", "React"],
                "studentEducation": [],
                "studentUniversity": "State University",
                "studentMajor": "Computer Science",
                "studentGraduationYear": 2027,
                "resumePath": "uploads/resumes/ada.pdf",
                "resumeFilename": "ada.pdf",
                "coverLetter": "I have built several React applications...",
                "applicationStatus": "pending",
                "appliedAt": "2026-02-01T12:00:00",
                "recommendationScore": 72,
                "matchReason": "Recommended - Strong skills match (100% - 2/2 skills); Some alignment with requirements",
                "skillsMatch": {
                    "percentage": 100, "matched": 2, "total": 2,
                    "matchedSkills": ["python", "react"], "missingSkills": []
                },
                "scoreBreakdown": {"skillScore": 50, "textScore": 6, "educationScore": 16}
            }
        }
    )

    application_id: Optional[str]
    student_id: Optional[str]
    student_email: Optional[str]
    student_name: str
    student_skills: List[str] = Field(default_factory=list)
    student_education: List[EducationEntryModel] = Field(default_factory=list)
    student_university: str
    student_major: str
    student_graduation_year: Optional[int] = None
    resume_path: Optional[str] = None
    resume_filename: Optional[str] = None
    cover_letter: Optional[str] = None
    application_status: str
    applied_at: Optional[str] = None

    recommendation_score: int = Field(ge=0, le=100)
    match_reason: str
    skills_match: SkillsMatchModel
    score_breakdown: ScoreBreakdownModel


class InternshipRecommendationsModel(CamelModel):
    """Ranked applicants for one internship."""
    internship_id: Optional[str]
    internship_title: str
    internship_skills: List[str] = Field(default_factory=list)
    internship_requirements: str = ''
    total_applicants: int = Field(ge=0)
    applicants: List[RankedApplicantModel] = Field(default_factory=list)


class RecommendationsResponse(CamelModel):
    """Response for all open internships of a company."""
    success: bool = True
    message: str
    recommendations: List[InternshipRecommendationsModel] = Field(default_factory=list)
    total_internships: int = Field(ge=0)


class InternshipSummary(CamelModel):
    id: str
    title: str
    skills: List[str] = Field(default_factory=list)
    requirements: str = ''


class InternshipRecommendationsResponse(CamelModel):
    """Response for a single internship."""
    success: bool = True
    message: str
    internship: InternshipSummary
    recommendations: List[RankedApplicantModel] = Field(default_factory=list)
    total_applicants: int = Field(ge=0)


class AnalysisData(CamelModel):
    """Raw applicant data gathered for analysis."""
    application: Dict[str, Any]
    student: Dict[str, Any]
    resume: Dict[str, Any]
    internship: Dict[str, Any]


class AnalyzeApplicantResponse(CamelModel):
    """Analysis of a single application against its internship."""
    success: bool = True
    message: str
    analysis_data: AnalysisData
    recommendation: Optional[RankedApplicantModel] = None
    internship_keywords: List[str] = Field(default_factory=list)
    score_components: Dict[str, Any] = Field(default_factory=dict)
