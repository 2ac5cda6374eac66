#!/usr/bin/env python3
"""
Recommendation endpoints - ranked applicants for a company's internships.

Callers are expected to be authenticated and authorized for company_id
before reaching these routes.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import RecommendationConfig
from ..dependencies import get_db, get_recommendation_config
from ..services.recommendation_service import RecommendationService
from ..models.requests import AnalyzeApplicantRequest
from ..models.responses import (
    RecommendationsResponse,
    InternshipRecommendationsResponse,
    AnalyzeApplicantResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/companies/{company_id}/recommendations", tags=["recommendations"])


@router.get("", response_model=RecommendationsResponse)
def get_recommendations(
    company_id: str,
    db: Session = Depends(get_db),
    config: RecommendationConfig = Depends(get_recommendation_config)
):
    """
    Get ranked applicants for all of the company's open internships.

    Internships without eligible applications are included with an
    empty applicant list.
    """
    service = RecommendationService(db, config)
    return service.get_recommendations(company_id)


@router.post("/analyze", response_model=AnalyzeApplicantResponse)
def analyze_applicant(
    company_id: str,
    request: AnalyzeApplicantRequest,
    db: Session = Depends(get_db),
    config: RecommendationConfig = Depends(get_recommendation_config)
):
    """
    Get one application's data together with its recommendation score.
    """
    service = RecommendationService(db, config)
    return service.analyze_applicant(company_id, request.application_id)


@router.get("/{internship_id}", response_model=InternshipRecommendationsResponse)
def get_internship_recommendations(
    company_id: str,
    internship_id: str,
    db: Session = Depends(get_db),
    config: RecommendationConfig = Depends(get_recommendation_config)
):
    """
    Get ranked applicants for a single internship owned by the company.
    """
    service = RecommendationService(db, config)
    return service.get_internship_recommendations(company_id, internship_id)
