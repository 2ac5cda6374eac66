#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalyzeApplicantRequest(BaseModel):
    """Request body for analyzing a single application."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    application_id: str = Field(..., min_length=1, description="Application to analyze")
