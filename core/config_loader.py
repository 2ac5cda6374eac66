import yaml
import os
from typing import List, Optional
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///internmatch.db"


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class ScoringWeights(BaseModel):
    """
    Weights applied to each matcher's 0-100 score.

    overall_score = min(100, round(skill_weight * skill_pct
                                   + text_weight * text_similarity
                                   + education_weight * education_score))
    """
    skill_weight: float = Field(default=0.5, ge=0)
    text_weight: float = Field(default=0.3, ge=0)
    education_weight: float = Field(default=0.2, ge=0)


class ExplanationThresholds(BaseModel):
    """Tier boundaries used when building the match reason sentence."""
    # Skill tiers (percentage of required skills matched)
    strong_skills: int = 80
    good_skills: int = 50

    # Cover letter similarity at or above this reads as "aligned"
    text_alignment: int = 30

    # Assessment ladder on the overall score
    highly_recommended: int = 80
    recommended: int = 60
    consider_for_review: int = 40


class RecommendationConfig(BaseModel):
    """
    Configuration for candidate recommendation scoring and ranking.
    """
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    thresholds: ExplanationThresholds = Field(default_factory=ExplanationThresholds)

    # Grade value at or above which an education entry earns the bonus.
    # Stored grades may be on a 0-10 scale; the scale of this value is unconfirmed.
    high_grade_threshold: float = 3.5
    education_match_score: int = 80
    education_base_score: int = 20
    education_grade_bonus: int = 20

    # Tokens must be longer than this to count for text similarity
    min_token_length: int = 3

    # Application statuses considered for ranking
    eligible_statuses: List[str] = Field(
        default_factory=lambda: ['pending', 'reviewed', 'shortlisted']
    )
    # Internship statuses treated as open
    open_internship_statuses: List[str] = Field(
        default_factory=lambda: ['active', 'draft']
    )


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        data.setdefault('web', {})
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_web_port)

    env_grade_threshold = os.environ.get("RECOMMENDATION_HIGH_GRADE_THRESHOLD")
    if env_grade_threshold:
        data.setdefault('recommendation', {})
        data['recommendation']['high_grade_threshold'] = float(env_grade_threshold)

    return AppConfig(**data)
