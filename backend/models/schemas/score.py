"""Scorer output: weighted acceptance-likelihood breakdown."""

from pydantic import BaseModel


class ScoreBreakdown(BaseModel):
    """Overall score (0-100) plus the five component scores (0-1)."""
    overall_score: float = 0.0
    skill_match_score: float = 0.0
    experience_match_score: float = 0.0
    education_match_score: float = 0.0
    location_fit_score: float = 0.0
    industry_relevance_score: float = 0.0
    matched_required_skills: list[str] = []
    missing_required_skills: list[str] = []
    matched_preferred_skills: list[str] = []
