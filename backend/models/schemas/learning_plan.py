"""Recommendation engine output: phased learning plan and weekly timeline."""

from pydantic import BaseModel

from models.schemas.resources import ResourceEntry


class RecommendedResource(BaseModel):
    resource: ResourceEntry
    relevance_score: float = 0.0
    is_alternative: bool = False
    recommendation_reason: str = ""
    estimated_completion_hours: float = 1.0


class SkillRecommendation(BaseModel):
    skill_name: str
    gap_category: str
    priority_score: float = 0.0
    primary_resource: RecommendedResource | None = None
    alternative_resources: list[RecommendedResource] = []
    estimated_hours_to_job_ready: int = 0
    current_level: str = ""
    target_level: str = ""


class LearningPhase(BaseModel):
    phase_number: int
    phase_name: str
    phase_description: str = ""
    skills: list[SkillRecommendation] = []
    total_hours: float = 0.0
    estimated_weeks: float = 0.0
    milestone: str = ""


class WeeklySchedule(BaseModel):
    week_number: int
    phase_number: int
    skill_focus: str
    resource_title: str
    hours_planned: float = 0.0
    cumulative_hours: float = 0.0
    activities: list[str] = []
    is_checkpoint: bool = False
    checkpoint_description: str = ""


class LearningTimeline(BaseModel):
    total_weeks: int = 0
    total_hours: float = 0.0
    weekly_hours: float = 0.0
    weeks: list[WeeklySchedule] = []
    target_completion_date: str = ""


class LearningPlanSummary(BaseModel):
    headline: str = ""
    critical_gap_count: int = 0
    important_gap_count: int = 0
    free_resource_count: int = 0
    paid_resource_count: int = 0
    estimated_total_cost_usd: float = 0.0
    top_skills_to_learn: list[str] = []
    quick_wins: list[str] = []


class LearningPlan(BaseModel):
    """A complete, time-boxed learning plan for one profile/job pair."""
    job_title: str = ""
    readiness_score: float = 100.0
    total_gaps: int = 0
    total_estimated_hours: float = 0.0
    phases: list[LearningPhase] = []
    timeline: LearningTimeline = LearningTimeline()
    matched_skills: list[str] = []
    summary: LearningPlanSummary = LearningPlanSummary()
