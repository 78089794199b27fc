"""Pydantic contracts shared by the taxonomy, scorer, gap analyzer and recommendation engine."""

from models.schemas.taxonomy import ExtractedSkill, ExtractionResult, NormalizeResult, SkillNode
from models.schemas.profile import (
    CandidateProfile,
    CandidateSkill,
    EducationEntry,
    JobRequirements,
    WorkHistoryEntry,
)
from models.schemas.score import ScoreBreakdown
from models.schemas.gaps import GapAnalysisResult, GapRecommendation, SkillGap
from models.schemas.resources import ResourceEntry, UserPreferences
from models.schemas.learning_plan import (
    LearningPhase,
    LearningPlan,
    LearningPlanSummary,
    LearningTimeline,
    RecommendedResource,
    SkillRecommendation,
    WeeklySchedule,
)

__all__ = [
    "SkillNode",
    "NormalizeResult",
    "ExtractedSkill",
    "ExtractionResult",
    "CandidateSkill",
    "WorkHistoryEntry",
    "EducationEntry",
    "CandidateProfile",
    "JobRequirements",
    "ScoreBreakdown",
    "GapRecommendation",
    "SkillGap",
    "GapAnalysisResult",
    "ResourceEntry",
    "UserPreferences",
    "RecommendedResource",
    "SkillRecommendation",
    "LearningPhase",
    "WeeklySchedule",
    "LearningTimeline",
    "LearningPlanSummary",
    "LearningPlan",
]
