"""Gap analyzer output: prioritized skill gaps, readiness and chart data."""

from pydantic import BaseModel


class GapRecommendation(BaseModel):
    """A single actionable step to close a gap."""
    title: str
    description: str = ""
    resource_type: str = "course"  # course, certification, project, book, documentation, practice
    estimated_hours: int = 1
    priority: int = 1  # 1 = do first


class SkillGap(BaseModel):
    skill_name: str
    category: str  # critical, important, nice_to_have
    priority_score: float = 0.0
    importance_score: float = 0.0
    estimated_learning_hours: int = 1
    transferability_score: float = 0.0  # share of related skills already held
    current_level: str = ""  # empty when the skill is entirely absent
    target_level: str = "intermediate"
    semantic_similarity_score: float = 0.0
    closest_existing_skill: str = ""
    difficulty: str = "intermediate"
    recommendations: list[GapRecommendation] = []


class RadarChartData(BaseModel):
    labels: list[str] = []
    candidate_scores: list[float] = []
    required_scores: list[float] = []


class CategorySummary(BaseModel):
    category: str
    gap_count: int = 0
    total_learning_hours: int = 0
    average_priority: float = 0.0


class TimelineEntry(BaseModel):
    order: int
    skill_name: str
    category: str
    estimated_hours: int = 0
    cumulative_hours: int = 0
    rationale: str = ""


class GapVisualData(BaseModel):
    radar_chart: RadarChartData = RadarChartData()
    gaps_by_category: list[CategorySummary] = []
    learning_timeline: list[TimelineEntry] = []


class GapAnalysisResult(BaseModel):
    """Structured output of the gap analyzer.

    Each gap list is sorted by priority_score descending.
    readiness_score is 100 when total_gaps == 0.
    """
    critical_gaps: list[SkillGap] = []
    important_gaps: list[SkillGap] = []
    nice_to_have_gaps: list[SkillGap] = []
    matched_skills: list[str] = []
    readiness_score: float = 100.0
    total_gaps: int = 0
    critical_gap_count: int = 0
    important_gap_count: int = 0
    nice_to_have_gap_count: int = 0
    total_estimated_learning_hours: int = 0
    top_priority_gaps: list[SkillGap] = []
    visual_data: GapVisualData = GapVisualData()
