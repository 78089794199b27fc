"""Learning plan generation.

Runs gap analysis, picks and ranks catalog resources for every gap, groups
the gaps into phases (critical, preferred, nice-to-have) and synthesizes a
weekly timeline and summary.

Resource relevance (0-1):
    skill match 0.30 + difficulty fit 0.20 + quality 0.20
    + preference alignment 0.20 + popularity 0.10
"""

import logging
import math
from datetime import date

from models.schemas.gaps import GapAnalysisResult, SkillGap
from models.schemas.learning_plan import (
    LearningPhase,
    LearningPlan,
    LearningPlanSummary,
    RecommendedResource,
    SkillRecommendation,
)
from models.schemas.profile import CandidateProfile, JobRequirements
from models.schemas.resources import ResourceEntry, UserPreferences
from services.catalog import ResourceCatalog
from services.gap_analyzer import CRITICAL, IMPORTANT, NICE_TO_HAVE, GapAnalyzer
from services.recommendation.timeline import DEFAULT_WEEKLY_HOURS, build_timeline

logger = logging.getLogger(__name__)

WEIGHT_SKILL = 0.30
WEIGHT_DIFFICULTY = 0.20
WEIGHT_QUALITY = 0.20
WEIGHT_PREFERENCE = 0.20
WEIGHT_POPULARITY = 0.10

MAX_ALTERNATIVES = 2
MAX_TOP_SKILLS = 3
QUICK_WIN_HOURS = 20
HIGH_RATING = 4.7

LEVEL_RANK: dict[str, int] = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
    "expert": 4,
    "all_levels": 2,
}

# Share of a resource's stated duration still needed at the current level
COMPLETION_FACTOR: dict[str, float] = {
    "beginner": 0.70,
    "intermediate": 0.40,
    "advanced": 0.15,
}

PHASES: list[tuple[int, str, str, str]] = [
    (1, "Critical Skills", CRITICAL,
     "Master the must-have skills required for this role. These are non-negotiable for job acceptance."),
    (2, "Preferred Skills", IMPORTANT,
     "Strengthen your profile with preferred skills that significantly improve your candidacy."),
    (3, "Nice-to-Have Skills", NICE_TO_HAVE,
     "Optional skills that differentiate you from other candidates and expand your career options."),
]


def _plural(n: int) -> str:
    return "" if n == 1 else "s"


def difficulty_fit(resource_difficulty: str, target_level: str, current_level: str) -> float:
    difficulty = resource_difficulty.strip().lower()
    if difficulty == "all_levels":
        return 0.9

    target = LEVEL_RANK.get(target_level.strip().lower(), 0) or 2
    current = LEVEL_RANK.get(current_level.strip().lower(), 0) or max(1, target - 1)
    rank = LEVEL_RANK.get(difficulty, 0) or 2

    if current <= rank <= target:
        return 1.0
    if abs(rank - target) == 1:
        return 0.7
    return 0.4


def preference_alignment(resource: ResourceEntry, prefs: UserPreferences) -> float:
    score = 0.5
    if prefs.prefer_free and resource.is_free:
        score += 0.3
    if prefs.prefer_hands_on and resource.has_hands_on:
        score += 0.1
    if prefs.prefer_certificates and resource.has_certificate:
        score += 0.1
    return min(1.0, score)


def quality_score(resource: ResourceEntry) -> float:
    score = resource.rating / 5.0 if resource.rating > 0 else 0.5
    if resource.is_verified:
        score += 0.1
    return min(1.0, score)


def popularity_score(resource: ResourceEntry) -> float:
    if resource.rating_count <= 0:
        return 0.0
    # 10M ratings -> 1.0
    return min(1.0, math.log10(resource.rating_count) / 7.0)


def completion_hours(resource: ResourceEntry, gap: SkillGap) -> float:
    if resource.duration_hours <= 0:
        return float(gap.estimated_learning_hours)
    hours = resource.duration_hours * COMPLETION_FACTOR.get(gap.current_level.strip().lower(), 1.0)
    return max(1.0, round(hours, 1))


class RecommendationEngine:
    """Builds a phased, time-boxed learning plan for a profile/job pair."""

    def __init__(
        self,
        gap_analyzer: GapAnalyzer,
        catalog: ResourceCatalog,
        default_weekly_hours: float = DEFAULT_WEEKLY_HOURS,
    ) -> None:
        self._gap_analyzer = gap_analyzer
        self._catalog = catalog
        self._default_weekly_hours = default_weekly_hours

    def generate(
        self,
        profile: CandidateProfile,
        job: JobRequirements,
        prefs: UserPreferences | None = None,
        today: date | None = None,
    ) -> LearningPlan:
        prefs = prefs or UserPreferences()
        weekly_hours = prefs.weekly_hours_available
        if weekly_hours <= 0:
            weekly_hours = self._default_weekly_hours

        gaps = self._gap_analyzer.analyze(profile, job)
        by_category = {
            CRITICAL: gaps.critical_gaps,
            IMPORTANT: gaps.important_gaps,
            NICE_TO_HAVE: gaps.nice_to_have_gaps,
        }

        phases: list[LearningPhase] = []
        for number, name, category, description in PHASES:
            recs = [self.recommend(gap, prefs) for gap in by_category[category]]
            if recs:
                phases.append(_build_phase(number, name, description, recs, weekly_hours))

        timeline = build_timeline(phases, weekly_hours, prefs.target_date, today=today)
        total_hours = round(sum(p.total_hours for p in phases), 2)

        logger.info(
            "Learning plan for %r: %d phases, %d weeks, %.1f hours",
            job.title, len(phases), timeline.total_weeks, total_hours,
        )

        return LearningPlan(
            job_title=job.title,
            readiness_score=gaps.readiness_score,
            total_gaps=gaps.total_gaps,
            total_estimated_hours=total_hours,
            phases=phases,
            timeline=timeline,
            matched_skills=gaps.matched_skills,
            summary=_build_summary(gaps, phases, job.title),
        )

    # ------------------------------------------------------------------
    # Resource selection
    # ------------------------------------------------------------------

    def relevance(self, resource: ResourceEntry, gap: SkillGap, prefs: UserPreferences) -> float:
        skill = 1.0 if self._catalog.is_primary(resource, gap.skill_name) else 0.5
        score = (
            skill * WEIGHT_SKILL
            + difficulty_fit(resource.difficulty, gap.target_level, gap.current_level) * WEIGHT_DIFFICULTY
            + quality_score(resource) * WEIGHT_QUALITY
            + preference_alignment(resource, prefs) * WEIGHT_PREFERENCE
            + popularity_score(resource) * WEIGHT_POPULARITY
        )
        return round(score, 4)

    def rank(self, gap: SkillGap, prefs: UserPreferences) -> list[RecommendedResource]:
        """Matching resources, most relevant first; ties keep catalog order."""
        scored = [
            RecommendedResource(
                resource=resource,
                relevance_score=self.relevance(resource, gap, prefs),
                estimated_completion_hours=completion_hours(resource, gap),
            )
            for resource in self._catalog.find(gap.skill_name, prefs)
        ]
        scored.sort(key=lambda r: r.relevance_score, reverse=True)
        return scored

    def recommend(self, gap: SkillGap, prefs: UserPreferences) -> SkillRecommendation:
        ranked = self.rank(gap, prefs)

        primary = None
        alternatives: list[RecommendedResource] = []
        if ranked:
            primary = ranked[0].model_copy(update={
                "recommendation_reason": self._reason(ranked[0].resource, gap, prefs),
            })
            for candidate in ranked[1:]:
                if len(alternatives) >= MAX_ALTERNATIVES:
                    break
                res = candidate.resource
                if res.resource_type != primary.resource.resource_type or res.provider != primary.resource.provider:
                    alternatives.append(candidate.model_copy(update={
                        "is_alternative": True,
                        "recommendation_reason": self._reason(res, gap, prefs),
                    }))

        return SkillRecommendation(
            skill_name=gap.skill_name,
            gap_category=gap.category,
            priority_score=gap.priority_score,
            primary_resource=primary,
            alternative_resources=alternatives,
            estimated_hours_to_job_ready=gap.estimated_learning_hours,
            current_level=gap.current_level,
            target_level=gap.target_level,
        )

    def _reason(self, resource: ResourceEntry, gap: SkillGap, prefs: UserPreferences) -> str:
        reasons: list[str] = []
        if self._catalog.is_primary(resource, gap.skill_name):
            reasons.append(f"directly covers {gap.skill_name}")
        if resource.rating >= HIGH_RATING:
            reasons.append(f"highly rated ({resource.rating:.1f}/5)")
        if resource.is_free:
            reasons.append("free to access")
        if prefs.prefer_certificates and resource.has_certificate:
            reasons.append("includes certificate")
        if prefs.prefer_hands_on and resource.has_hands_on:
            reasons.append("hands-on learning")
        if resource.is_verified:
            reasons.append("curated resource")

        if not reasons:
            return "Recommended based on skill coverage and quality."
        return f"Recommended because it {', '.join(reasons)}."


def _build_phase(
    number: int,
    name: str,
    description: str,
    recs: list[SkillRecommendation],
    weekly_hours: float,
) -> LearningPhase:
    total = float(sum(r.estimated_hours_to_job_ready for r in recs))
    return LearningPhase(
        phase_number=number,
        phase_name=name,
        phase_description=description,
        skills=recs,
        total_hours=round(total, 2),
        estimated_weeks=round(total / weekly_hours, 1),
        milestone=_milestone(number, recs),
    )


def _milestone(number: int, recs: list[SkillRecommendation]) -> str:
    if not recs:
        return ""
    names = [r.skill_name for r in recs]
    if number == 1:
        if len(names) == 1:
            return f"✅ Job-ready in {names[0]} – ready to apply for the role"
        return f"✅ Job-ready in {', '.join(names[:3])} – cleared all critical requirements"
    if number == 2:
        return f"⭐ Strong candidate – proficient in {len(recs)} preferred skills"
    return f"🚀 Standout candidate – mastered {len(recs)} additional skills"


def _build_summary(gaps: GapAnalysisResult, phases: list[LearningPhase], job_title: str) -> LearningPlanSummary:
    free = paid = 0
    cost = 0.0
    top: list[str] = []
    quick_wins: list[str] = []

    for phase in phases:
        for rec in phase.skills:
            if rec.primary_resource is not None:
                resource = rec.primary_resource.resource
                if resource.is_free:
                    free += 1
                else:
                    paid += 1
                    cost += resource.cost_usd
            if len(top) < MAX_TOP_SKILLS:
                top.append(rec.skill_name)
            if rec.estimated_hours_to_job_ready <= QUICK_WIN_HOURS:
                quick_wins.append(rec.skill_name)

    return LearningPlanSummary(
        headline=_headline(gaps, phases, job_title),
        critical_gap_count=gaps.critical_gap_count,
        important_gap_count=gaps.important_gap_count,
        free_resource_count=free,
        paid_resource_count=paid,
        estimated_total_cost_usd=round(cost, 2),
        top_skills_to_learn=top,
        quick_wins=quick_wins,
    )


def _headline(gaps: GapAnalysisResult, phases: list[LearningPhase], job_title: str) -> str:
    if gaps.total_gaps == 0:
        return f"🎉 You're ready to apply for {job_title}!"

    weeks = sum(p.estimated_weeks for p in phases)
    if gaps.critical_gap_count == 0:
        return (
            f"✨ Strong candidate for {job_title} – {gaps.important_gap_count} preferred "
            f"skill{_plural(gaps.important_gap_count)} to strengthen in {weeks:.0f} weeks"
        )
    return (
        f"📚 {gaps.critical_gap_count} critical gap{_plural(gaps.critical_gap_count)} "
        f"to close for {job_title} – estimated {weeks:.0f} weeks"
    )
