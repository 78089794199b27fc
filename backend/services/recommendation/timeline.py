"""Week-by-week study schedule built from learning phases.

Each skill's primary resource (or a self-study placeholder) is spread over
ceil(hours / weekly_hours) weeks, the last week carrying the remainder.
The final week of a critical skill is a checkpoint, and every phase with
more than one skill ends with a half-week review checkpoint.
"""

import logging
import math
from datetime import date, timedelta

from models.schemas.learning_plan import LearningPhase, LearningTimeline, RecommendedResource, WeeklySchedule

logger = logging.getLogger(__name__)

DEFAULT_WEEKLY_HOURS = 10.0
REVIEW_WEEK_FRACTION = 0.5
MAX_REVIEW_SKILLS = 3


def build_timeline(
    phases: list[LearningPhase],
    weekly_hours: float,
    target_date: str = "",
    today: date | None = None,
) -> LearningTimeline:
    if weekly_hours <= 0:
        weekly_hours = DEFAULT_WEEKLY_HOURS

    weeks: list[WeeklySchedule] = []
    cumulative = 0.0

    for phase in phases:
        for rec in phase.skills:
            if rec.primary_resource is not None:
                title = rec.primary_resource.resource.title
                hours = rec.primary_resource.estimated_completion_hours
            else:
                title = f"Self-study: {rec.skill_name}"
                hours = float(rec.estimated_hours_to_job_ready)
            if hours <= 0:
                hours = float(rec.estimated_hours_to_job_ready)

            span = max(1, math.ceil(round(hours / weekly_hours, 9)))
            for w in range(span):
                planned = min(weekly_hours, hours - w * weekly_hours)
                cumulative += planned
                checkpoint = w == span - 1 and rec.gap_category == "critical"

                weeks.append(WeeklySchedule(
                    week_number=len(weeks) + 1,
                    phase_number=phase.phase_number,
                    skill_focus=rec.skill_name,
                    resource_title=title,
                    hours_planned=round(planned, 1),
                    cumulative_hours=round(cumulative, 1),
                    activities=week_activities(rec.skill_name, title, w, span, rec.primary_resource),
                    is_checkpoint=checkpoint,
                    checkpoint_description=(
                        f"Complete {title} and verify {rec.skill_name} proficiency through practice exercises."
                        if checkpoint else ""
                    ),
                ))

        if len(phase.skills) > 1:
            review_hours = weekly_hours * REVIEW_WEEK_FRACTION
            cumulative += review_hours
            weeks.append(WeeklySchedule(
                week_number=len(weeks) + 1,
                phase_number=phase.phase_number,
                skill_focus="Phase Review",
                resource_title=f"Review & consolidate {phase.phase_name}",
                hours_planned=round(review_hours, 1),
                cumulative_hours=round(cumulative, 1),
                activities=review_activities(phase),
                is_checkpoint=True,
                checkpoint_description=phase.milestone,
            ))

    completion = target_date
    if not completion and weeks:
        completion = ((today or date.today()) + timedelta(days=7 * len(weeks))).isoformat()

    logger.debug("Timeline: %d weeks, %.1f hours at %.1f h/week", len(weeks), cumulative, weekly_hours)

    return LearningTimeline(
        total_weeks=len(weeks),
        total_hours=round(cumulative, 1),
        weekly_hours=weekly_hours,
        weeks=weeks,
        target_completion_date=completion,
    )


def week_activities(
    skill: str,
    title: str,
    week_index: int,
    total_weeks: int,
    resource: RecommendedResource | None,
) -> list[str]:
    hands_on = resource is not None and resource.resource.has_hands_on
    if week_index == 0:
        activities = [f"Start '{title}'", f"Set up development environment for {skill}"]
        if hands_on:
            activities.append("Complete introductory exercises")
    elif week_index == total_weeks - 1:
        activities = [
            f"Complete '{title}'",
            f"Build a small project using {skill}",
            "Review key concepts and take notes",
        ]
    else:
        activities = [f"Continue '{title}' (week {week_index + 1} of {total_weeks})"]
        if hands_on:
            activities.append("Complete hands-on exercises")
        activities.append(f"Practice {skill} concepts")

    if resource is not None and resource.resource.resource_type != "practice":
        activities.append(f"Supplement with LeetCode/HackerRank problems for {skill}")
    return activities


def review_activities(phase: LearningPhase) -> list[str]:
    names = [s.skill_name for s in phase.skills]
    activities = [
        f"Review all {phase.phase_name} skills covered in Phase {phase.phase_number}",
        "Build an integration project combining learned skills",
        "Update your resume/portfolio with new skills",
    ]
    if names:
        activities.append(f"Practice interview questions for: {join_skills(names, MAX_REVIEW_SKILLS)}")
    return activities


def join_skills(names: list[str], max_count: int) -> str:
    if len(names) <= max_count:
        return ", ".join(names)
    return f"{', '.join(names[:max_count])} and {len(names) - max_count} more"
