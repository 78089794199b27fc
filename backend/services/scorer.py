"""Acceptance-likelihood scorer.

Combines five independently scored components into a 0-100 score:
    skill match 0.35, experience 0.25, education 0.15, location 0.10, industry 0.15

Every component falls back to a neutral default when the profile or job
leaves the relevant fields empty; scoring never raises for missing data.
"""

import logging

from models.schemas.profile import CandidateProfile, CandidateSkill, JobRequirements, WorkHistoryEntry
from models.schemas.score import ScoreBreakdown
from services.skill_resolver import SkillResolver

logger = logging.getLogger(__name__)

WEIGHT_SKILL_MATCH = 0.35
WEIGHT_EXPERIENCE_MATCH = 0.25
WEIGHT_EDUCATION_MATCH = 0.15
WEIGHT_LOCATION_FIT = 0.10
WEIGHT_INDUSTRY_RELEVANCE = 0.15

REQUIRED_SKILL_SHARE = 0.80
PREFERRED_SKILL_SHARE = 0.20
YEARS_SHARE = 0.70
TITLE_SHARE = 0.30
FIELD_BONUS = 0.2

DEGREE_LEVEL_RANK: dict[str, int] = {
    "high_school": 1,
    "certificate": 2,
    "diploma": 3,
    "associate": 4,
    "bachelor": 5,
    "master": 6,
    "professional": 7,
    "doctorate": 8,
    "other": 0,
}

PROFICIENCY_WEIGHT: dict[str, float] = {
    "beginner": 0.5,
    "intermediate": 0.75,
    "advanced": 0.9,
    "expert": 1.0,
}
UNSPECIFIED_PROFICIENCY_WEIGHT = 0.7

# Midpoint years for jobs that give a level but no explicit range
EXPERIENCE_LEVEL_YEARS: dict[str, float] = {
    "internship": 0,
    "entry": 1,
    "mid": 3,
    "senior": 6,
    "lead": 8,
    "executive": 12,
}

_TITLE_FILLERS = frozenset({"and", "the", "of", "a", "an", "in", "at", "for", "to"})


def proficiency_weight(proficiency: str) -> float:
    return PROFICIENCY_WEIGHT.get(proficiency.strip().lower(), UNSPECIFIED_PROFICIENCY_WEIGHT)


class Scorer:
    """Deterministic multi-factor match scorer."""

    def __init__(self, resolver: SkillResolver) -> None:
        self._resolver = resolver

    def score(self, profile: CandidateProfile, job: JobRequirements) -> ScoreBreakdown:
        skill, matched, missing, matched_pref = self.score_skill_match(profile, job)
        experience = self.score_experience_match(profile, job)
        education = self.score_education_match(profile, job)
        location = self.score_location_fit(profile, job)
        industry = self.score_industry_relevance(profile, job)

        overall = (
            skill * WEIGHT_SKILL_MATCH
            + experience * WEIGHT_EXPERIENCE_MATCH
            + education * WEIGHT_EDUCATION_MATCH
            + location * WEIGHT_LOCATION_FIT
            + industry * WEIGHT_INDUSTRY_RELEVANCE
        ) * 100.0
        overall = max(0.0, min(100.0, overall))

        logger.debug(
            "Score for %r: overall=%.2f skill=%.2f exp=%.2f edu=%.2f loc=%.2f ind=%.2f",
            job.title, overall, skill, experience, education, location, industry,
        )

        return ScoreBreakdown(
            overall_score=round(overall, 2),
            skill_match_score=round(skill, 2),
            experience_match_score=round(experience, 2),
            education_match_score=round(education, 2),
            location_fit_score=round(location, 2),
            industry_relevance_score=round(industry, 2),
            matched_required_skills=matched,
            missing_required_skills=missing,
            matched_preferred_skills=matched_pref,
        )

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def skill_weights(self, skills: list[CandidateSkill]) -> dict[str, float]:
        """Comparison key -> best proficiency weight among the candidate's skills."""
        weights: dict[str, float] = {}
        for skill in skills:
            key = self._resolver.key(skill.name)
            if not key:
                continue
            w = proficiency_weight(skill.proficiency)
            if w > weights.get(key, -1.0):
                weights[key] = w
        return weights

    def lookup_skill(self, name: str, weights: dict[str, float]) -> float | None:
        """Best weight among candidate skills equivalent to `name`, or None if unmatched."""
        return max(self._resolver.matches(name, weights), default=None)

    def score_skill_match(
        self, profile: CandidateProfile, job: JobRequirements,
    ) -> tuple[float, list[str], list[str], list[str]]:
        """Return (score, matched_required, missing_required, matched_preferred)."""
        weights = self.skill_weights(profile.skills)

        matched_preferred = [p for p in job.preferred_skills if self.lookup_skill(p, weights) is not None]

        if not job.required_skills:
            return 1.0, [], [], matched_preferred

        matched: list[str] = []
        missing: list[str] = []
        weighted_sum = 0.0
        for req in job.required_skills:
            w = self.lookup_skill(req, weights)
            if w is None:
                missing.append(req)
            else:
                weighted_sum += w
                matched.append(req)

        required_score = weighted_sum / len(job.required_skills)
        preferred_bonus = 0.0
        if job.preferred_skills:
            preferred_bonus = len(matched_preferred) / len(job.preferred_skills)

        score = required_score * REQUIRED_SKILL_SHARE + preferred_bonus * PREFERRED_SKILL_SHARE
        return min(1.0, score), matched, missing, matched_preferred

    # ------------------------------------------------------------------
    # Experience
    # ------------------------------------------------------------------

    def score_experience_match(self, profile: CandidateProfile, job: JobRequirements) -> float:
        target = job.min_years_experience
        if target == 0 and job.experience_level:
            target = EXPERIENCE_LEVEL_YEARS.get(job.experience_level.strip().lower(), 0)

        years = candidate_years(profile)
        years_score = _years_score(years, target, job.max_years_experience)
        title_score = _title_similarity(profile.work_history, job.title)
        return min(1.0, years_score * YEARS_SHARE + title_score * TITLE_SHARE)

    # ------------------------------------------------------------------
    # Education
    # ------------------------------------------------------------------

    def score_education_match(self, profile: CandidateProfile, job: JobRequirements) -> float:
        if not job.required_degree_level:
            return 1.0
        required_rank = DEGREE_LEVEL_RANK.get(job.required_degree_level.strip().lower(), 0)
        if required_rank == 0:
            # Unknown requirement, don't penalise
            return 1.0

        highest_rank = 0
        highest_field = ""
        for edu in profile.education:
            rank = DEGREE_LEVEL_RANK.get(edu.degree_level.strip().lower(), 0)
            if rank > highest_rank:
                highest_rank = rank
                highest_field = edu.field_of_study

        if highest_rank == 0:
            degree_score = 0.3
        elif highest_rank >= required_rank:
            degree_score = 1.0
        elif highest_rank == required_rank - 1:
            degree_score = 0.6
        else:
            degree_score = 0.2

        bonus = _field_bonus(highest_field, job.preferred_fields)
        return min(1.0, degree_score + bonus * FIELD_BONUS)

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    def score_location_fit(self, profile: CandidateProfile, job: JobRequirements) -> float:
        job_type = job.location_type.strip().lower()
        pref = profile.remote_preference.strip().lower()

        if job_type == "remote":
            return 1.0 if pref in ("remote", "any", "") else 0.7
        if job_type == "hybrid":
            if pref in ("hybrid", "any", ""):
                return 1.0
            return 0.6 if pref == "remote" else 0.8
        return _geo_score(profile, job)

    # ------------------------------------------------------------------
    # Industry
    # ------------------------------------------------------------------

    def score_industry_relevance(self, profile: CandidateProfile, job: JobRequirements) -> float:
        if not job.industry:
            return 1.0

        target = job.industry.strip().lower()
        related = {target} | {r.strip().lower() for r in job.related_industries}

        related_match = False
        for entry in profile.work_history:
            if not entry.industry:
                continue
            industry = entry.industry.strip().lower()
            if industry == target:
                return 1.0
            if industry in related:
                related_match = True

        if related_match:
            return 0.7
        if not profile.work_history:
            return 0.5
        return 0.2


def candidate_years(profile: CandidateProfile) -> float:
    """Explicit years of experience, else the work history total in years."""
    if profile.years_of_experience > 0:
        return profile.years_of_experience
    months = sum(entry.duration_months for entry in profile.work_history)
    return months / 12.0


def _years_score(years: float, target_min: float, target_max: float) -> float:
    if target_min <= 0:
        return 1.0
    if years >= target_min:
        if target_max > 0 and years > target_max * 2:
            return 0.8
        return 1.0
    # Linear decay, floored so near-misses are not zeroed out
    return max(0.1, years / target_min)


def _title_words(title: str) -> set[str]:
    return {w for w in title.strip().lower().split() if w not in _TITLE_FILLERS}


def _title_similarity(history: list[WorkHistoryEntry], target_title: str) -> float:
    if not target_title or not history:
        return 0.5

    target = _title_words(target_title)
    best = 0.0
    for entry in history:
        words = _title_words(entry.title)
        if not target or not words:
            continue
        sim = len(target & words) / len(target | words)
        best = max(best, sim)
    return best


def _field_bonus(field: str, preferred: list[str]) -> float:
    field = field.strip().lower()
    if not field or not preferred:
        return 0.0
    for pf in preferred:
        pf = pf.strip().lower()
        if pf and (pf in field or field in pf):
            return 1.0
    return 0.0


def _geo_score(profile: CandidateProfile, job: JobRequirements) -> float:
    if profile.location_city and job.location_city:
        if profile.location_city.strip().lower() == job.location_city.strip().lower():
            return 1.0
    if profile.location_country and job.location_country:
        if profile.location_country.strip().lower() == job.location_country.strip().lower():
            return 0.8
    if profile.willing_to_relocate:
        return 0.6
    return 0.2
