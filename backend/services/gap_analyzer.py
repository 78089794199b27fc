"""Skill gap analysis.

Compares a candidate profile with a job's required and preferred skills
and produces prioritized gaps plus an overall readiness score.

    critical      - required skill missing, or held below the target level
    important     - preferred skill missing, or held below the target level
    nice_to_have  - taxonomy neighbours of matched required skills (opt-in)

Per gap:
    hours    = base_hours * (effort[target] - effort[current]) * (1 - 0.4 * transferability)
    priority = importance * 0.5 + versatility * 0.3 + ease * 0.2
    ease     = 1 - min(1, hours / 500)

readiness = 100 - sum(critical priority) * 20 - sum(important priority) * 8, clamped to [0, 100]
"""

import logging

from models.schemas.gaps import (
    CategorySummary,
    GapAnalysisResult,
    GapRecommendation,
    GapVisualData,
    RadarChartData,
    SkillGap,
    TimelineEntry,
)
from models.schemas.profile import CandidateProfile, CandidateSkill, JobRequirements
from services.scorer import DEGREE_LEVEL_RANK, candidate_years
from services.skill_metadata import SkillMetadata, SkillMetadataTable
from services.skill_resolver import SkillResolver

logger = logging.getLogger(__name__)

CRITICAL = "critical"
IMPORTANT = "important"
NICE_TO_HAVE = "nice_to_have"

IMPORTANCE: dict[str, float] = {CRITICAL: 1.0, IMPORTANT: 0.6, NICE_TO_HAVE: 0.3}

WEIGHT_IMPORTANCE = 0.50
WEIGHT_VERSATILITY = 0.30
WEIGHT_EASE = 0.20
MAX_HOURS_FOR_EASE = 500.0

CRITICAL_READINESS_PENALTY = 20.0
IMPORTANT_READINESS_PENALTY = 8.0

MAX_TOP_PRIORITY_GAPS = 5
DEFAULT_MAX_RELATED_SKILLS = 5

PROFICIENCY_RANK: dict[str, int] = {"beginner": 1, "intermediate": 2, "advanced": 3, "expert": 4}

# Relative effort to reach each level from zero
LEVEL_EFFORT: dict[str, float] = {
    "": 0.0,
    "beginner": 0.5,
    "intermediate": 1.0,
    "advanced": 1.6,
    "expert": 2.2,
}

EXPERIENCE_LEVEL_TARGET: dict[str, str] = {
    "internship": "beginner",
    "entry": "beginner",
    "mid": "intermediate",
    "senior": "advanced",
    "lead": "advanced",
    "executive": "expert",
}
DEFAULT_TARGET_LEVEL = "intermediate"

TRANSFER_REDUCTION = 0.40
RELATED_SKILLS_FOR_FULL_TRANSFER = 3
RELATED_SIMILARITY = 0.65

SIM_EQUAL = 1.0
SIM_EQUIVALENT = 0.95
SIM_RELATED = 0.70
SIM_REVERSE_RELATED = 0.65
SIM_SAME_DIFFICULTY = 0.25
LEVERAGE_SIMILARITY = 0.5
CERTIFICATION_VERSATILITY = 0.85

RADAR_LABELS = ["Required Skills", "Preferred Skills", "Experience", "Education"]


def target_level_for(experience_level: str) -> str:
    return EXPERIENCE_LEVEL_TARGET.get(experience_level.strip().lower(), DEFAULT_TARGET_LEVEL)


def _rank(proficiency: str) -> int:
    return PROFICIENCY_RANK.get(proficiency.strip().lower(), 0)


def _token_overlap(a: str, b: str) -> float:
    tokens_a, tokens_b = set(a.split()), set(b.split())
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


class GapAnalyzer:
    """Turns a profile/job comparison into prioritized, actionable skill gaps."""

    def __init__(
        self,
        resolver: SkillResolver,
        metadata: SkillMetadataTable | None = None,
        include_related: bool = False,
        max_related: int = DEFAULT_MAX_RELATED_SKILLS,
    ) -> None:
        self._resolver = resolver
        self._metadata = metadata or SkillMetadataTable(resolver)
        self._include_related = include_related
        self._max_related = max_related

    def analyze(self, profile: CandidateProfile, job: JobRequirements) -> GapAnalysisResult:
        target = target_level_for(job.experience_level)
        held = self._held_skills(profile.skills)

        seen: set[str] = set()
        matched: list[str] = []
        matched_required_keys: list[str] = []
        critical = self._identify_gaps(job.required_skills, CRITICAL, target, held, profile.skills, seen, matched, matched_required_keys)
        important = self._identify_gaps(job.preferred_skills, IMPORTANT, target, held, profile.skills, seen, matched, [])

        nice: list[SkillGap] = []
        if self._include_related:
            nice = self._related_gaps(matched_required_keys, target, held, profile.skills, seen)

        for gaps in (critical, important, nice):
            gaps.sort(key=lambda g: g.priority_score, reverse=True)

        all_gaps = sorted(critical + important + nice, key=lambda g: g.priority_score, reverse=True)
        readiness = _readiness(critical, important)

        logger.info(
            "Gap analysis for %r: %d critical, %d important, %d nice-to-have, readiness %.2f",
            job.title, len(critical), len(important), len(nice), readiness,
        )

        return GapAnalysisResult(
            critical_gaps=critical,
            important_gaps=important,
            nice_to_have_gaps=nice,
            matched_skills=matched,
            readiness_score=readiness,
            total_gaps=len(all_gaps),
            critical_gap_count=len(critical),
            important_gap_count=len(important),
            nice_to_have_gap_count=len(nice),
            total_estimated_learning_hours=sum(g.estimated_learning_hours for g in all_gaps),
            top_priority_gaps=all_gaps[:MAX_TOP_PRIORITY_GAPS],
            visual_data=self._visual_data(critical, important, nice, profile, job),
        )

    # ------------------------------------------------------------------
    # Gap identification
    # ------------------------------------------------------------------

    def _held_skills(self, skills: list[CandidateSkill]) -> dict[str, CandidateSkill]:
        """Comparison key -> candidate skill, keeping the highest proficiency."""
        held: dict[str, CandidateSkill] = {}
        for skill in skills:
            key = self._resolver.key(skill.name)
            if not key:
                continue
            existing = held.get(key)
            if existing is None or _rank(skill.proficiency) > _rank(existing.proficiency):
                held[key] = skill
        return held

    def _find_held(self, name: str, held: dict[str, CandidateSkill]) -> CandidateSkill | None:
        """Best-proficiency candidate skill equivalent to `name`."""
        found = self._resolver.matches(name, held)
        return max(found, key=lambda s: _rank(s.proficiency), default=None)

    def _identify_gaps(
        self,
        names: list[str],
        category: str,
        target: str,
        held: dict[str, CandidateSkill],
        candidate_skills: list[CandidateSkill],
        seen: set[str],
        matched: list[str],
        matched_keys: list[str],
    ) -> list[SkillGap]:
        gaps: list[SkillGap] = []
        for name in names:
            key = self._resolver.key(name)
            if not key or key in seen:
                continue
            seen.add(key)

            current = ""
            skill = self._find_held(name, held)
            if skill is not None:
                proficiency = skill.proficiency.strip().lower()
                # Unspecified proficiency counts as meeting the target
                if _rank(proficiency) == 0 or _rank(proficiency) >= _rank(target):
                    matched.append(name)
                    matched_keys.append(key)
                    continue
                current = proficiency

            gaps.append(self._build_gap(name, category, target, current, candidate_skills))
        return gaps

    def _related_gaps(
        self,
        matched_keys: list[str],
        target: str,
        held: dict[str, CandidateSkill],
        candidate_skills: list[CandidateSkill],
        seen: set[str],
    ) -> list[SkillGap]:
        taxonomy = self._resolver.taxonomy
        gaps: list[SkillGap] = []
        for key in matched_keys:
            node = taxonomy.lookup(key)
            if node is None:
                continue
            for related_id in node.related_skills:
                if len(gaps) >= self._max_related:
                    return gaps
                related = taxonomy.lookup(related_id)
                if related is None or related.id in seen:
                    continue
                seen.add(related.id)
                if self._find_held(related.id, held) is not None:
                    continue
                gaps.append(self._build_gap(related.canonical_name, NICE_TO_HAVE, target, "", candidate_skills))
        return gaps

    def _build_gap(
        self,
        name: str,
        category: str,
        target: str,
        current: str,
        candidate_skills: list[CandidateSkill],
    ) -> SkillGap:
        meta = self._metadata.get(name)
        closest, similarity, related_held = self._closest_skill(name, meta, candidate_skills)
        transferability = min(1.0, related_held / RELATED_SKILLS_FOR_FULL_TRANSFER)
        hours = _learning_hours(meta.base_hours, current, target, transferability)
        importance = IMPORTANCE[category]

        return SkillGap(
            skill_name=name,
            category=category,
            priority_score=_priority(importance, meta.versatility, hours),
            importance_score=importance,
            estimated_learning_hours=hours,
            transferability_score=round(transferability, 4),
            current_level=current,
            target_level=target,
            semantic_similarity_score=round(similarity, 4),
            closest_existing_skill=closest,
            difficulty=meta.difficulty,
            recommendations=_recommendations(name, meta, similarity),
        )

    # ------------------------------------------------------------------
    # Similarity
    # ------------------------------------------------------------------

    def _related_keys(self, skill: str, meta: SkillMetadata) -> set[str]:
        names = list(meta.related_skills)
        node = self._resolver.taxonomy.lookup(self._resolver.key(skill))
        if node is not None:
            names.extend(node.related_skills)
            names.extend(node.prerequisites)
        return {self._resolver.key(n) for n in names}

    def similarity(self, gap_skill: str, candidate_skill: str, gap_meta: SkillMetadata | None = None) -> float:
        gap_key = self._resolver.key(gap_skill)
        cand_key = self._resolver.key(candidate_skill)
        if gap_key == cand_key:
            return SIM_EQUAL
        if self._resolver.equivalent(gap_key, cand_key):
            return SIM_EQUIVALENT

        gap_meta = gap_meta or self._metadata.get(gap_skill)
        if cand_key in self._related_keys(gap_skill, gap_meta):
            return SIM_RELATED

        cand_meta = self._metadata.get(candidate_skill)
        if gap_key in self._related_keys(candidate_skill, cand_meta):
            return SIM_REVERSE_RELATED

        if gap_meta.difficulty == cand_meta.difficulty and gap_meta.versatility > 0.8:
            return SIM_SAME_DIFFICULTY

        return _token_overlap(gap_skill.strip().lower(), candidate_skill.strip().lower()) * 0.5

    def _closest_skill(
        self, name: str, meta: SkillMetadata, candidate_skills: list[CandidateSkill],
    ) -> tuple[str, float, int]:
        """Return (closest skill name, its similarity, count of related skills held)."""
        best_name, best_score = "", 0.0
        related_held = 0
        for skill in candidate_skills:
            sim = self.similarity(name, skill.name, meta)
            if sim > best_score:
                best_name, best_score = skill.name, sim
            # The skill itself is reflected in current_level, not transferability
            if RELATED_SIMILARITY <= sim < SIM_EQUIVALENT:
                related_held += 1
        return best_name, best_score, related_held

    # ------------------------------------------------------------------
    # Visual data
    # ------------------------------------------------------------------

    def _visual_data(
        self,
        critical: list[SkillGap],
        important: list[SkillGap],
        nice: list[SkillGap],
        profile: CandidateProfile,
        job: JobRequirements,
    ) -> GapVisualData:
        return GapVisualData(
            radar_chart=_radar_chart(critical, important, profile, job),
            gaps_by_category=[
                _category_summary(CRITICAL, critical),
                _category_summary(IMPORTANT, important),
                _category_summary(NICE_TO_HAVE, nice),
            ],
            learning_timeline=_learning_timeline(critical + important + nice),
        )


def _learning_hours(base_hours: int, current: str, target: str, transferability: float) -> int:
    effort = LEVEL_EFFORT.get(target, 1.0) - LEVEL_EFFORT.get(current, 0.0)
    hours = base_hours * max(0.0, effort) * (1.0 - TRANSFER_REDUCTION * transferability)
    return max(1, round(hours))


def _priority(importance: float, versatility: float, hours: int) -> float:
    ease = 1.0 - min(1.0, hours / MAX_HOURS_FOR_EASE)
    score = importance * WEIGHT_IMPORTANCE + versatility * WEIGHT_VERSATILITY + ease * WEIGHT_EASE
    return round(min(1.0, max(0.0, score)), 4)


def _readiness(critical: list[SkillGap], important: list[SkillGap]) -> float:
    score = 100.0
    score -= sum(g.priority_score for g in critical) * CRITICAL_READINESS_PENALTY
    score -= sum(g.priority_score for g in important) * IMPORTANT_READINESS_PENALTY
    return round(max(0.0, min(100.0, score)), 2)


def _recommendations(skill: str, meta: SkillMetadata, similarity: float) -> list[GapRecommendation]:
    base = meta.base_hours
    recs: list[GapRecommendation] = []

    if similarity >= LEVERAGE_SIMILARITY:
        recs.append(GapRecommendation(
            title="Leverage your existing related skills",
            description=f"You already have related knowledge. Focus on the differences and new concepts specific to {skill}.",
            resource_type="documentation",
            estimated_hours=max(1, int(base * 0.15)),
        ))

    if meta.difficulty == "beginner":
        recs.append(GapRecommendation(
            title=f"Complete an introductory course on {skill}",
            description="Start with a structured beginner course to build foundational knowledge. "
                        "Platforms like Coursera, Udemy, or official documentation are excellent starting points.",
            resource_type="course",
            estimated_hours=max(1, int(base * 0.40)),
        ))
    elif meta.difficulty in ("advanced", "expert"):
        recs.append(GapRecommendation(
            title=f"Study {skill} through official documentation and advanced resources",
            description="This is an advanced skill. Start with official documentation, then progress to "
                        "advanced courses or books. Consider mentorship from an expert.",
            resource_type="documentation",
            estimated_hours=max(1, int(base * 0.30)),
        ))
    else:
        recs.append(GapRecommendation(
            title=f"Take an intermediate-level course on {skill}",
            description="Enroll in a structured course covering core concepts and practical applications. "
                        "Look for project-based courses that include hands-on exercises.",
            resource_type="course",
            estimated_hours=max(1, int(base * 0.40)),
        ))

    recs.append(GapRecommendation(
        title=f"Build a hands-on project using {skill}",
        description="Apply your learning by building a real project. This solidifies understanding "
                    "and creates portfolio evidence of your skills.",
        resource_type="project",
        estimated_hours=max(1, int(base * 0.35)),
    ))

    if meta.versatility >= CERTIFICATION_VERSATILITY:
        recs.append(GapRecommendation(
            title=f"Obtain a recognized certification in {skill}",
            description="A certification validates your skills to employers and demonstrates commitment. "
                        "Look for industry-recognized certifications.",
            resource_type="certification",
            estimated_hours=max(1, int(base * 0.25)),
        ))

    for i, rec in enumerate(recs, start=1):
        rec.priority = i
    return recs


def _coverage(total: int, missing: int) -> float:
    if total <= 0:
        return 1.0
    return max(0.0, (total - missing) / total)


def _radar_chart(
    critical: list[SkillGap],
    important: list[SkillGap],
    profile: CandidateProfile,
    job: JobRequirements,
) -> RadarChartData:
    experience = 1.0
    if job.min_years_experience > 0:
        experience = min(1.0, candidate_years(profile) / job.min_years_experience)

    education = 1.0
    if DEGREE_LEVEL_RANK.get(job.required_degree_level.strip().lower(), 0) > 0 and not profile.education:
        education = 0.3

    return RadarChartData(
        labels=list(RADAR_LABELS),
        candidate_scores=[
            round(_coverage(len(job.required_skills), len(critical)), 2),
            round(_coverage(len(job.preferred_skills), len(important)), 2),
            round(experience, 2),
            round(education, 2),
        ],
        required_scores=[1.0] * len(RADAR_LABELS),
    )


def _category_summary(category: str, gaps: list[SkillGap]) -> CategorySummary:
    average = sum(g.priority_score for g in gaps) / len(gaps) if gaps else 0.0
    return CategorySummary(
        category=category,
        gap_count=len(gaps),
        total_learning_hours=sum(g.estimated_learning_hours for g in gaps),
        average_priority=round(average, 4),
    )


def _timeline_rationale(gap: SkillGap, position: int) -> str:
    if gap.category == CRITICAL:
        if position == 0:
            return "Highest priority: this is a must-have skill for the role with the highest impact on job acceptance."
        return "Critical skill required for the role. Address this before applying."
    if gap.semantic_similarity_score >= LEVERAGE_SIMILARITY:
        return "You have related skills that will accelerate learning this skill."
    if gap.category == IMPORTANT:
        return "Preferred skill that will strengthen your application once critical gaps are addressed."
    return "Related skill that rounds out your profile for this role."


def _learning_timeline(ordered: list[SkillGap]) -> list[TimelineEntry]:
    entries: list[TimelineEntry] = []
    cumulative = 0
    for i, gap in enumerate(ordered):
        cumulative += gap.estimated_learning_hours
        entries.append(TimelineEntry(
            order=i + 1,
            skill_name=gap.skill_name,
            category=gap.category,
            estimated_hours=gap.estimated_learning_hours,
            cumulative_hours=cumulative,
            rationale=_timeline_rationale(gap, i),
        ))
    return entries
