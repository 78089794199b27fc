"""Tests for the acceptance-likelihood scorer."""

import pytest

from models.schemas.profile import (
    CandidateProfile,
    CandidateSkill,
    EducationEntry,
    JobRequirements,
    WorkHistoryEntry,
)
from services.scorer import candidate_years, proficiency_weight

from conftest import profile_with


def _components(breakdown):
    return (
        breakdown.skill_match_score,
        breakdown.experience_match_score,
        breakdown.education_match_score,
        breakdown.location_fit_score,
        breakdown.industry_relevance_score,
    )


class TestBounds:
    def test_empty_inputs(self, scorer):
        result = scorer.score(CandidateProfile(), JobRequirements())
        assert 0.0 <= result.overall_score <= 100.0
        assert all(0.0 <= c <= 1.0 for c in _components(result))

    def test_perfect_candidate(self, scorer):
        profile = profile_with(
            ("Go", "expert"), ("Python", "expert"),
            years_of_experience=6,
            work_history=[WorkHistoryEntry(title="Backend Engineer", industry="fintech", duration_months=72)],
            education=[EducationEntry(degree_level="master", field_of_study="Computer Science")],
            location_city="Berlin",
            location_country="Germany",
        )
        job = JobRequirements(
            title="Backend Engineer",
            required_skills=["Go", "Python"],
            preferred_skills=["golang"],
            min_years_experience=5,
            required_degree_level="bachelor",
            preferred_fields=["computer science"],
            location_city="Berlin",
            location_type="on_site",
            industry="fintech",
        )
        result = scorer.score(profile, job)
        assert result.overall_score == 100.0
        assert all(c == 1.0 for c in _components(result))

    def test_weak_candidate(self, scorer):
        profile = profile_with(
            ("Photoshop", "beginner"),
            work_history=[WorkHistoryEntry(title="Barista", industry="hospitality", duration_months=6)],
        )
        job = JobRequirements(
            title="Staff Engineer",
            required_skills=["Go", "Rust"],
            min_years_experience=8,
            required_degree_level="doctorate",
            location_country="Japan",
            industry="fintech",
        )
        result = scorer.score(profile, job)
        assert 0.0 <= result.overall_score < 30.0
        assert all(0.0 <= c <= 1.0 for c in _components(result))


class TestSkillMatch:
    def test_no_required_skills_scores_one(self, scorer):
        job = JobRequirements(preferred_skills=["Go", "Rust"])
        score, matched, missing, matched_pref = scorer.score_skill_match(profile_with(("Go", "beginner")), job)
        assert score == 1.0
        assert matched == [] and missing == []
        assert matched_pref == ["Go"]

    def test_zero_matches_below_threshold(self, scorer):
        job = JobRequirements(required_skills=["Go", "Rust", "Kubernetes"])
        score, matched, missing, _ = scorer.score_skill_match(profile_with(("Excel", "expert")), job)
        assert score < 0.3
        assert matched == []
        assert missing == ["Go", "Rust", "Kubernetes"]

    def test_matched_and_missing_are_disjoint(self, scorer):
        profile = profile_with(("Go", "expert"), ("Python", "advanced"))
        job = JobRequirements(required_skills=["Go", "Python", "Rust"])
        _, matched, missing, _ = scorer.score_skill_match(profile, job)
        assert set(matched) == {"Go", "Python"}
        assert missing == ["Rust"]
        assert set(matched) | set(missing) == set(job.required_skills)

    @pytest.mark.parametrize("held,required", [
        ("golang", "Go"),
        ("k8s", "Kubernetes"),
        ("Postgres", "PostgreSQL"),
        ("js", "JavaScript"),
    ])
    def test_alias_equivalence(self, scorer, held, required):
        job = JobRequirements(required_skills=[required])
        _, matched, missing, _ = scorer.score_skill_match(profile_with((held, "expert")), job)
        assert matched == [required]
        assert missing == []

    @pytest.mark.parametrize("held,required", [
        ("JavaScript", "Java"),
        ("React Native", "React"),
    ])
    def test_compound_skill_satisfies_its_prefix(self, scorer, held, required):
        job = JobRequirements(required_skills=[required])
        score, matched, missing, _ = scorer.score_skill_match(profile_with((held, "expert")), job)
        assert matched == [required]
        assert missing == []
        assert score == pytest.approx(0.8)

    def test_proficiency_weighting(self, scorer):
        job = JobRequirements(required_skills=["Go"])
        expert, *_ = scorer.score_skill_match(profile_with(("Go", "expert")), job)
        beginner, *_ = scorer.score_skill_match(profile_with(("Go", "beginner")), job)
        unspecified, *_ = scorer.score_skill_match(profile_with(("Go", "")), job)
        assert expert == pytest.approx(0.8)
        assert beginner == pytest.approx(0.4)
        assert unspecified == pytest.approx(0.56)

    def test_preferred_bonus(self, scorer):
        job = JobRequirements(required_skills=["Go"], preferred_skills=["Docker", "Kubernetes"])
        profile = profile_with(("Go", "expert"), ("Docker", "beginner"))
        score, _, _, matched_pref = scorer.score_skill_match(profile, job)
        assert matched_pref == ["Docker"]
        assert score == pytest.approx(0.8 + 0.1)

    def test_duplicate_skills_keep_best_weight(self, scorer):
        job = JobRequirements(required_skills=["Go"])
        profile = profile_with(("Go", "expert"), ("golang", "beginner"))
        score, *_ = scorer.score_skill_match(profile, job)
        assert score == pytest.approx(0.8)

    def test_gaining_a_required_skill_never_lowers_score(self, scorer):
        job = JobRequirements(
            required_skills=["Go", "Python", "Docker", "Kubernetes"],
            preferred_skills=["Terraform"],
        )
        held: list[tuple[str, str]] = []
        previous, *_ = scorer.score_skill_match(profile_with(*held), job)
        for name, level in [("Docker", "beginner"), ("Go", "expert"), ("Python", ""), ("k8s", "intermediate")]:
            held.append((name, level))
            current, *_ = scorer.score_skill_match(profile_with(*held), job)
            assert current >= previous
            previous = current

    def test_adding_held_skill_to_requirements(self, scorer):
        profile = profile_with(("Go", "advanced"), ("Python", "advanced"), ("Docker", "advanced"))
        required: list[str] = []
        previous = 0.0
        for name in ("Go", "Python", "Docker"):
            required.append(name)
            current, *_ = scorer.score_skill_match(profile, JobRequirements(required_skills=list(required)))
            assert current >= previous
            previous = current


class TestExperienceMatch:
    def test_no_target_and_no_history(self, scorer):
        assert scorer.score_experience_match(CandidateProfile(), JobRequirements()) == pytest.approx(0.85)

    def test_years_inferred_from_history(self):
        profile = CandidateProfile(work_history=[
            WorkHistoryEntry(title="Engineer", duration_months=18),
            WorkHistoryEntry(title="Engineer", duration_months=30),
        ])
        assert candidate_years(profile) == 4.0

    def test_explicit_years_win(self):
        profile = CandidateProfile(
            years_of_experience=2,
            work_history=[WorkHistoryEntry(duration_months=120)],
        )
        assert candidate_years(profile) == 2

    def test_level_sets_target(self, scorer):
        job = JobRequirements(experience_level="senior")
        junior = scorer.score_experience_match(CandidateProfile(years_of_experience=3), job)
        senior = scorer.score_experience_match(CandidateProfile(years_of_experience=6), job)
        assert junior == pytest.approx(0.5 * 0.7 + 0.5 * 0.3)
        assert senior == pytest.approx(0.85)

    def test_floor_for_no_experience(self, scorer):
        job = JobRequirements(min_years_experience=5)
        score = scorer.score_experience_match(CandidateProfile(), job)
        assert score == pytest.approx(0.1 * 0.7 + 0.5 * 0.3)

    def test_overqualified_penalty(self, scorer):
        job = JobRequirements(min_years_experience=2, max_years_experience=4)
        score = scorer.score_experience_match(CandidateProfile(years_of_experience=9), job)
        assert score == pytest.approx(0.8 * 0.7 + 0.5 * 0.3)

    def test_title_similarity(self, scorer):
        job = JobRequirements(title="Senior Backend Engineer")
        profile = CandidateProfile(work_history=[
            WorkHistoryEntry(title="Backend Engineer", duration_months=24),
            WorkHistoryEntry(title="Barista", duration_months=12),
        ])
        assert scorer.score_experience_match(profile, job) == pytest.approx(0.7 + (2 / 3) * 0.3)

    def test_more_years_never_lowers_score(self, scorer):
        job = JobRequirements(title="Data Engineer", min_years_experience=5)
        previous = 0.0
        for years in (0, 1, 2.5, 4, 5, 7, 12, 30):
            profile = CandidateProfile(
                years_of_experience=years,
                work_history=[WorkHistoryEntry(title="Data Engineer", duration_months=12)],
            )
            current = scorer.score_experience_match(profile, job)
            assert current >= previous
            previous = current


class TestEducationMatch:
    def _score(self, scorer, level, required, field="", preferred=None):
        profile = CandidateProfile(
            education=[EducationEntry(degree_level=level, field_of_study=field)] if level else [],
        )
        job = JobRequirements(required_degree_level=required, preferred_fields=preferred or [])
        return scorer.score_education_match(profile, job)

    def test_no_requirement(self, scorer):
        assert self._score(scorer, "", "") == 1.0

    def test_unknown_requirement(self, scorer):
        assert self._score(scorer, "", "wizardry") == 1.0

    @pytest.mark.parametrize("level,expected", [
        ("doctorate", 1.0),
        ("master", 1.0),
        ("bachelor", 0.6),
        ("associate", 0.2),
        ("", 0.3),
    ])
    def test_degree_ladder(self, scorer, level, expected):
        assert self._score(scorer, level, "master") == pytest.approx(expected)

    def test_field_bonus(self, scorer):
        score = self._score(scorer, "bachelor", "master", "Computer Science", ["computer science"])
        assert score == pytest.approx(0.8)

    def test_field_bonus_capped(self, scorer):
        assert self._score(scorer, "master", "bachelor", "Mathematics", ["mathematics"]) == 1.0

    def test_exceeding_requirement_never_lowers_score(self, scorer):
        ladder = ["high_school", "certificate", "diploma", "associate", "bachelor", "master", "professional", "doctorate"]
        previous = 0.0
        for level in ladder:
            current = self._score(scorer, level, "bachelor")
            assert current >= previous
            previous = current


class TestLocationFit:
    @pytest.mark.parametrize("job_type,pref,expected", [
        ("remote", "remote", 1.0),
        ("remote", "", 1.0),
        ("remote", "on_site", 0.7),
        ("hybrid", "hybrid", 1.0),
        ("hybrid", "on_site", 0.8),
        ("hybrid", "remote", 0.6),
    ])
    def test_work_arrangement(self, scorer, job_type, pref, expected):
        profile = CandidateProfile(remote_preference=pref)
        job = JobRequirements(location_type=job_type)
        assert scorer.score_location_fit(profile, job) == expected

    def test_geography(self, scorer):
        job = JobRequirements(location_type="on_site", location_city="Lisbon", location_country="Portugal")
        assert scorer.score_location_fit(
            CandidateProfile(location_city="lisbon", location_country="Portugal"), job) == 1.0
        assert scorer.score_location_fit(
            CandidateProfile(location_city="Porto", location_country="portugal"), job) == 0.8
        assert scorer.score_location_fit(
            CandidateProfile(location_country="Spain", willing_to_relocate=True), job) == 0.6
        assert scorer.score_location_fit(CandidateProfile(location_country="Spain"), job) == 0.2


class TestIndustryRelevance:
    def test_no_requirement(self, scorer):
        assert scorer.score_industry_relevance(CandidateProfile(), JobRequirements()) == 1.0

    def test_direct_match(self, scorer):
        profile = CandidateProfile(work_history=[WorkHistoryEntry(industry="FinTech")])
        assert scorer.score_industry_relevance(profile, JobRequirements(industry="fintech")) == 1.0

    def test_related_match(self, scorer):
        profile = CandidateProfile(work_history=[WorkHistoryEntry(industry="banking")])
        job = JobRequirements(industry="fintech", related_industries=["Banking", "insurance"])
        assert scorer.score_industry_relevance(profile, job) == 0.7

    def test_no_history_is_neutral(self, scorer):
        assert scorer.score_industry_relevance(CandidateProfile(), JobRequirements(industry="fintech")) == 0.5

    def test_unrelated(self, scorer):
        profile = CandidateProfile(work_history=[WorkHistoryEntry(industry="retail")])
        assert scorer.score_industry_relevance(profile, JobRequirements(industry="fintech")) == 0.2


def test_proficiency_weight():
    assert proficiency_weight("Expert") == 1.0
    assert proficiency_weight(" beginner ") == 0.5
    assert proficiency_weight("") == 0.7
    assert proficiency_weight("guru") == 0.7


def test_candidate_skill_defaults():
    skill = CandidateSkill(name="Go")
    assert skill.proficiency == ""
    assert skill.years_of_experience == 0.0
