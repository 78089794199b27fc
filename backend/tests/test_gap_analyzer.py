"""Tests for skill gap analysis and readiness scoring."""

import pytest

from models.schemas.profile import CandidateProfile, EducationEntry, JobRequirements
from services.gap_analyzer import (
    CRITICAL,
    IMPORTANT,
    NICE_TO_HAVE,
    RADAR_LABELS,
    GapAnalyzer,
    target_level_for,
)
from services.skill_metadata import DEFAULT_METADATA, SkillMetadata, SkillMetadataTable

from conftest import profile_with


def test_end_to_end_two_critical_gaps(analyzer, python_profile, backend_job):
    result = analyzer.analyze(python_profile, backend_job)

    assert result.critical_gap_count == 2
    assert {g.skill_name for g in result.critical_gaps} == {"Go", "Docker"}
    assert result.important_gaps == []
    assert result.nice_to_have_gaps == []
    assert result.matched_skills == ["Python"]
    assert result.total_gaps == 2


def test_gap_numbers(analyzer, python_profile, backend_job):
    result = analyzer.analyze(python_profile, backend_job)
    docker, go = result.critical_gaps

    assert docker.skill_name == "Docker"
    assert docker.estimated_learning_hours == 60
    assert docker.priority_score == pytest.approx(0.961)

    assert go.skill_name == "Go"
    assert go.estimated_learning_hours == 150
    assert go.priority_score == pytest.approx(0.895)
    assert go.closest_existing_skill == "Python"
    assert go.semantic_similarity_score == pytest.approx(0.25)
    assert go.target_level == "intermediate"
    assert go.current_level == ""

    assert result.total_estimated_learning_hours == 210
    assert result.readiness_score == pytest.approx(62.88)


def test_readiness_is_100_without_gaps(analyzer):
    profile = profile_with(("Python", "expert"), ("Go", "expert"))
    job = JobRequirements(required_skills=["Python", "golang"], preferred_skills=["Go"])
    result = analyzer.analyze(profile, job)
    assert result.total_gaps == 0
    assert result.readiness_score == 100.0
    assert result.top_priority_gaps == []


def test_readiness_falls_with_each_critical_gap(analyzer):
    profile = profile_with(("Python", "advanced"))
    required = ["Python"]
    previous = analyzer.analyze(profile, JobRequirements(required_skills=required)).readiness_score
    for skill in ("Go", "Docker", "Rust", "Kubernetes"):
        required.append(skill)
        current = analyzer.analyze(profile, JobRequirements(required_skills=list(required))).readiness_score
        assert current <= previous - 10 or current == 0.0
        previous = current


def test_readiness_never_negative(analyzer):
    job = JobRequirements(required_skills=["Go", "Rust", "Kubernetes", "Docker", "Terraform", "Scala", "Kafka"])
    assert analyzer.analyze(CandidateProfile(), job).readiness_score == 0.0


def test_preferred_skills_are_important_gaps(analyzer):
    job = JobRequirements(required_skills=["Python"], preferred_skills=["Kubernetes"])
    result = analyzer.analyze(profile_with(("Python", "")), job)
    assert result.critical_gaps == []
    assert [g.skill_name for g in result.important_gaps] == ["Kubernetes"]
    gap = result.important_gaps[0]
    assert gap.category == IMPORTANT
    assert gap.importance_score == 0.6
    assert result.readiness_score == pytest.approx(100 - gap.priority_score * 8, abs=0.01)


def test_preferred_duplicate_of_required_is_skipped(analyzer):
    job = JobRequirements(required_skills=["Go"], preferred_skills=["golang", "Docker"])
    result = analyzer.analyze(CandidateProfile(), job)
    assert [g.skill_name for g in result.critical_gaps] == ["Go"]
    assert [g.skill_name for g in result.important_gaps] == ["Docker"]


def test_held_below_target_is_a_gap(analyzer):
    job = JobRequirements(required_skills=["Python"], experience_level="senior")
    result = analyzer.analyze(profile_with(("Python", "beginner")), job)
    assert result.critical_gap_count == 1
    gap = result.critical_gaps[0]
    assert gap.current_level == "beginner"
    assert gap.target_level == "advanced"
    assert gap.estimated_learning_hours == 132
    assert gap.semantic_similarity_score == 1.0
    assert result.matched_skills == []


def test_unspecified_proficiency_counts_as_matched(analyzer):
    job = JobRequirements(required_skills=["Python"], experience_level="executive")
    result = analyzer.analyze(profile_with(("python", "")), job)
    assert result.critical_gaps == []
    assert result.matched_skills == ["Python"]


def test_alias_skills_match(analyzer):
    job = JobRequirements(required_skills=["Go", "Kubernetes"])
    result = analyzer.analyze(profile_with(("golang", "advanced"), ("k8s", "expert")), job)
    assert result.total_gaps == 0
    assert result.matched_skills == ["Go", "Kubernetes"]


def test_best_equivalent_skill_is_used(analyzer):
    job = JobRequirements(required_skills=["React"])
    result = analyzer.analyze(profile_with(("React.js", "beginner"), ("React Native", "advanced")), job)
    assert result.total_gaps == 0
    assert result.matched_skills == ["React"]


@pytest.mark.parametrize("level,target", [
    ("internship", "beginner"),
    ("entry", "beginner"),
    ("mid", "intermediate"),
    ("senior", "advanced"),
    ("Lead", "advanced"),
    ("executive", "expert"),
    ("", "intermediate"),
    ("wizard", "intermediate"),
])
def test_target_level_for(level, target):
    assert target_level_for(level) == target


def test_transferable_skills_cut_learning_hours(analyzer):
    job = JobRequirements(required_skills=["Kubernetes"])
    cold = analyzer.analyze(CandidateProfile(), job).critical_gaps[0]
    warm = analyzer.analyze(profile_with(("Docker", ""), ("Helm", ""), ("Istio", "")), job).critical_gaps[0]

    assert cold.transferability_score == 0.0
    assert cold.estimated_learning_hours == 120
    assert warm.transferability_score == 1.0
    assert warm.estimated_learning_hours == 72
    assert warm.closest_existing_skill == "Docker"
    assert warm.semantic_similarity_score == pytest.approx(0.7)
    assert warm.priority_score > cold.priority_score


def test_gaps_sorted_by_priority(analyzer):
    job = JobRequirements(
        required_skills=["Rust", "Docker", "Go", "Kubernetes"],
        preferred_skills=["Terraform", "Kafka"],
    )
    result = analyzer.analyze(CandidateProfile(), job)
    for gaps in (result.critical_gaps, result.important_gaps, result.top_priority_gaps):
        scores = [g.priority_score for g in gaps]
        assert scores == sorted(scores, reverse=True)
    assert len(result.top_priority_gaps) == 5


def test_gap_recommendations_are_ordered(analyzer):
    job = JobRequirements(required_skills=["Docker"])
    gap = analyzer.analyze(CandidateProfile(), job).critical_gaps[0]
    assert [r.priority for r in gap.recommendations] == list(range(1, len(gap.recommendations) + 1))
    types = [r.resource_type for r in gap.recommendations]
    assert "project" in types
    # Docker is versatile enough to warrant a certification step
    assert types[-1] == "certification"


def test_nice_to_have_gaps_are_opt_in(resolver):
    job = JobRequirements(required_skills=["Python"])
    profile = profile_with(("Python", "advanced"), ("Flask", "beginner"))

    assert GapAnalyzer(resolver).analyze(profile, job).nice_to_have_gaps == []

    result = GapAnalyzer(resolver, include_related=True, max_related=3).analyze(profile, job)
    names = [g.skill_name for g in result.nice_to_have_gaps]
    assert len(names) == 3
    assert "Flask" not in names
    assert all(g.category == NICE_TO_HAVE for g in result.nice_to_have_gaps)
    assert result.nice_to_have_gap_count == 3
    # Nice-to-have gaps do not affect readiness
    assert result.readiness_score == 100.0


class TestSimilarity:
    def test_same_skill(self, analyzer):
        assert analyzer.similarity("Go", "golang") == 1.0

    def test_equivalent_names(self, analyzer):
        assert analyzer.similarity("terraform", "terraform cloud") == 0.95

    def test_related(self, analyzer):
        assert analyzer.similarity("Kubernetes", "Docker") == 0.7

    def test_unrelated(self, analyzer):
        assert analyzer.similarity("Rust", "Photoshop") == 0.0


class TestVisualData:
    def test_radar_chart(self, analyzer, python_profile, backend_job):
        radar = analyzer.analyze(python_profile, backend_job).visual_data.radar_chart
        assert radar.labels == RADAR_LABELS
        assert radar.candidate_scores == [0.33, 1.0, 1.0, 1.0]
        assert radar.required_scores == [1.0, 1.0, 1.0, 1.0]

    def test_radar_experience_and_education(self, analyzer):
        profile = CandidateProfile(years_of_experience=2)
        job = JobRequirements(min_years_experience=4, required_degree_level="bachelor")
        radar = analyzer.analyze(profile, job).visual_data.radar_chart
        assert radar.candidate_scores[2:] == [0.5, 0.3]

        educated = CandidateProfile(years_of_experience=2, education=[EducationEntry(degree_level="bachelor")])
        assert analyzer.analyze(educated, job).visual_data.radar_chart.candidate_scores[3] == 1.0

    def test_category_summary(self, analyzer, python_profile, backend_job):
        summary = analyzer.analyze(python_profile, backend_job).visual_data.gaps_by_category
        assert [s.category for s in summary] == [CRITICAL, IMPORTANT, NICE_TO_HAVE]
        assert summary[0].gap_count == 2
        assert summary[0].total_learning_hours == 210
        assert summary[0].average_priority == pytest.approx(0.928)
        assert summary[1].gap_count == 0
        assert summary[1].average_priority == 0.0

    def test_learning_timeline(self, analyzer, python_profile, backend_job):
        timeline = analyzer.analyze(python_profile, backend_job).visual_data.learning_timeline
        assert [e.order for e in timeline] == [1, 2]
        assert [e.skill_name for e in timeline] == ["Docker", "Go"]
        assert [e.cumulative_hours for e in timeline] == [60, 210]
        assert timeline[0].rationale.startswith("Highest priority")


def test_metadata_shared_by_aliases(resolver):
    table = SkillMetadataTable(resolver)
    assert table.get("golang") == table.get("Go")
    assert table.get("Go").base_hours == 150
    assert table.get("Zorblax") is DEFAULT_METADATA


def test_custom_metadata_table(resolver):
    table = SkillMetadataTable(resolver, {"go": SkillMetadata(base_hours=10, versatility=0.5)})
    analyzer = GapAnalyzer(resolver, metadata=table)
    gap = analyzer.analyze(CandidateProfile(), JobRequirements(required_skills=["golang"])).critical_gaps[0]
    assert gap.estimated_learning_hours == 10
    assert len(table) == 1
