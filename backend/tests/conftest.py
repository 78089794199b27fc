"""Shared test configuration, pytest markers and component fixtures."""

import pytest

from models.schemas.profile import CandidateProfile, CandidateSkill, JobRequirements
from models.schemas.resources import ResourceEntry
from services.catalog import ResourceCatalog
from services.gap_analyzer import GapAnalyzer
from services.recommendation.engine import RecommendationEngine
from services.scorer import Scorer
from services.skill_extractor import SkillExtractor
from services.skill_resolver import SkillResolver
from services.taxonomy import Taxonomy


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture(scope="session")
def taxonomy() -> Taxonomy:
    return Taxonomy.builtin()


@pytest.fixture(scope="session")
def resolver(taxonomy) -> SkillResolver:
    return SkillResolver(taxonomy)


@pytest.fixture(scope="session")
def extractor(taxonomy) -> SkillExtractor:
    return SkillExtractor(taxonomy)


@pytest.fixture(scope="session")
def scorer(resolver) -> Scorer:
    return Scorer(resolver)


@pytest.fixture(scope="session")
def analyzer(resolver) -> GapAnalyzer:
    return GapAnalyzer(resolver)


@pytest.fixture(scope="session")
def catalog(resolver) -> ResourceCatalog:
    return ResourceCatalog.builtin(resolver)


@pytest.fixture(scope="session")
def engine(analyzer, catalog) -> RecommendationEngine:
    return RecommendationEngine(analyzer, catalog)


def make_resource(**overrides) -> ResourceEntry:
    fields = {
        "id": "res",
        "title": "Resource",
        "provider": "Provider",
        "resource_type": "course",
        "difficulty": "beginner",
        "cost_type": "free",
        "duration_hours": 20.0,
        "skills": ["python"],
        "primary_skill": "python",
        "rating": 4.5,
        "rating_count": 1000,
    }
    fields.update(overrides)
    return ResourceEntry(**fields)


def profile_with(*skills: tuple[str, str], **fields) -> CandidateProfile:
    return CandidateProfile(
        skills=[CandidateSkill(name=name, proficiency=level) for name, level in skills],
        **fields,
    )


@pytest.fixture
def python_profile() -> CandidateProfile:
    return profile_with(("Python", "advanced"))


@pytest.fixture
def backend_job() -> JobRequirements:
    return JobRequirements(title="Backend Engineer", required_skills=["Python", "Go", "Docker"])
