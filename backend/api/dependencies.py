"""Shared dependencies for API routes."""

from services import registry
from services.catalog import ResourceCatalog
from services.gap_analyzer import GapAnalyzer
from services.recommendation.engine import RecommendationEngine
from services.scorer import Scorer
from services.skill_extractor import SkillExtractor
from services.taxonomy import Taxonomy


def get_taxonomy() -> Taxonomy:
    return registry.get("taxonomy")


def get_extractor() -> SkillExtractor:
    return registry.get("extractor")


def get_scorer() -> Scorer:
    return registry.get("scorer")


def get_gap_analyzer() -> GapAnalyzer:
    return registry.get("gap_analyzer")


def get_catalog() -> ResourceCatalog:
    return registry.get("catalog")


def get_engine() -> RecommendationEngine:
    return registry.get("engine")
