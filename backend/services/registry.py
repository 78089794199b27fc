"""Lazy component registry.

Each component is built once on first access (or at startup via preload)
and shared read-only afterwards.
"""

import logging
from typing import Any

from config import settings

logger = logging.getLogger(__name__)

COMPONENTS = ("taxonomy", "resolver", "extractor", "scorer", "gap_analyzer", "catalog", "engine")

_registry: dict[str, Any] = {}


def _create_component(name: str) -> Any:
    """Factory: create a component by name with deferred imports."""
    if name == "taxonomy":
        from services.taxonomy import Taxonomy
        return Taxonomy.builtin(fuzzy_threshold=settings.fuzzy_match_threshold)
    elif name == "resolver":
        from services.skill_resolver import SkillResolver
        return SkillResolver(get("taxonomy"))
    elif name == "extractor":
        from services.skill_extractor import SkillExtractor
        return SkillExtractor(get("taxonomy"))
    elif name == "scorer":
        from services.scorer import Scorer
        return Scorer(get("resolver"))
    elif name == "gap_analyzer":
        from services.gap_analyzer import GapAnalyzer
        return GapAnalyzer(
            get("resolver"),
            include_related=settings.gap_include_related_skills,
            max_related=settings.gap_max_related_skills,
        )
    elif name == "catalog":
        from services.catalog import ResourceCatalog
        if settings.catalog_path:
            return ResourceCatalog.load(settings.catalog_path, get("resolver"))
        return ResourceCatalog.builtin(get("resolver"))
    elif name == "engine":
        from services.recommendation.engine import RecommendationEngine
        return RecommendationEngine(
            get("gap_analyzer"),
            get("catalog"),
            default_weekly_hours=settings.default_weekly_hours,
        )
    else:
        raise ValueError(f"Unknown component: {name}")


def get(name: str) -> Any:
    """Get a component by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_component(name)
        logger.debug("Component %s created", name)
    return _registry[name]


def preload(*names: str) -> None:
    """Build components up front (e.g. at startup). No names = all of them."""
    for name in names or COMPONENTS:
        get(name)


def clear() -> None:
    """Drop all components. Useful for testing."""
    _registry.clear()
