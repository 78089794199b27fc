"""Learning resource catalog.

Loaded once from YAML at startup and never mutated. Matching is alias-aware:
a resource matches a skill when its primary skill or any skill tag covers
the skill (see SkillResolver.covers).
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import ValidationError

from models.schemas.resources import ResourceEntry, UserPreferences
from services.skill_resolver import SkillResolver

logger = logging.getLogger(__name__)

BUILTIN_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "resource_catalog.yaml"

FREE_COST_TYPES = frozenset({"free", "free_audit"})


class CatalogError(Exception):
    """Raised when a catalog file is missing or malformed."""


def passes_preferences(resource: ResourceEntry, prefs: UserPreferences) -> bool:
    if prefs.prefer_free and resource.cost_type not in FREE_COST_TYPES:
        return False
    if prefs.max_budget_usd > 0 and resource.cost_usd > prefs.max_budget_usd:
        return False

    provider = resource.provider.lower()
    if any(provider == excluded.strip().lower() for excluded in prefs.excluded_providers):
        return False

    if prefs.preferred_resource_types:
        allowed = {t.strip().lower() for t in prefs.preferred_resource_types}
        if resource.resource_type.lower() not in allowed:
            return False
    return True


class ResourceCatalog:
    def __init__(self, resources: Iterable[ResourceEntry], resolver: SkillResolver) -> None:
        self._resources: tuple[ResourceEntry, ...] = tuple(resources)
        self._resolver = resolver

        ids = [r.id for r in self._resources]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise CatalogError(f"Duplicate resource ids in catalog: {', '.join(duplicates)}")

    @classmethod
    def load(cls, path: str | Path, resolver: SkillResolver) -> "ResourceCatalog":
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {path}") from e
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog file is not valid YAML: {path}: {e}") from e

        if not isinstance(raw, list):
            raise CatalogError(f"Catalog file must contain a list of resources: {path}")

        try:
            resources = [ResourceEntry.model_validate(item) for item in raw]
        except ValidationError as e:
            raise CatalogError(f"Invalid resource entry in {path}: {e}") from e

        logger.info("Loaded %d learning resources from %s", len(resources), path)
        return cls(resources, resolver)

    @classmethod
    def builtin(cls, resolver: SkillResolver) -> "ResourceCatalog":
        return cls.load(BUILTIN_CATALOG_PATH, resolver)

    def __len__(self) -> int:
        return len(self._resources)

    def all(self) -> list[ResourceEntry]:
        return list(self._resources)

    def covers(self, resource: ResourceEntry, skill: str) -> bool:
        if resource.primary_skill and self._resolver.covers(skill, resource.primary_skill):
            return True
        return any(self._resolver.covers(skill, tag) for tag in resource.skills)

    def is_primary(self, resource: ResourceEntry, skill: str) -> bool:
        return bool(resource.primary_skill) and self._resolver.key(resource.primary_skill) == self._resolver.key(skill)

    def find(self, skill: str, prefs: UserPreferences | None = None) -> list[ResourceEntry]:
        """Resources covering `skill` that pass the preference filters, in catalog order."""
        prefs = prefs or UserPreferences()
        matches = [r for r in self._resources if self.covers(r, skill) and passes_preferences(r, prefs)]
        if not matches:
            logger.debug("No catalog resources for %r", skill)
        return matches
