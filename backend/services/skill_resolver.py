"""Alias-aware skill equivalence shared by the scorer, gap analyzer and recommendation engine.

A skill name resolves to a single comparison key:
1. Lowercase and trim
2. Curated shorthand table (golang -> go, k8s -> kubernetes, ...)
3. Taxonomy exact/alias index, yielding the canonical skill ID
4. Otherwise the normalized string itself

Two names are equivalent when their keys are equal, or when one key is a
prefix of the other and the shorter key has at least 3 characters
("react" vs "react-native", "java" vs "javascript").
"""

import logging
from collections.abc import Mapping
from typing import TypeVar

from services.taxonomy import Taxonomy, normalise

logger = logging.getLogger(__name__)

MIN_CONTAINMENT_LENGTH = 3

T = TypeVar("T")

SKILL_ALIASES: dict[str, str] = {
    "golang": "go",
    "js": "javascript",
    "ts": "typescript",
    "node": "node.js",
    "nodejs": "node.js",
    "react.js": "react",
    "reactjs": "react",
    "vue.js": "vue",
    "vuejs": "vue",
    "angular.js": "angular",
    "angularjs": "angular",
    "postgres": "postgresql",
    "psql": "postgresql",
    "k8s": "kubernetes",
    "py": "python",
    "rb": "ruby",
    "cpp": "c++",
    "csharp": "c#",
    "dotnet": ".net",
    "net": ".net",
    "ml": "machine learning",
    "dl": "deep learning",
    "tf": "tensorflow",
    "spring": "spring boot",
}


class SkillResolver:
    """Resolves skill names to comparison keys through one alias table."""

    def __init__(self, taxonomy: Taxonomy, aliases: Mapping[str, str] | None = None) -> None:
        self._taxonomy = taxonomy
        self._aliases = {normalise(k): normalise(v) for k, v in (aliases or SKILL_ALIASES).items()}
        logger.info("Skill resolver ready with %d curated aliases", len(self._aliases))

    @property
    def taxonomy(self) -> Taxonomy:
        return self._taxonomy

    def key(self, name: str) -> str:
        """Comparison key for a skill name."""
        norm = normalise(name)
        norm = self._aliases.get(norm, norm)
        return self._taxonomy.resolve_id(norm) or norm

    def equivalent(self, a: str, b: str) -> bool:
        key_a = self.key(a)
        key_b = self.key(b)
        if not key_a or not key_b:
            return False
        if key_a == key_b:
            return True
        shorter, longer = sorted((key_a, key_b), key=len)
        return len(shorter) >= MIN_CONTAINMENT_LENGTH and longer.startswith(shorter)

    def matches(self, name: str, index: Mapping[str, T]) -> list[T]:
        """Return the values of every key in `index` equivalent to `name`, exact key first.

        `index` must be keyed by comparison keys, as built with `key()`.
        """
        k = self.key(name)
        if not k:
            return []
        found: list[T] = []
        if k in index:
            found.append(index[k])
        for other_key, value in index.items():
            if other_key != k and self.equivalent(k, other_key):
                found.append(value)
        return found

    def covers(self, skill: str, resource_skill: str) -> bool:
        """True if a catalog skill tag covers the given skill.

        Besides key equality, a compound tag covers any skill of at least
        3 characters it contains ("data analysis" covers "data", "postgresql"
        covers "sql").
        """
        skill_key = self.key(skill)
        res_key = self.key(resource_skill)
        if not skill_key or not res_key:
            return False
        if skill_key == res_key:
            return True
        res_norm = normalise(resource_skill)
        for needle in {skill_key, normalise(skill)}:
            if len(needle) >= MIN_CONTAINMENT_LENGTH and (needle in res_norm or needle in res_key):
                return True
        return False
