"""In-memory skill taxonomy: lookup, search and normalization.

Normalization maps an arbitrary skill string to a canonical node in three steps:
1. Exact match on the lowercased canonical name or ID
2. Alias table lookup (including multi-word aliases)
3. Jaro-Winkler fuzzy fallback against every canonical name and alias,
   accepted when the best score reaches the threshold (0.85)

Absence is never an error: unmatched input comes back with match_type "none".
"""

import logging
from collections.abc import Iterable

from rapidfuzz import process
from rapidfuzz.distance import JaroWinkler

from models.schemas.taxonomy import NormalizeResult, SkillNode

logger = logging.getLogger(__name__)

FUZZY_THRESHOLD = 0.85
DEFAULT_SEARCH_LIMIT = 20


def normalise(text: str) -> str:
    """Lowercase and trim a string for comparison."""
    return text.strip().lower()


class Taxonomy:
    """Read-only skill ontology with O(1) ID and alias lookup.

    Built once from a list of SkillNode records and never mutated afterwards,
    so a single instance can be shared across concurrent requests.
    """

    def __init__(self, nodes: Iterable[SkillNode], fuzzy_threshold: float = FUZZY_THRESHOLD) -> None:
        self._nodes: tuple[SkillNode, ...] = tuple(nodes)
        self._fuzzy_threshold = fuzzy_threshold
        self._by_id: dict[str, SkillNode] = {}
        self._by_alias: dict[str, str] = {}

        for node in self._nodes:
            if node.id in self._by_id:
                raise ValueError(f"Duplicate skill id in taxonomy: {node.id}")
            self._by_id[node.id] = node

        # Aliases first so canonical names and IDs always win a collision.
        for node in self._nodes:
            for alias in node.aliases:
                self._register(normalise(alias), node.id)
        for node in self._nodes:
            self._by_alias[normalise(node.canonical_name)] = node.id
            self._by_alias[normalise(node.id)] = node.id

        # Fuzzy candidates in declaration order: canonical name, then aliases.
        self._fuzzy_choices: list[str] = []
        self._fuzzy_ids: list[str] = []
        for node in self._nodes:
            for choice in (node.canonical_name, *node.aliases):
                self._fuzzy_choices.append(normalise(choice))
                self._fuzzy_ids.append(node.id)

        logger.info("Taxonomy built: %d skills, %d lookup keys", len(self._nodes), len(self._by_alias))

    @classmethod
    def builtin(cls, fuzzy_threshold: float = FUZZY_THRESHOLD) -> "Taxonomy":
        """Build the taxonomy from the bundled ontology."""
        from services.ontology import BUILTIN_SKILLS
        return cls(BUILTIN_SKILLS, fuzzy_threshold=fuzzy_threshold)

    def _register(self, key: str, node_id: str) -> None:
        existing = self._by_alias.get(key)
        if existing is not None and existing != node_id:
            logger.warning("Alias %r maps to both %s and %s; keeping %s", key, existing, node_id, node_id)
        self._by_alias[key] = node_id

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Lookup & search
    # ------------------------------------------------------------------

    def lookup(self, skill_id: str) -> SkillNode | None:
        return self._by_id.get(normalise(skill_id))

    def all(self) -> list[SkillNode]:
        return list(self._nodes)

    def resolve_id(self, name: str) -> str | None:
        """Return the canonical ID for an exact or alias match, without fuzzy fallback."""
        return self._by_alias.get(normalise(name))

    def search(
        self,
        query: str = "",
        domain: str = "",
        category: str = "",
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[SkillNode]:
        """Substring search over canonical name, ID and aliases.

        An empty query matches everything; domain and category filter when set.
        limit <= 0 means no limit.
        """
        q = normalise(query)
        results: list[SkillNode] = []
        for node in self._nodes:
            if domain and node.domain != domain:
                continue
            if category and node.category != category:
                continue
            if (
                not q
                or q in normalise(node.canonical_name)
                or q in normalise(node.id)
                or any(q in normalise(alias) for alias in node.aliases)
            ):
                results.append(node)
            if limit > 0 and len(results) >= limit:
                break
        return results

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize(self, raw: str) -> NormalizeResult:
        norm = normalise(raw)
        if not norm:
            return NormalizeResult(input=raw, match_type="none")

        node_id = self._by_alias.get(norm)
        if node_id is not None:
            node = self._by_id[node_id]
            if norm in (normalise(node.id), normalise(node.canonical_name)):
                match_type = "exact"
            else:
                match_type = "alias"
            return _result(raw, node, match_type, 1.0)

        # First-seen candidate wins on equal scores.
        best = process.extractOne(
            norm,
            self._fuzzy_choices,
            scorer=JaroWinkler.normalized_similarity,
            score_cutoff=self._fuzzy_threshold,
        )
        if best is None:
            return NormalizeResult(input=raw, match_type="none")

        choice, score, index = best
        node = self._by_id[self._fuzzy_ids[index]]
        logger.debug("Fuzzy match %r -> %s via %r (%.4f)", raw, node.id, choice, score)
        return _result(raw, node, "fuzzy", round(score, 4))

    def normalize_many(self, raws: Iterable[str]) -> list[NormalizeResult]:
        return [self.normalize(raw) for raw in raws]


def _result(raw: str, node: SkillNode, match_type: str, score: float) -> NormalizeResult:
    return NormalizeResult(
        input=raw,
        canonical_id=node.id,
        canonical_name=node.canonical_name,
        domain=node.domain,
        category=node.category,
        match_type=match_type,
        fuzzy_score=score,
    )
