"""Tests for the skill taxonomy: lookup, search and normalization."""

import pytest

from models.schemas.taxonomy import SkillNode
from services.ontology import BUILTIN_SKILLS, CATEGORIES, DOMAINS
from services.taxonomy import Taxonomy


def test_builtin_taxonomy_loads_every_node(taxonomy):
    assert len(taxonomy) == len(BUILTIN_SKILLS)
    assert len(taxonomy.all()) == len(BUILTIN_SKILLS)


def test_builtin_nodes_use_known_domains_and_categories():
    for node in BUILTIN_SKILLS:
        assert node.domain in DOMAINS, node.id
        assert node.category in CATEGORIES, node.id


def test_builtin_ids_are_unique():
    ids = [node.id for node in BUILTIN_SKILLS]
    assert len(ids) == len(set(ids))


def test_builtin_aliases_map_to_one_node():
    owners: dict[str, str] = {}
    for node in BUILTIN_SKILLS:
        for alias in node.aliases:
            key = alias.strip().lower()
            assert owners.setdefault(key, node.id) == node.id, f"{alias!r} claimed by {owners[key]} and {node.id}"


def test_duplicate_ids_rejected():
    node = SkillNode(id="go", canonical_name="Go", domain="engineering", category="language")
    with pytest.raises(ValueError):
        Taxonomy([node, node])


def test_lookup_existing_and_missing(taxonomy):
    node = taxonomy.lookup("kubernetes")
    assert node is not None
    assert node.canonical_name == "Kubernetes"
    assert taxonomy.lookup("not-a-skill") is None


def test_search_by_query(taxonomy):
    ids = {node.id for node in taxonomy.search("python")}
    assert "python" in ids


def test_search_by_domain(taxonomy):
    results = taxonomy.search(domain="devops", limit=0)
    assert results
    assert all(node.domain == "devops" for node in results)


def test_search_by_category(taxonomy):
    results = taxonomy.search(category="language", limit=0)
    assert results
    assert all(node.category == "language" for node in results)


def test_search_limit(taxonomy):
    assert len(taxonomy.search(limit=5)) == 5


def test_search_empty_query_defaults_to_twenty(taxonomy):
    assert len(taxonomy.search()) == 20
    assert len(taxonomy.search(limit=0)) == len(taxonomy)


class TestNormalize:
    def test_exact_match(self, taxonomy):
        result = taxonomy.normalize("Go")
        assert result.match_type == "exact"
        assert result.canonical_id == "go"
        assert result.canonical_name == "Go"
        assert result.fuzzy_score == 1.0

    @pytest.mark.parametrize("raw,expected", [
        ("golang", "go"),
        ("k8s", "kubernetes"),
        ("postgres", "postgresql"),
        ("js", "javascript"),
        ("ts", "typescript"),
        ("sklearn", "scikit-learn"),
        ("pyspark", "spark"),
        ("drf", "django"),
        ("ror", "rails"),
        ("tf", "tensorflow"),
    ])
    def test_alias_match(self, taxonomy, raw, expected):
        result = taxonomy.normalize(raw)
        assert result.canonical_id == expected
        assert result.match_type == "alias"

    @pytest.mark.parametrize("raw,expected", [
        ("machine learning", "machine-learning"),
        ("deep learning", "deep-learning"),
        ("natural language processing", "nlp"),
        ("ruby on rails", "rails"),
        ("spring boot", "spring-boot"),
        ("node.js", "nodejs"),
        ("react native", "react-native"),
    ])
    def test_multi_word_names(self, taxonomy, raw, expected):
        assert taxonomy.normalize(raw).canonical_id == expected

    @pytest.mark.parametrize("raw", ["PYTHON", "Python", "python", "  python  ", "GOLANG", "Golang"])
    def test_case_and_whitespace_insensitive(self, taxonomy, raw):
        assert taxonomy.normalize(raw).match_type != "none"

    def test_fuzzy_match(self, taxonomy):
        result = taxonomy.normalize("pythn")
        assert result.match_type == "fuzzy"
        assert result.canonical_id == "python"
        assert 0.85 <= result.fuzzy_score < 1.0
        assert result.input == "pythn"

    def test_no_match(self, taxonomy):
        result = taxonomy.normalize("xyzzy-nonexistent-skill-12345")
        assert result.match_type == "none"
        assert result.canonical_id == ""

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_input(self, taxonomy, raw):
        result = taxonomy.normalize(raw)
        assert result.match_type == "none"
        assert result.fuzzy_score == 0.0

    def test_every_canonical_name_is_exact(self, taxonomy):
        for node in taxonomy.all():
            result = taxonomy.normalize(node.canonical_name)
            assert result.match_type == "exact", node.canonical_name
            assert result.canonical_id == node.id

    def test_threshold_is_configurable(self):
        strict = Taxonomy(BUILTIN_SKILLS, fuzzy_threshold=0.99)
        assert strict.normalize("pythn").match_type == "none"

    def test_normalize_many_preserves_order(self, taxonomy):
        results = taxonomy.normalize_many(["golang", "k8s", "postgres", "xyzzy-nonexistent"])
        assert [r.canonical_id for r in results] == ["go", "kubernetes", "postgresql", ""]
        assert results[3].match_type == "none"


def test_resolve_id_skips_fuzzy(taxonomy):
    assert taxonomy.resolve_id("golang") == "go"
    assert taxonomy.resolve_id("pythn") is None
