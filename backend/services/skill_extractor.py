"""Skill extraction from free-form text (job descriptions, resumes).

Two passes over the text:
1. Multi-word patterns built from every taxonomy name/alias containing a space,
   applied longest first; matched spans are blanked so they are not recounted
2. Single tokens from what remains, each normalized through the taxonomy

Results are deduplicated by canonical ID and grouped into technical, soft,
domain and unknown buckets by the matched node's domain.
"""

import logging
import re

from models.schemas.taxonomy import ExtractedSkill, ExtractionResult, NormalizeResult
from services.ontology import DOMAIN_KNOWLEDGE_DOMAINS, SOFT_SKILL_DOMAINS
from services.taxonomy import Taxonomy

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,/|•]+")
_TOKEN_EDGE_CHARS = ".,;:\"'()[]{}!?-_/\\"

# Confidence by match type; fuzzy matches use fuzzy_score * FUZZY_CONFIDENCE_FACTOR.
MATCH_CONFIDENCE: dict[str, float] = {
    "exact": 1.0,
    "alias": 0.95,
}
FUZZY_CONFIDENCE_FACTOR = 0.9
UNKNOWN_CONFIDENCE = 0.3

# Common English words never admitted as unknown skills.
STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "for", "with", "that", "this", "are", "you", "have", "will", "from",
    "they", "been", "has", "not", "but", "what", "all", "were", "when", "your", "can",
    "said", "there", "use", "each", "which", "she", "how", "their", "about", "out",
    "many", "then", "them", "these", "some", "her", "would", "make", "like", "into",
    "time", "look", "two", "more", "write", "see", "number", "way", "could",
    "people", "than", "first", "water", "call", "who", "oil", "its", "now", "find",
    "long", "down", "day", "did", "get", "come", "made", "may", "part", "over", "new",
    "sound", "take", "only", "little", "work", "know", "place", "years", "live",
    "back", "give", "most", "very", "after", "thing", "our", "just", "name", "good",
    "sentence", "man", "think", "say", "great", "where", "help", "through", "much",
    "before", "line", "right", "too", "mean", "old", "any", "same", "tell", "boy",
    "follow", "came", "want", "show", "also", "around", "form", "three", "small",
    "set", "put", "end", "does", "another", "well", "large", "need", "big", "high",
    "such", "even", "because", "turn", "here", "why", "ask", "went", "men", "read",
    "land", "different", "home", "move", "try", "kind", "hand", "picture", "again",
    "change", "off", "play", "spell", "air", "away", "animal", "house", "point",
    "page", "letter", "mother", "answer", "found", "study", "still", "learn",
    "plant", "cover", "food", "sun", "four", "between", "state", "keep", "eye",
    "never", "last", "let", "thought", "city", "tree", "cross", "farm", "hard",
    "start", "might", "story", "saw", "far", "sea", "draw", "left", "late", "run",
    "while", "press", "close", "night", "real", "life", "few", "north", "open",
    "seem", "together", "next", "white", "children", "begin", "got", "walk",
    "example", "ease", "paper", "group", "always", "music", "those", "both", "mark",
    "often", "until", "mile", "river", "car", "feet", "care", "second", "enough",
    "plain", "girl", "usual", "young", "ready", "above", "ever", "red", "list",
    "though", "feel", "talk", "bird", "soon", "body", "dog", "family", "direct",
    "pose", "leave", "song", "measure", "door", "product", "black", "short",
    "numeral", "class", "wind", "question", "happen", "complete", "ship", "area",
    "half", "rock", "order", "fire", "south", "problem", "piece", "told", "knew",
    "pass", "since", "top", "whole", "king", "space", "heard", "best", "hour",
    "better", "true", "during", "hundred", "five", "remember", "step", "early",
    "hold", "west", "ground", "interest", "reach", "fast", "verb", "sing", "listen",
    "six", "table", "travel", "less", "morning", "ten", "simple", "several",
    "vowel", "toward", "war", "lay", "against", "pattern", "slow", "center", "love",
    "person", "money", "serve", "appear", "road", "map", "rain", "rule", "govern",
    "pull", "cold", "notice", "voice", "unit", "power", "town", "fine", "drive",
    "lead", "cry", "dark", "machine", "note", "wait", "plan", "figure", "star",
    "box", "noun", "field", "correct", "able", "pound", "done", "beauty", "stood",
    "contain", "front", "teach", "week", "final", "gave", "green", "oh", "quick",
    "develop", "ocean", "warm", "free", "minute", "strong", "special", "mind",
    "behind", "clear", "tail", "produce", "fact", "street", "inch", "multiply",
    "nothing", "course", "stay", "wheel", "full", "force", "blue", "object",
    "decide", "surface", "deep", "moon", "island", "foot", "system", "busy", "test",
    "record", "boat", "common", "gold", "possible", "plane", "stead", "dry",
    "wonder", "laugh", "thousand", "ago", "ran", "check", "game", "shape", "equate",
    "hot", "miss", "brought", "heat", "snow", "tire", "bring", "yes", "distant",
    "fill", "east", "paint", "language", "among",})


def _clean_token(token: str) -> str:
    return token.strip().strip(_TOKEN_EDGE_CHARS).strip()


def looks_like_skill(token: str) -> bool:
    """Heuristic filter for unknown tokens: 2-50 chars, not numeric, not a stop word."""
    if len(token) < 2 or len(token) > 50:
        return False
    if token.isdigit():
        return False
    return token.lower() not in STOP_WORDS


def _confidence(match_type: str, fuzzy_score: float) -> float:
    if match_type == "fuzzy":
        return round(fuzzy_score * FUZZY_CONFIDENCE_FACTOR, 4)
    return MATCH_CONFIDENCE.get(match_type, UNKNOWN_CONFIDENCE)


class SkillExtractor:
    """Extracts taxonomy skills from text. Patterns are compiled once at construction."""

    def __init__(self, taxonomy: Taxonomy) -> None:
        self._taxonomy = taxonomy
        self._patterns = self._build_multi_word_patterns()
        logger.info("Skill extractor ready with %d multi-word patterns", len(self._patterns))

    def _build_multi_word_patterns(self) -> list[re.Pattern[str]]:
        seen: set[str] = set()
        phrases: list[str] = []
        for node in self._taxonomy.all():
            for phrase in (node.canonical_name, *node.aliases):
                phrase = phrase.lower()
                if " " in phrase and phrase not in seen:
                    seen.add(phrase)
                    phrases.append(phrase)

        # Longest first so "ruby on rails" wins over any shorter overlap.
        phrases.sort(key=len, reverse=True)

        patterns = []
        for phrase in phrases:
            escaped = re.escape(phrase).replace(r"\ ", r"[\s\-]+")
            patterns.append(re.compile(rf"\b{escaped}\b", re.IGNORECASE))
        return patterns

    def extract(self, text: str, include_unknown: bool = False) -> ExtractionResult:
        if not text or not text.strip():
            return ExtractionResult()

        seen_ids: set[str] = set()
        seen_unknown: set[str] = set()
        skills: list[ExtractedSkill] = []

        # Pass 1: multi-word patterns
        remaining = text
        for pattern in self._patterns:
            for match in pattern.findall(remaining):
                result = self._taxonomy.normalize(match)
                if result.match_type != "none":
                    _append(match, result, skills, seen_ids)
            remaining = pattern.sub(lambda m: " " * len(m.group(0)), remaining)

        # Pass 2: single tokens on the remaining text
        for raw_token in _TOKEN_SPLIT.split(remaining):
            token = _clean_token(raw_token)
            if len(token) < 2:
                continue
            result = self._taxonomy.normalize(token)
            # Common words ("and" ~ "android") never count as fuzzy matches
            if result.match_type == "fuzzy" and token.lower() in STOP_WORDS:
                continue
            if result.match_type != "none":
                _append(token, result, skills, seen_ids)
            elif include_unknown and looks_like_skill(token) and token.lower() not in seen_unknown:
                seen_unknown.add(token.lower())
                skills.append(ExtractedSkill(
                    raw_text=token,
                    confidence=UNKNOWN_CONFIDENCE,
                    match_type="unknown",
                ))

        return group_skills(skills)


def _append(raw: str, result: NormalizeResult, skills: list[ExtractedSkill], seen_ids: set[str]) -> None:
    if result.canonical_id in seen_ids:
        return
    seen_ids.add(result.canonical_id)
    skills.append(ExtractedSkill(
        raw_text=raw,
        canonical_id=result.canonical_id,
        canonical_name=result.canonical_name,
        domain=result.domain,
        category=result.category,
        confidence=_confidence(result.match_type, result.fuzzy_score),
        match_type=result.match_type,
    ))


def group_skills(skills: list[ExtractedSkill]) -> ExtractionResult:
    """Partition extracted skills into technical / soft / domain / unknown buckets."""
    result = ExtractionResult(skills=skills)
    for skill in skills:
        if skill.match_type == "unknown":
            result.unknown_skills.append(skill)
        elif skill.domain in SOFT_SKILL_DOMAINS:
            result.soft_skills.append(skill)
        elif skill.domain in DOMAIN_KNOWLEDGE_DOMAINS:
            result.domain_skills.append(skill)
        else:
            result.technical_skills.append(skill)
    return result
