"""Skill taxonomy records: ontology nodes, normalization and extraction output."""

from pydantic import BaseModel


class SkillNode(BaseModel):
    """A single canonical skill in the ontology.

    Hierarchy is domain -> category -> skill. Aliases are matched
    case-insensitively; prerequisites and related skills reference other
    node IDs (related skills may also name tools outside the ontology).
    """
    id: str  # lowercase, hyphenated
    canonical_name: str
    domain: str  # engineering, data_science, devops, design, management, communication, domain_knowledge
    category: str
    aliases: list[str] = []
    prerequisites: list[str] = []
    related_skills: list[str] = []
    description: str = ""

    model_config = {"frozen": True}


class NormalizeResult(BaseModel):
    input: str
    canonical_id: str = ""
    canonical_name: str = ""
    domain: str = ""
    category: str = ""
    match_type: str = "none"  # exact, alias, fuzzy, none
    fuzzy_score: float = 0.0


class ExtractedSkill(BaseModel):
    """A skill span found in free text, with its taxonomy mapping."""
    raw_text: str
    canonical_id: str = ""  # empty for unknown skills
    canonical_name: str = ""
    domain: str = ""
    category: str = ""
    confidence: float = 0.0
    match_type: str = "unknown"  # exact, alias, fuzzy, unknown


class ExtractionResult(BaseModel):
    skills: list[ExtractedSkill] = []
    technical_skills: list[ExtractedSkill] = []
    soft_skills: list[ExtractedSkill] = []
    domain_skills: list[ExtractedSkill] = []
    unknown_skills: list[ExtractedSkill] = []
