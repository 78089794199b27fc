"""Learning-effort metadata for common skills.

base_hours is the estimated time to reach job-ready proficiency from zero;
versatility is how broadly useful the skill is across roles (0-1).
Skills not listed fall back to DEFAULT_METADATA.
"""

from pydantic import BaseModel

from services.skill_resolver import SkillResolver


class SkillMetadata(BaseModel):
    base_hours: int = 100
    versatility: float = 0.70
    difficulty: str = "intermediate"  # beginner, intermediate, advanced, expert
    related_skills: tuple[str, ...] = ()

    model_config = {"frozen": True}


DEFAULT_METADATA = SkillMetadata()


def _m(hours: int, versatility: float, difficulty: str, *related: str) -> SkillMetadata:
    return SkillMetadata(base_hours=hours, versatility=versatility, difficulty=difficulty, related_skills=related)


BUILTIN_METADATA: dict[str, SkillMetadata] = {
    # Programming languages
    "python": _m(120, 0.95, "intermediate", "r", "julia", "ruby"),
    "go": _m(150, 0.85, "intermediate", "rust", "c", "java"),
    "rust": _m(250, 0.75, "advanced", "c", "c++", "go"),
    "java": _m(160, 0.90, "intermediate", "kotlin", "scala", "c#"),
    "kotlin": _m(120, 0.80, "intermediate", "java", "scala"),
    "scala": _m(200, 0.75, "advanced", "java", "kotlin"),
    "javascript": _m(100, 0.95, "beginner", "typescript", "node.js"),
    "typescript": _m(80, 0.90, "beginner", "javascript"),
    "c++": _m(300, 0.80, "advanced", "c", "rust"),
    "c": _m(200, 0.75, "advanced", "c++", "rust"),
    "c#": _m(150, 0.85, "intermediate", "java", ".net"),
    "ruby": _m(100, 0.75, "beginner", "python", "rails"),
    "php": _m(80, 0.70, "beginner", "laravel"),
    "swift": _m(150, 0.65, "intermediate", "objective-c", "kotlin"),
    "r": _m(100, 0.70, "intermediate", "python", "julia"),

    # Frameworks & libraries
    "react": _m(80, 0.85, "intermediate", "vue", "angular", "javascript"),
    "vue": _m(70, 0.80, "beginner", "react", "angular"),
    "angular": _m(100, 0.80, "intermediate", "react", "vue"),
    "node.js": _m(80, 0.85, "intermediate", "javascript", "express"),
    "django": _m(80, 0.75, "intermediate", "flask", "python"),
    "flask": _m(50, 0.70, "beginner", "django", "python"),
    "spring boot": _m(100, 0.80, "intermediate", "java"),
    "tensorflow": _m(150, 0.80, "advanced", "pytorch", "keras", "python"),
    "pytorch": _m(150, 0.80, "advanced", "tensorflow", "python"),
    "keras": _m(80, 0.75, "intermediate", "tensorflow", "pytorch"),

    # Databases
    "postgresql": _m(80, 0.90, "intermediate", "mysql", "sqlite", "sql"),
    "mysql": _m(70, 0.85, "beginner", "postgresql", "sql"),
    "mongodb": _m(60, 0.80, "beginner", "redis", "cassandra"),
    "redis": _m(40, 0.85, "beginner", "memcached", "mongodb"),
    "sql": _m(60, 0.95, "beginner", "postgresql", "mysql"),
    "elasticsearch": _m(80, 0.80, "intermediate", "opensearch", "solr"),
    "cassandra": _m(100, 0.70, "advanced", "mongodb", "dynamodb"),

    # Cloud & DevOps
    "docker": _m(60, 0.95, "intermediate", "kubernetes", "podman"),
    "kubernetes": _m(120, 0.90, "advanced", "docker", "helm"),
    "aws": _m(150, 0.90, "intermediate", "gcp", "azure"),
    "gcp": _m(150, 0.85, "intermediate", "aws", "azure"),
    "azure": _m(150, 0.85, "intermediate", "aws", "gcp"),
    "terraform": _m(80, 0.85, "intermediate", "ansible", "pulumi"),
    "ansible": _m(60, 0.80, "intermediate", "terraform", "chef"),
    "jenkins": _m(60, 0.80, "intermediate", "github actions", "gitlab ci"),
    "git": _m(30, 0.99, "beginner", "github", "gitlab"),
    "linux": _m(80, 0.95, "intermediate", "unix", "bash"),
    "bash": _m(40, 0.90, "beginner", "shell", "linux"),

    # ML/AI
    "machine learning": _m(200, 0.85, "advanced", "deep learning", "python"),
    "deep learning": _m(250, 0.80, "advanced", "machine learning", "tensorflow"),
    "nlp": _m(200, 0.75, "advanced", "machine learning", "python"),
    "computer vision": _m(200, 0.75, "advanced", "deep learning", "opencv"),
    "data science": _m(150, 0.85, "intermediate", "python", "machine learning"),
    "data engineering": _m(150, 0.85, "intermediate", "spark", "kafka", "python"),
    "spark": _m(120, 0.80, "advanced", "hadoop", "kafka"),
    "kafka": _m(80, 0.80, "intermediate", "rabbitmq", "spark"),

    # Soft skills
    "communication": _m(40, 1.0, "beginner", "presentation", "writing"),
    "leadership": _m(80, 1.0, "intermediate", "management", "mentoring"),
    "agile": _m(30, 0.95, "beginner", "scrum", "kanban"),
    "scrum": _m(20, 0.90, "beginner", "agile", "kanban"),
    "system design": _m(150, 0.90, "advanced", "architecture", "distributed systems"),
}


class SkillMetadataTable:
    """Metadata lookup keyed by resolved skill key, so aliases share an entry."""

    def __init__(self, resolver: SkillResolver, table: dict[str, SkillMetadata] | None = None) -> None:
        self._by_key: dict[str, SkillMetadata] = {}
        for name, meta in (table if table is not None else BUILTIN_METADATA).items():
            self._by_key.setdefault(resolver.key(name), meta)
        self._resolver = resolver

    def __len__(self) -> int:
        return len(self._by_key)

    def get(self, skill: str) -> SkillMetadata:
        return self._by_key.get(self._resolver.key(skill), DEFAULT_METADATA)
