"""Learning resource catalog entries and the user's learning preferences."""

from pydantic import BaseModel


class ResourceEntry(BaseModel):
    """A single item in the learning resource catalog."""
    id: str
    title: str
    description: str = ""
    url: str = ""
    provider: str = ""
    resource_type: str = "course"  # course, certification, book, documentation, practice, video
    difficulty: str = "all_levels"  # beginner, intermediate, advanced, expert, all_levels
    cost_type: str = "free"  # free, free_audit, freemium, paid, subscription
    cost_usd: float = 0.0
    duration_hours: float = 0.0  # 0 = self-paced / unknown
    duration_label: str = ""
    skills: list[str] = []
    primary_skill: str = ""
    rating: float = 0.0
    rating_count: int = 0
    has_certificate: bool = False
    has_hands_on: bool = False
    is_verified: bool = False

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def is_free(self) -> bool:
        return self.cost_type in ("free", "free_audit")


class UserPreferences(BaseModel):
    prefer_free: bool = False
    max_budget_usd: float = 0.0  # 0 = no budget limit
    weekly_hours_available: float = 0.0  # <= 0 falls back to the configured default
    prefer_hands_on: bool = False
    prefer_certificates: bool = False
    target_date: str = ""  # YYYY-MM-DD
    preferred_resource_types: list[str] = []
    excluded_providers: list[str] = []

    model_config = {"extra": "forbid"}
