from typing import Any

from pydantic import BaseModel


class APIResponse(BaseModel):
    """Envelope returned by every endpoint."""
    success: bool = True
    data: Any = None
    error: str | None = None


class SearchResponse(APIResponse):
    total: int = 0


class HealthData(BaseModel):
    status: str = "ok"
    skills_loaded: int = 0
    resources_loaded: int = 0
