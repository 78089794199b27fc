from pydantic import BaseModel, Field

from models.schemas.profile import CandidateProfile, JobRequirements
from models.schemas.resources import UserPreferences

_STRICT = {"extra": "forbid"}


class MatchRequest(BaseModel):
    profile: CandidateProfile
    job: JobRequirements

    model_config = _STRICT


class RecommendRequest(BaseModel):
    profile: CandidateProfile
    job: JobRequirements
    preferences: UserPreferences = UserPreferences()

    model_config = _STRICT


class NormalizeRequest(BaseModel):
    skills: list[str] = Field(..., min_length=1, max_length=500, description="Raw skill strings to normalize")

    model_config = _STRICT


class ExtractRequest(BaseModel):
    text: str = Field("", max_length=50000, description="Free text to extract skills from")
    include_unknown: bool = False

    model_config = _STRICT
