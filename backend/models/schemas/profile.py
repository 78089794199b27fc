"""Candidate profile and job requirement records consumed by the scorer and gap analyzer."""

from pydantic import BaseModel


class CandidateSkill(BaseModel):
    name: str
    proficiency: str = ""  # beginner, intermediate, advanced, expert, "" = unspecified
    years_of_experience: float = 0.0

    model_config = {"extra": "forbid"}


class WorkHistoryEntry(BaseModel):
    title: str = ""
    industry: str = ""
    duration_months: int = 0
    is_current: bool = False

    model_config = {"extra": "forbid"}


class EducationEntry(BaseModel):
    degree_level: str = ""  # high_school, certificate, diploma, associate, bachelor, master, professional, doctorate, other
    field_of_study: str = ""

    model_config = {"extra": "forbid"}


class CandidateProfile(BaseModel):
    """The candidate side of a match. Supplied per request, never stored."""
    skills: list[CandidateSkill] = []
    years_of_experience: float = 0.0  # 0 = infer from work history
    work_history: list[WorkHistoryEntry] = []
    education: list[EducationEntry] = []
    location_city: str = ""
    location_country: str = ""
    willing_to_relocate: bool = False
    remote_preference: str = ""  # remote, hybrid, on_site, any

    model_config = {"extra": "forbid"}


class JobRequirements(BaseModel):
    """Requirements extracted from a job posting."""
    title: str = ""
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    min_years_experience: float = 0.0
    max_years_experience: float = 0.0  # 0 = no upper bound
    required_degree_level: str = ""  # "" = no requirement
    preferred_fields: list[str] = []
    location_city: str = ""
    location_country: str = ""
    location_type: str = ""  # remote, hybrid, on_site
    industry: str = ""
    related_industries: list[str] = []
    experience_level: str = ""  # internship, entry, mid, senior, lead, executive

    model_config = {"extra": "forbid"}
