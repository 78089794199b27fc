import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool | None = None  # None = JSON when stdout is not a TTY

    # Rate limiting on the write endpoints
    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True

    # Matching and planning
    fuzzy_match_threshold: float = 0.85
    default_weekly_hours: float = 10.0
    catalog_path: str = ""  # empty = bundled catalog
    gap_include_related_skills: bool = False
    gap_max_related_skills: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
