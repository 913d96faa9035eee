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
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # External scorer
    scorer_enabled: bool = True
    scorer_timeout_seconds: float = 8.0
    scorer_max_concurrency: int = 8
    rank_budget_seconds: float = 30.0  # shared by all external attempts in one ranking

    # Ranking
    default_top_n: int = 5
    max_top_n: int = 100
    top_match_threshold: int = 90
    high_stipend_threshold: int = 20000
    remote_work_type: str = "remote"
    tech_category: str = "tech"
    beginner_level: str = "beginner"

    # Gap analysis
    priority_skill_cap: int = 6
    resources_per_skill: int = 2
    default_gap_categories: list[str] = [
        "Data Analytics Intern",
        "Software Development Intern",
    ]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
