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
    ]
    debug: bool = False

    # Reasoning text generator
    reasoning_mode: str = "template"  # "template" | "gemini"
    reasoning_seed: int | None = None  # fixed seed makes template choice deterministic

    # Scorer thresholds (tunable, not business rules)
    course_min_score: float = 0.3
    course_top_n: int = 5
    mentor_min_score: float = 0.4
    mentor_top_n: int = 3
    project_min_score: float = 0.5
    project_top_n: int = 4
    scoring_max_workers: int = 1  # >1 scores candidates in a thread pool

    # Recommendation cache
    recommendation_cache_ttl_minutes: int = 15
    employee_recommendation_cache_ttl_minutes: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
