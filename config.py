"""
TitleGuard — Application Settings
Loaded via pydantic-settings from environment variables / .env file.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Classifier ────────────────────────────────────────────────────────────
    block_threshold: int = 10
    heuristics_enabled: bool = True      # False = user rules only
    classify_cache_size: int = 4096      # 0 = no memoization

    # ── Tagger ────────────────────────────────────────────────────────────────
    # "spacy" needs `python -m spacy download en_core_web_sm` and falls back
    # to the lexicon tagger when the model is missing; "lexicon" needs no model.
    tagger_backend: str = "spacy"
    spacy_model: str = "en_core_web_sm"

    # ── App ───────────────────────────────────────────────────────────────────
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    return Settings()
