"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pathlib import Path
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# OPEN DATA CATALOG
# =============================================================================
# dados.gov.br public API. Most endpoints require gov.br authentication, so
# the service treats it as best-effort and falls back to the bundled dataset.
# =============================================================================

DADOS_GOV_API_BASE = "https://dados.gov.br/dados/api/publico"

DEFAULT_FALLBACK_DATASET = Path(__file__).resolve().parent / "data" / "obras_rj.json"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "IEOP - Índice de Eficiência de Obras Públicas"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Project data source
    DATA_SOURCE_URL: str = f"{DADOS_GOV_API_BASE}/conjuntos-dados"
    DATA_SOURCE_DATASET: str = "obras rio de janeiro"
    DATA_SOURCE_TIMEOUT_SECONDS: float = Field(default=8.0, ge=1.0, le=60.0)
    FALLBACK_DATASET_PATH: Path = DEFAULT_FALLBACK_DATASET

    @model_validator(mode="after")
    def validate_production_settings(self):
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached Settings instance."""
    return Settings()
