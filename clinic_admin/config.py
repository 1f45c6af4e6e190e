from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Global client settings loaded from environment.
    - Keep defaults light for dev.
    - Override via .env or real env vars.
    """

    APP_NAME: str = "clinic_admin"
    APP_DEBUG: bool = True

    # Backend REST API, e.g. http://localhost:8081 (paths start with /api/...)
    API_BASE_URL: str = "http://localhost:8081"
    # None = no timeout enforced by the client
    API_TIMEOUT_SECONDS: Optional[float] = None

    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def api_base_url(self) -> str:
        """Base URL without a trailing slash so that "/api/..." paths can be appended."""
        return self.API_BASE_URL.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
