"""Application configuration loaded from environment variables."""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Defaults applied when a request omits them
    default_daily_goal: float = 2500
    default_bedtime_hour: int = 20

    # Achievement popup queue
    achievement_history_size: int = 100

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    class Config:
        env_prefix = "HYDRATION_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
