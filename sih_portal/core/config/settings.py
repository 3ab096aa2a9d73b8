from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = "sqlite:///./sih_portal.db"

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "SIH Portal API"
    DEBUG: bool = False
    CORS_ORIGINS: list = ["*"]

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Logging settings
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # Rate limiting, only active when REDIS_URL is set
    REDIS_URL: Optional[str] = None
    RATE_LIMIT_PER_MINUTE: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True

@lru_cache()
def get_settings() -> Settings:
    """
    Get settings instance with caching
    Returns:
        Settings instance
    """
    return Settings()
