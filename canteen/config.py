"""
Configuration management for the Canteen Meal Planner
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Canteen Meal Planner"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = ""  # overrides the DEBUG-derived level when set

    # HTTP
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Planning
    PLANNING_DAYS: int = 5  # rolling window shown to employees
    REMARKS_MAX_LENGTH: int = 180

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()
