"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[1] / "data" / "questions.json"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Address the server listens on.
        port: TCP port the server listens on.
        seed_path: JSON document loaded into the store at startup.
        cors_allow_origins: Origins accepted by the CORS policy.
        cors_allow_methods: Methods declared by the CORS policy.
        cors_allow_headers: Request headers accepted by the CORS policy.
        rate_limit_enabled: Toggle for per-client rate limiting.
        rate_limit_default: Rate limit applied to the question endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Question Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 3030
    seed_path: Path = DEFAULT_SEED_PATH

    cors_allow_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_allow_headers: list[str] = ["content-type"]

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
