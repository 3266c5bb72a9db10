from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_base_url: str = "http://localhost:8080/api/statements"
    api_timeout_seconds: float = 30.0

    max_upload_size_bytes: int = 10 * 1024 * 1024
    accepted_media_types: list[str] = ["application/pdf"]
