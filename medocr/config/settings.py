from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    extraction_provider: str = "gemini"
    docx_engine: str = "mammoth"

    gemini_api_key: str = ""
    gemini_api_url: str = ""
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model_name: str = "gemini-2.0-flash"
    gemini_timeout_seconds: int = 90
    gemini_temperature: float = Field(default=0.1, ge=0.0, le=0.2)
    gemini_max_output_tokens: int = 4096

    max_upload_bytes: int = 20 * 1024 * 1024

    cors_allow_origins: list[str] = ["*"]
    static_dir: str = "public"
