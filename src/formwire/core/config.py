"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Short.MAX_VALUE of the client protocol
DEFAULT_MAX_FORM_ID = 32767


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FORMWIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Session tracking
    max_form_id: int = Field(
        default=DEFAULT_MAX_FORM_ID,
        ge=0,
        description="Highest form id (inclusive) before the counter wraps to 0",
    )

    # Wire limits
    max_form_size: int = Field(default=512 * 1024, gt=0, description="Max encoded form size (bytes)")
    max_json_depth: int = Field(default=20, gt=0, description="Max nesting depth of form JSON")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
