"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="UIFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Code generation defaults
    default_framework: str = Field(default="react", description="Default output framework")
    include_styles: bool = Field(default=True, description="Emit component styles")
    format_output: bool = Field(default=True, description="Indent generated code")
    component_name: str = Field(
        default="MyComponent", min_length=1, description="Generated React component name"
    )
    document_title: str = Field(default="Generated Component", description="HTML <title>")

    # Caching
    enable_cache: bool = Field(default=True, description="Enable generated code caching")
    cache_size: int = Field(default=128, gt=0, description="Cache max size")
    cache_ttl: int = Field(default=600, gt=0, description="Cache TTL (seconds)")

    # Design documents
    max_document_size: int = Field(
        default=2 * 1024 * 1024, gt=0, description="Max design document size (bytes)"
    )
    max_document_depth: int = Field(default=64, gt=0, description="Max JSON nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
