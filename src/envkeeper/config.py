"""envkeeper configuration management."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from ENVKEEPER_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="ENVKEEPER_",
        extra="ignore",
    )

    # Replacement shown by list() when values are hidden
    hidden_marker: str = "[HIDDEN]"

    # Violation reports show at most this many characters of a value
    preview_length: int = Field(default=10, ge=0)
    preview_suffix: str = "..."

    def preview(self, value: str) -> str:
        """Truncate a value for display in length/pattern violations."""
        return value[: self.preview_length] + self.preview_suffix


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
