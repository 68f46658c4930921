"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables.

    Values are fixed when the process starts; the model is frozen so the
    override constants cannot change at runtime.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = Field(default="github-actions-hooks", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Dispatch
    dispatch_timeout: float = Field(default=5.0, gt=0, alias="DISPATCH_TIMEOUT")
    options_file: Path = Field(default=Path("options.json"), alias="OPTIONS_FILE")

    # Override constants (take effect only when stored settings are unset)
    hooks_api: Optional[str] = Field(default=None, alias="GITHUB_ACTIONS_HOOKS_API")
    hooks_token: Optional[str] = Field(default=None, alias="GITHUB_ACTIONS_HOOKS_TOKEN")

    @property
    def has_api_override(self) -> bool:
        """Whether GITHUB_ACTIONS_HOOKS_API is defined."""
        return self.hooks_api is not None

    @property
    def has_token_override(self) -> bool:
        """Whether GITHUB_ACTIONS_HOOKS_TOKEN is defined."""
        return self.hooks_token is not None

    @property
    def has_overrides(self) -> bool:
        """Whether both override constants are defined."""
        return self.has_api_override and self.has_token_override


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
