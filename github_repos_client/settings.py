"""Client settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

API_BASE = "https://api.github.com"
DEFAULT_USER_AGENT = "github-repos-client"


class Settings(BaseSettings):
    """Settings for the GitHub repos client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    # "user:password", used only when no token is configured
    github_basic_auth: str | None = None
    github_api_url: str = API_BASE
    github_user_agent: str = DEFAULT_USER_AGENT
    github_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
