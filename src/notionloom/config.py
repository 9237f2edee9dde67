# notionloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT, NOTION_API_ORIGIN
from .log_config import LogLevel


class ClientSettings(BaseSettings):
    """
    Manages user-configurable settings for the notionloom client,
    primarily loaded from environment variables or a .env file.

    Settings are frozen once created; a client never changes its
    configuration during its lifetime.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),  # Look in both .env and secrets.env
        env_file_encoding="utf-8",
        # Environment variables are prefixed, e.g. NOTIONLOOM_AUTH
        env_prefix="NOTIONLOOM_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    auth: str | None = Field(
        default=None, description="Default API key or access token (optional)"
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        ge=0,
        description="Whole-request timeout in milliseconds; 0 disables it",
    )
    base_url: str = Field(
        default=NOTION_API_ORIGIN,
        description="API origin; the versioned path prefix is appended by the client",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARN,
        description="Minimum level for request start/end log lines",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )


@lru_cache
def get_settings() -> ClientSettings:
    """
    Provides access to the client settings.

    Settings are loaded from environment variables (prefixed with 'NOTIONLOOM_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        ClientSettings: The settings instance.
    """
    return ClientSettings()
