"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match the in-memory feed behavior

Collaborators:
  - main.py: reads settings for CORS, seeding and the batch flusher
  - container.py: reads settings for analytics and notifier wiring
  - schemas.py: reads settings for request validation limits

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic, pure configuration

Notes:
  - Singleton via lru_cache
  - Batch interval defaults to 10 minutes
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/production/test)
        allowed_origins: Comma-separated CORS origins
        log_level: Root log level for the "kudos" logger
        log_json: Emit JSON log lines (default: True)
        seed_fixtures: Load demo teams/users/recognitions at startup
        notify_batch_mode: Queue notifications for periodic flush
        notify_batch_interval_seconds: Flush interval (default: 600)
        slack_webhook_url: Incoming webhook URL (empty disables Slack)
        slack_timeout_seconds: HTTP timeout for the Slack webhook call
        analytics_top_keywords: Keywords returned per team snapshot
        analytics_min_keyword_length: Shortest token counted as a keyword
        max_message_chars: Maximum recognition message length
        max_emoji_chars: Maximum emoji tag length
    """

    # Environment
    app_env: str = "development"

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Bootstrap
    seed_fixtures: bool = True

    # Notifications
    notify_batch_mode: bool = False
    notify_batch_interval_seconds: float = 10 * 60
    slack_webhook_url: str = ""
    slack_timeout_seconds: float = 10.0

    # Analytics
    analytics_top_keywords: int = 5
    analytics_min_keyword_length: int = 4

    # API limits
    max_message_chars: int = 500
    max_emoji_chars: int = 16

    @field_validator("notify_batch_interval_seconds", "slack_timeout_seconds")
    @classmethod
    def seconds_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("interval and timeout values must be greater than 0")
        return v

    @field_validator("analytics_top_keywords", "analytics_min_keyword_length")
    @classmethod
    def analytics_values_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("analytics settings must be greater than 0")
        return v

    @field_validator("max_message_chars", "max_emoji_chars")
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("length limits must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_valid(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(
                "log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL"
            )
        return level

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
