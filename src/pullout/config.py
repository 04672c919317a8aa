"""Pull-out schedule configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class PulloutConfig(BaseSettings):
    """Pull-out schedule configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Roster (owned by the student store; read-only here)
    roster_path: str = Field(
        default="data/students.json",
        description="JSON file holding the student roster",
    )

    # Query settings
    upcoming_window_minutes: int = Field(
        default=30,
        ge=0,
        description="Lookahead window for upcoming pull-outs",
    )
    poll_interval_seconds: int = Field(
        default=60,
        gt=0,
        description="How often --watch re-queries the schedule",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: PulloutConfig | None = None


def get_config() -> PulloutConfig:
    """Get the pull-out configuration singleton.

    Returns:
        PulloutConfig: Configuration instance
    """
    global _config
    if _config is None:
        _config = PulloutConfig()
    return _config
