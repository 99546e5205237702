import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LeagueSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Logging Configuration
    log_level: str = Field(
        "WARNING",
        description="Logging level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL).",
    )

    # Scoring Settings
    win_points: int = Field(3, ge=0, description="Points awarded for a win.")
    draw_points: int = Field(1, ge=0, description="Points awarded to each team for a draw.")
    loss_points: int = Field(0, ge=0, description="Points awarded for a loss.")

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="LEAGUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> LeagueSettings:
    """Loads and validates application settings."""
    try:
        settings = LeagueSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in LOG_LEVELS:
            logging.warning(
                f"Invalid LEAGUE_LOG_LEVEL '{settings.log_level}' found in .env or environment. Using WARNING."
            )
            settings.log_level = "WARNING"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: LeagueSettings = load_settings()
