"""Settings and configuration management for Autoname Cleaner."""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> List[str]:
    return [item.strip().lower() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AUTONAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Docker configuration
    docker_host: str | None = Field(
        default=None,
        description="Docker daemon host URL (defaults to Docker's standard detection)",
    )

    docker_timeout_s: int = Field(
        default=60,
        description="Timeout in seconds for each request sent to the Docker daemon",
    )

    # Name classification
    use_name_dictionary: bool = Field(
        default=True,
        description="Only match names built from the runtime's adjective/surname word list",
    )

    extra_adjectives: str = Field(
        default="",
        description="Comma-separated adjectives to accept in addition to the built-in list",
    )

    extra_surnames: str = Field(
        default="",
        description="Comma-separated surnames to accept in addition to the built-in list",
    )

    # Presentation
    ui_mode: Literal["interactive", "prompt"] = Field(
        default="interactive",
        description="Front end used for confirmation (interactive or prompt)",
    )

    image_display_width: int = Field(
        default=40,
        ge=4,
        description="Maximum number of image characters shown in the candidate table",
    )

    # Logging configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="text",
        description="Log format (json or text)",
    )

    audit_enabled: bool = Field(
        default=True,
        description="Emit structured audit events for every removal attempt",
    )

    @property
    def extra_adjectives_list(self) -> List[str]:
        """Parse extra adjectives into a list."""
        return _split_csv(self.extra_adjectives)

    @property
    def extra_surnames_list(self) -> List[str]:
        """Parse extra surnames into a list."""
        return _split_csv(self.extra_surnames)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
