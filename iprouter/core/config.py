from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class RouterSettings(BaseSettings):
    """Router simulator configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="IPROUTER_", env_file=".env", extra="ignore"
    )

    activity_log_path: Path = Field(
        Path("router.log"),
        description="File that ADD/DEL/FWD/DROP records are appended to.",
    )
    log_level: str = Field(
        "WARNING", description="Minimum level for diagnostic logging on stderr."
    )
    debug_scopes: tuple[str, ...] = Field(
        (),
        description="Module scopes (e.g. core.routing_table) to log at DEBUG.",
    )
    colorize_logs: bool = Field(False, description="Colorize diagnostic log output.")
    prompt: str = Field("> ", description="Prompt shown in interactive sessions.")
    show_banner: bool = Field(
        True, description="Print the command summary when a session starts."
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
