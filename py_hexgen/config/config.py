"""Configuration management."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Generation settings pulled from HEXGEN_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="HEXGEN_", env_file=".env", extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="json", description="Logging format (json or console)"
    )

    # Generation Configuration
    default_seed: Optional[str] = Field(
        default=None, description="Seed used when a caller does not pass one"
    )
    feature_chance: int = Field(
        default=15,
        ge=0,
        le=100,
        description="Percentage chance that a generated hex gets a feature",
    )
    region_radius: int = Field(
        default=2, ge=0, description="Spiral radius of a generated region"
    )
    faction_relationship_scope: Literal["all", "neighbors"] = Field(
        default="all",
        description="Link new factions to every faction or only to neighboring domains",
    )


settings = Settings()
