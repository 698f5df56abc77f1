"""Configuration management for Current Properties using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_RULES_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CURRENT_PROPERTIES_",
        extra="ignore",
    )

    # Rules tables
    rules_dir: Path | None = Field(
        default=None,
        description="Directory with armaments.yaml and races.yaml (bundled tables if unset)",
    )
    load_strength_offset: int = Field(
        default=20,
        description="Cargo weight bonus carried without malus above the bearer's strength",
    )
    max_missing_strength: int = Field(
        default=10,
        ge=0,
        description="Most strength an armament may lack and still be wearable",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    @property
    def armaments_file(self) -> Path:
        """Get the armaments table path."""
        return (self.rules_dir or BUNDLED_RULES_DIR) / "armaments.yaml"

    @property
    def races_file(self) -> Path:
        """Get the races table path."""
        return (self.rules_dir or BUNDLED_RULES_DIR) / "races.yaml"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
