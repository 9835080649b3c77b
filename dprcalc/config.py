"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every variable is prefixed with ``DPRCALC_`` (e.g. ``DPRCALC_TARGET_AC=17``).
    """

    model_config = SettingsConfigDict(
        env_prefix="DPRCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Default Combat Context
    # ==========================================================================
    # Used by the CLI to build the starting CombatContext before command-line
    # overrides are applied. The library API uses CombatContext defaults.
    proficiency_bonus: int = 3
    ability_modifier: int = 4  # Spellcasting / attack ability modifier
    caster_level: int = 5
    target_ac: int = 15
    expected_targets: int = 1  # 1 = let the AoE estimator decide
    expected_encounters: int = 4  # Encounters per adventuring day
    clustered: bool = False  # Assume enemies bunch up inside AoE templates

    # Output
    top_spells_limit: int = 10  # Rows shown by "spells best"

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
