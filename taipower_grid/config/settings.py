from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GridSettings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console or json

    # Output
    display_precision: int = 6  # decimal places for latitude/longitude

    # Parser
    parser_config_path: Optional[str] = None  # YAML file for ParserConfig

    model_config = SettingsConfigDict(
        env_prefix="TAIPOWER_GRID_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    @field_validator("display_precision")
    @classmethod
    def _check_display_precision(cls, value: int) -> int:
        if not 0 <= value <= 12:
            raise ValueError("display_precision must be between 0 and 12")
        return value


@lru_cache()
def get_settings() -> GridSettings:
    return GridSettings()
